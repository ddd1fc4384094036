"""Production implementations of dependency injection protocols.

These wrap the real subprocess, os.environ, shutil.which and PyYAML. Tests
use mocks instead.
"""

import os
import shutil
import subprocess
import sys
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List

from radio_deploy.core.protocols import ProcessResult


class ConsoleLogger:
    """Production logger that prints to console (stdout/stderr)."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def info(self, message: str) -> None:
        """Print info message to stdout."""
        print(message, flush=True)

    def warning(self, message: str) -> None:
        """Print warning message to stdout."""
        print(f"Warning: {message}", flush=True)

    def error(self, message: str) -> None:
        """Print error message to stderr."""
        print(f"Error: {message}", file=sys.stderr, flush=True)

    def debug(self, message: str) -> None:
        """Print debug message to stdout (only in verbose mode)."""
        if self.verbose:
            print(f"Debug: {message}", flush=True)


class SubprocessExecutor:
    """Production process executor using subprocess.run.

    Output is inherited from the parent, so compiler and scp progress appear
    directly on the console.
    """

    def run(self, cmd: List[str]) -> ProcessResult:
        """Run command to completion and return its result."""
        completed = subprocess.run(cmd)
        return ProcessResult(returncode=completed.returncode)


class SystemEnvironmentProvider:
    """Production environment provider using os.environ."""

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get a single environment variable."""
        return os.environ.get(name, default)


class SystemToolLocator:
    """Production tool locator using real shutil.which."""

    def find_tool(self, tool_name: str) -> Optional[str]:
        """Find tool in PATH."""
        return shutil.which(tool_name)


class YamlConfigLoader:
    """Production config loader using real YAML parser."""

    def exists(self, path: str) -> bool:
        return Path(path).is_file()

    def load_yaml(self, path: str) -> Dict[str, Any]:
        """Load YAML file and return parsed dictionary (empty file -> {})."""
        with open(path, 'r') as f:
            return yaml.safe_load(f) or {}
