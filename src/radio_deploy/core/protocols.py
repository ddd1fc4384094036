"""Protocol definitions for dependency injection.

Every external dependency of the deployment tool (process spawning,
environment lookup, tool discovery, config parsing, console output) is
described here as a typing.Protocol. Production classes live in
implementations.py; tests pass Mock(spec=...) objects instead.
"""

from dataclasses import dataclass
from typing import Protocol, Dict, Any, Optional, List


@dataclass
class ProcessResult:
    """Outcome of a finished external process.

    Attributes:
        returncode: Exit status reported by the OS
    """
    returncode: int


class Logger(Protocol):
    """Abstraction for console output.

    Replaces direct print() statements so progress lines can be asserted on.
    """

    def info(self, message: str) -> None:
        """Log informational message."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str) -> None:
        """Log error message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...


class ProcessExecutor(Protocol):
    """Abstraction for running an external program to completion.

    Implementations block until the process exits. They raise OSError
    (FileNotFoundError, PermissionError, ...) when the program cannot be
    started (ValueError for an argv the OS rejects) and otherwise report the
    exit status in the result; they never raise on a non-zero status.
    """

    def run(self, cmd: List[str]) -> ProcessResult:
        """Run command, wait for it and return its result."""
        ...


class EnvironmentProvider(Protocol):
    """Abstraction for environment access.

    Wraps os.environ so tests can supply TARGET without touching the real
    process environment.
    """

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get a single environment variable."""
        ...


class ToolLocator(Protocol):
    """Abstraction for external tool discovery (wraps shutil.which)."""

    def find_tool(self, tool_name: str) -> Optional[str]:
        """Find tool in PATH and return absolute path, or None if not found."""
        ...


class ConfigLoader(Protocol):
    """Abstraction for configuration file loading."""

    def exists(self, path: str) -> bool:
        """Check whether a config file is present."""
        ...

    def load_yaml(self, path: str) -> Dict[str, Any]:
        """Load YAML file and return parsed dictionary."""
        ...
