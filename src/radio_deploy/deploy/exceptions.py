"""
Deployment exceptions.

Custom exceptions for deployment failures with actionable error messages.
"""

import subprocess
from typing import Optional


class DeploymentError(Exception):
    """
    Raised when deployment fails at any step.

    Examples:
        - Cross-compilation failed
        - scp could not reach the target
        - Configuration file is invalid
    """
    pass


class ProcessExecutionError(DeploymentError):
    """
    Raised when an external program cannot be started or exits non-zero.

    Attributes:
        program: Program name of the failed invocation (e.g. "scp")
        arguments: Argument string of the failed invocation
        cause: Underlying error, an OSError or ValueError when the program
            could not be started, a subprocess.CalledProcessError for a
            non-zero exit
        returncode: Exit status of the program, None if it never ran
    """

    def __init__(
        self,
        program: str,
        arguments: str,
        cause: BaseException,
        returncode: Optional[int] = None
    ):
        self.program = program
        self.arguments = arguments
        self.cause = cause
        self.returncode = returncode
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.returncode is None:
            reason = f"could not be started: {self.cause}"
        else:
            reason = f"exited with status {self.returncode}"
        command = f"{self.program} {self.arguments}".strip()
        return f"Task '{command}' {reason}"

    @classmethod
    def from_returncode(cls, program: str, arguments: str, argv: list, returncode: int):
        """Build the error for a process that ran and exited non-zero."""
        return cls(
            program,
            arguments,
            subprocess.CalledProcessError(returncode, argv),
            returncode=returncode
        )


class ConfigError(DeploymentError):
    """Raised when the deployment configuration cannot be loaded or is invalid."""
    pass
