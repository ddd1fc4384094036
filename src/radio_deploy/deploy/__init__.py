"""
Deployment subsystem.

Cross-compiles the radio daemon for ARM hard-float Linux and copies the
binary plus its systemd unit to a remote host with scp.

Public API:
    - Invocation, DeployConfig, DeploymentResult: Data model
    - build_invocations: Fixed, ordered deployment plan
    - DeploymentRunner: Sequential executor
    - DeploymentError, ProcessExecutionError, ConfigError: Exceptions
"""

from .base import Invocation, DeployConfig, DeploymentResult
from .exceptions import DeploymentError, ProcessExecutionError, ConfigError
from .plan import build_invocations
from .runner import DeploymentRunner

__all__ = [
    # Data model
    "Invocation",
    "DeployConfig",
    "DeploymentResult",

    # Plan + runner
    "build_invocations",
    "DeploymentRunner",

    # Exceptions
    "DeploymentError",
    "ProcessExecutionError",
    "ConfigError",
]
