"""Core dependency injection infrastructure.

Protocol-based abstractions for everything the deployment tool touches
outside the Python process, plus their production implementations.
"""

from radio_deploy.core.protocols import (
    Logger,
    ProcessExecutor,
    ProcessResult,
    EnvironmentProvider,
    ToolLocator,
    ConfigLoader,
)

from radio_deploy.core.implementations import (
    ConsoleLogger,
    SubprocessExecutor,
    SystemEnvironmentProvider,
    SystemToolLocator,
    YamlConfigLoader,
)

__all__ = [
    # Protocols
    "Logger",
    "ProcessExecutor",
    "ProcessResult",
    "EnvironmentProvider",
    "ToolLocator",
    "ConfigLoader",
    # Implementations
    "ConsoleLogger",
    "SubprocessExecutor",
    "SystemEnvironmentProvider",
    "SystemToolLocator",
    "YamlConfigLoader",
]
