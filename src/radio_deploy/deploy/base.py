"""
Deployment data model.

Invocation is the unit of work: one external program plus its argument
string. DeployConfig holds the knobs that shape the fixed invocation list,
and DeploymentResult reports a finished run.
"""

import shlex
from dataclasses import dataclass, field


# Rust target triple for ARMv7 hard-float Linux boards (Raspberry Pi 2/3/4)
DEFAULT_TARGET_TRIPLE = "armv7-unknown-linux-gnueabihf"


@dataclass(frozen=True)
class Invocation:
    """
    One external-process call.

    Attributes:
        program: Executable name, resolved through PATH (e.g. "cross", "scp")
        arguments: Argument string, split with shell rules at execution time
    """
    program: str
    arguments: str

    @property
    def argv(self) -> list[str]:
        """Argument vector handed to the process executor."""
        return [self.program, *shlex.split(self.arguments)]

    @property
    def command_line(self) -> str:
        return f"{self.program} {self.arguments}".strip()


@dataclass(frozen=True)
class DeployConfig:
    """
    Settings for building the deployment plan.

    Attributes:
        toolchain: Cross-compilation driver (cargo-compatible CLI)
        target_triple: Rust target triple to build for
        profile: "debug" or "release"; selects build flags and artifact dir
        binary: Name of the built binary
        service_file: Path of the systemd unit file to ship alongside it
        copy_program: Secure-copy program
        remote_dir: Destination directory on the target, relative to $HOME
    """
    toolchain: str = "cross"
    target_triple: str = DEFAULT_TARGET_TRIPLE
    profile: str = "debug"
    binary: str = "radio"
    service_file: str = "radio.service"
    copy_program: str = "scp"
    remote_dir: str = "./"

    @property
    def artifact_path(self) -> str:
        """Local path of the cross-compiled binary."""
        return f"target/{self.target_triple}/{self.profile}/{self.binary}"


@dataclass
class DeploymentResult:
    """
    Result of a deployment run. Only a run where every invocation completed
    produces one; a failed run raises ProcessExecutionError instead.

    Attributes:
        completed: Invocations that ran to completion, in order
        target: Target address the files were copied to
    """
    completed: list[Invocation] = field(default_factory=list)
    target: str = ""
