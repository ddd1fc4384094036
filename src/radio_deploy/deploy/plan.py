"""
Deployment plan - the fixed, ordered list of invocations.

    1. cross build --target armv7-unknown-linux-gnueabihf
    2. scp target/armv7-unknown-linux-gnueabihf/debug/radio TARGET:./
    3. scp radio.service TARGET:./

The target address is always passed in by the caller; nothing here reads
the environment.
"""

import shlex
from typing import Optional

from .base import DeployConfig, Invocation


VALID_PROFILES = ("debug", "release")


def remote_destination(target: str, remote_dir: str = "./") -> str:
    """
    Build the scp destination for a target address.

    No validation is done: an empty target yields ":./", which scp rejects
    when the copy actually runs.

    Example:
        remote_destination("pi@host.example.com") -> "pi@host.example.com:./"
    """
    return f"{target}:{remote_dir}"


def build_invocation(config: DeployConfig) -> Invocation:
    """Cross-compilation step for the configured target triple and profile."""
    if config.profile not in VALID_PROFILES:
        raise ValueError(
            f"Unknown build profile: {config.profile}\n"
            f"Expected one of: {', '.join(VALID_PROFILES)}"
        )

    arguments = f"build --target {shlex.quote(config.target_triple)}"
    if config.profile == "release":
        arguments += " --release"
    return Invocation(config.toolchain, arguments)


def copy_invocation(config: DeployConfig, local_path: str, target: str) -> Invocation:
    """Secure-copy step sending one local file to the target."""
    destination = remote_destination(target, config.remote_dir)
    return Invocation(
        config.copy_program,
        f"{shlex.quote(local_path)} {shlex.quote(destination)}"
    )


def build_invocations(target: str, config: Optional[DeployConfig] = None) -> list[Invocation]:
    """
    Build the ordered invocation list for one deployment.

    Args:
        target: Destination host, optionally user@host (may be empty)
        config: Plan settings (default: DeployConfig())

    Returns:
        [cross-compile, copy binary, copy service unit]
    """
    if config is None:
        config = DeployConfig()

    return [
        build_invocation(config),
        copy_invocation(config, config.artifact_path, target),
        copy_invocation(config, config.service_file, target),
    ]
