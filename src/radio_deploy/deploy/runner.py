"""
DeploymentRunner - execute invocations one at a time, in order.

Each invocation is announced, run to completion, then confirmed. The first
failure raises ProcessExecutionError and nothing after it runs. There are no
retries, no timeouts and no rollback of earlier steps.
"""

import logging
from typing import Iterable

from radio_deploy.core.protocols import Logger, ProcessExecutor
from .base import DeploymentResult, Invocation
from .exceptions import ProcessExecutionError

logger = logging.getLogger(__name__)


class DeploymentRunner:
    """
    Runs a deployment plan sequentially.

    Args:
        process_executor: Runs one external program to completion
        logger: Console output for the progress lines
        verbose: Also log each full command line before running it
    """

    def __init__(
        self,
        process_executor: ProcessExecutor,
        logger: Logger,
        verbose: bool = False
    ):
        self.process = process_executor
        self.log = logger
        self.verbose = verbose

    def run_invocation(self, invocation: Invocation) -> None:
        """
        Run a single invocation and wait for it.

        Raises:
            ProcessExecutionError: If the program cannot start or exits non-zero
        """
        if self.verbose:
            self.log.debug(f"$ {invocation.command_line}")

        # ValueError: unbalanced quotes in the argument string, or a NUL byte
        try:
            argv = invocation.argv
            result = self.process.run(argv)
        except (OSError, ValueError) as e:
            raise ProcessExecutionError(invocation.program, invocation.arguments, cause=e) from e

        if result.returncode != 0:
            raise ProcessExecutionError.from_returncode(
                invocation.program, invocation.arguments, argv, result.returncode
            )

    def run(self, invocations: Iterable[Invocation], target: str = "") -> DeploymentResult:
        """
        Execute invocations in order, stopping at the first failure.

        Args:
            invocations: Ordered plan, fully built before this call
            target: Target address, recorded in the result

        Returns:
            DeploymentResult listing every completed invocation

        Raises:
            ProcessExecutionError: From the first failing invocation
        """
        completed = []
        for invocation in invocations:
            self.log.info(f"Starting task: {invocation.program}")
            self.run_invocation(invocation)
            self.log.info("\tOK!")
            completed.append(invocation)
            logger.debug("completed %d task(s)", len(completed))

        return DeploymentResult(completed=completed, target=target)
