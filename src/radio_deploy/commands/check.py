"""Pre-flight checker: are the external tools and TARGET in place?"""
from typing import List, Tuple

from radio_deploy.core import (
    EnvironmentProvider,
    ToolLocator,
    Logger
)
from radio_deploy.deploy import DeployConfig
from radio_deploy.commands.deploy import TARGET_ENV_VAR


class ToolCheck:
    """Represents a single pre-flight check"""
    def __init__(self, name: str, status: str, message: str):
        self.name = name
        self.status = status  # 'pass', 'warn', 'fail'
        self.message = message


class DeployChecker:
    """Checks the local machine can run a deployment.

    Args:
        config: Deployment settings naming the programs to look for
        env_provider: Environment access (for TARGET)
        tool_locator: External tool discovery
        logger: Console output
    """

    def __init__(
        self,
        config: DeployConfig,
        env_provider: EnvironmentProvider,
        tool_locator: ToolLocator,
        logger: Logger
    ):
        self.config = config
        self.env = env_provider
        self.tools = tool_locator
        self.log = logger

    def check_tool(self, name: str, program: str, hint: str) -> ToolCheck:
        path = self.tools.find_tool(program)
        if path:
            return ToolCheck(name, 'pass', f"{program} found at {path}")
        return ToolCheck(name, 'fail', f"{program} not found in PATH ({hint})")

    def check_toolchain(self) -> ToolCheck:
        return self.check_tool(
            'Cross toolchain',
            self.config.toolchain,
            'cargo install cross'
        )

    def check_copy_program(self) -> ToolCheck:
        return self.check_tool(
            'Secure copy',
            self.config.copy_program,
            'install openssh-client'
        )

    def check_target(self) -> ToolCheck:
        target = self.env.get(TARGET_ENV_VAR)
        if target:
            return ToolCheck('Target', 'pass', f"${TARGET_ENV_VAR}={target}")
        return ToolCheck(
            'Target',
            'warn',
            f"${TARGET_ENV_VAR} not set (pass --host or export {TARGET_ENV_VAR}=user@host)"
        )

    def run_all_checks(self) -> Tuple[List[ToolCheck], bool]:
        """Run every check.

        Returns:
            (checks, all_pass) where all_pass is False if any check failed
        """
        checks = [
            self.check_toolchain(),
            self.check_copy_program(),
            self.check_target(),
        ]
        all_pass = all(check.status != 'fail' for check in checks)
        return checks, all_pass

    def print_results(self, checks: List[ToolCheck]) -> None:
        symbols = {
            'pass': '✓',
            'warn': '⚠',
            'fail': '✗'
        }

        self.log.info("=" * 60)
        self.log.info("DEPLOYMENT PRE-FLIGHT CHECK")
        self.log.info("=" * 60)
        for check in checks:
            symbol = symbols.get(check.status, '?')
            self.log.info(f"{symbol} {check.name}: {check.message}")
        self.log.info("=" * 60)

        pass_count = sum(1 for c in checks if c.status == 'pass')
        warn_count = sum(1 for c in checks if c.status == 'warn')
        fail_count = sum(1 for c in checks if c.status == 'fail')
        self.log.info(f"Summary: {pass_count} passed, {warn_count} warnings, {fail_count} failed")


def setup_parser(parser):
    """Setup argument parser for check command"""
    parser.add_argument(
        '--config',
        help='Path to deployment YAML config (default: ./deploy.yaml if present)'
    )


def execute(args):
    """Execute pre-flight check.

    Returns:
        Exit code: 0 if nothing failed, 1 otherwise
    """
    from radio_deploy.core import (
        SystemEnvironmentProvider,
        SystemToolLocator,
        ConsoleLogger
    )
    from radio_deploy.utils.config import load_deploy_config

    checker = DeployChecker(
        config=load_deploy_config(getattr(args, 'config', None)),
        env_provider=SystemEnvironmentProvider(),
        tool_locator=SystemToolLocator(),
        logger=ConsoleLogger()
    )

    checks, all_pass = checker.run_all_checks()
    checker.print_results(checks)

    if all_pass:
        return 0
    else:
        return 1
