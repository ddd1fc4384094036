"""Deploy command - cross-compile and copy binary + service unit to TARGET"""
from typing import Optional

from radio_deploy.core import (
    EnvironmentProvider,
    ProcessExecutor,
    Logger
)
from radio_deploy.deploy import DeploymentRunner, DeploymentResult, build_invocations
from radio_deploy.utils.config import load_deploy_config

TARGET_ENV_VAR = 'TARGET'


def setup_parser(parser):
    """Setup argument parser for deploy command"""
    parser.add_argument(
        '--host',
        help=f'Destination host, e.g. pi@radio.local (default: ${TARGET_ENV_VAR})'
    )
    parser.add_argument(
        '--config',
        help='Path to deployment YAML config (default: ./deploy.yaml if present)'
    )
    parser.add_argument(
        '--release',
        action='store_true',
        help='Build and ship the release profile instead of debug'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show full command lines'
    )


def resolve_target(host: Optional[str], env: EnvironmentProvider) -> str:
    """Pick the target address: --host wins, then $TARGET, else empty.

    An empty result is not an error here; scp reports it when it runs.
    """
    if host:
        return host
    return env.get(TARGET_ENV_VAR) or ''


def run_deploy(
    args,
    env_provider: EnvironmentProvider,
    process_executor: ProcessExecutor,
    logger: Logger
) -> DeploymentResult:
    """Build the plan from args + environment, then run it.

    Config and target are resolved before the first process starts.

    Raises:
        ConfigError: If the config file is invalid
        ProcessExecutionError: From the first failing task
    """
    config = load_deploy_config(
        getattr(args, 'config', None),
        profile='release' if getattr(args, 'release', False) else None
    )
    target = resolve_target(getattr(args, 'host', None), env_provider)
    invocations = build_invocations(target, config)

    runner = DeploymentRunner(
        process_executor=process_executor,
        logger=logger,
        verbose=getattr(args, 'verbose', False)
    )
    return runner.run(invocations, target=target)


def execute(args):
    """Execute deploy command.

    Returns 0 on success. A failing task raises ProcessExecutionError, which
    the CLI turns into the process exit status.
    """
    from radio_deploy.core import (
        SubprocessExecutor,
        SystemEnvironmentProvider,
        ConsoleLogger
    )

    run_deploy(
        args,
        env_provider=SystemEnvironmentProvider(),
        process_executor=SubprocessExecutor(),
        logger=ConsoleLogger(verbose=getattr(args, 'verbose', False))
    )
    return 0
