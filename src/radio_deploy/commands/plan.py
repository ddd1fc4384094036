"""Plan command - show what deploy would run, without running it"""
from radio_deploy.core import EnvironmentProvider, Logger
from radio_deploy.deploy import build_invocations
from radio_deploy.utils.config import load_deploy_config
from radio_deploy.commands.deploy import TARGET_ENV_VAR, resolve_target


def setup_parser(parser):
    """Setup argument parser for plan command"""
    parser.add_argument(
        '--host',
        help=f'Destination host (default: ${TARGET_ENV_VAR})'
    )
    parser.add_argument(
        '--config',
        help='Path to deployment YAML config (default: ./deploy.yaml if present)'
    )
    parser.add_argument(
        '--release',
        action='store_true',
        help='Show the release profile plan'
    )


def print_plan(args, env_provider: EnvironmentProvider, logger: Logger) -> int:
    config = load_deploy_config(
        getattr(args, 'config', None),
        profile='release' if getattr(args, 'release', False) else None
    )
    target = resolve_target(getattr(args, 'host', None), env_provider)
    invocations = build_invocations(target, config)

    if not target:
        logger.warning(f"${TARGET_ENV_VAR} is not set; copy tasks will fail when run")

    logger.info(f"Deployment plan ({len(invocations)} tasks, target: {target or '<unset>'}):")
    for i, invocation in enumerate(invocations, 1):
        logger.info(f"  {i}. {invocation.command_line}")

    return 0


def execute(args):
    """Execute plan command"""
    from radio_deploy.core import SystemEnvironmentProvider, ConsoleLogger

    return print_plan(args, SystemEnvironmentProvider(), ConsoleLogger())
