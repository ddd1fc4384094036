"""
radio-deploy - ship the radio GPIO daemon to an ARM Linux board

Cross-compiles the daemon for armv7 hard-float Linux, then copies the binary
and its systemd unit to $TARGET with scp.
"""
import argparse
import logging
import sys

__version__ = "1.0.0"

COMMANDS = ('deploy', 'plan', 'check')

# deploy options that consume the next token
VALUE_OPTIONS = ('--host', '--config')


def find_command(argv):
    """Return the sub-command named in argv, or None when there is none"""
    tokens = iter(argv)
    for token in tokens:
        if token in COMMANDS:
            return token
        if token in VALUE_OPTIONS:
            next(tokens, None)
        elif not token.startswith('-'):
            return None
    return None


def build_parser():
    """Build the top-level parser with one sub-parser per command"""
    from radio_deploy.commands import deploy, plan, check

    parser = argparse.ArgumentParser(
        prog='radio-deploy',
        description='Cross-compile the radio daemon and copy it to an ARM board',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  TARGET=pi@radio.local radio-deploy        # Build + copy (same as "deploy")
  radio-deploy deploy --host pi@10.0.0.7    # Explicit host
  radio-deploy deploy --release             # Ship the release build
  radio-deploy plan                         # Show tasks without running them
  radio-deploy check                        # Verify cross/scp and TARGET
        '''
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        dest='global_verbose',
        help='Debug logging; also echo each command line when deploying'
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    # Deploy command
    deploy_parser = subparsers.add_parser('deploy', help='Build and copy to target (default)')
    deploy.setup_parser(deploy_parser)

    # Plan command
    plan_parser = subparsers.add_parser('plan', help='Show the deployment tasks')
    plan.setup_parser(plan_parser)

    # Check command
    check_parser = subparsers.add_parser('check', help='Pre-flight tool check')
    check.setup_parser(check_parser)

    return parser


def main(argv=None):
    """Main CLI entry point"""
    from radio_deploy.commands import deploy, plan, check
    from radio_deploy.deploy import DeploymentError, ProcessExecutionError

    argv = list(sys.argv[1:] if argv is None else argv)

    # No sub-command means deploy
    if find_command(argv) is None and not (argv and argv[0] in ('-h', '--help', '--version')):
        argv.insert(0, 'deploy')

    parser = build_parser()
    args = parser.parse_args(argv)
    # -v may come before or after the sub-command
    args.verbose = getattr(args, 'verbose', False) or args.global_verbose

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s'
    )

    # Dispatch to command handler
    try:
        if args.command == 'deploy':
            sys.exit(deploy.execute(args))
        elif args.command == 'plan':
            sys.exit(plan.execute(args))
        elif args.command == 'check':
            sys.exit(check.execute(args))
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        sys.exit(130)
    except ProcessExecutionError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(e.returncode if e.returncode and e.returncode > 0 else 1)
    except DeploymentError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)
