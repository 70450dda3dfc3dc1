"""
Command Line Interface for hsacl.
"""
import argparse
import logging
import sys
from typing import List, Optional

class CustomHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom formatter that suppresses subcommand help in main help."""
    def _format_action(self, action):
        # Skip subparsers action to avoid showing individual command help
        if isinstance(action, argparse._SubParsersAction):
            return ''
        return super()._format_action(action)
from .commands import (
    InitCommand, SetCommand, RmCommand, MvCommand,
    ApplyCommand, LsCommand, ShowCommand
)
from .config import load_settings
from .core.index import Index
from .exceptions import HsaclError
from .logging_setup import setup_logging

logger = logging.getLogger(__name__)

COMMANDS = {
    "init": InitCommand,
    "set": SetCommand,
    "rm": RmCommand,
    "mv": MvCommand,
    "apply": ApplyCommand,
    "ls": LsCommand,
    "show": ShowCommand,
}

def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        description="hsacl - named headscale ACL profiles",
        prog="hsacl",
        formatter_class=CustomHelpFormatter,
        epilog="""These are the hsacl commands:

manage profiles
   init      Create the profile directory and an empty index
   set       Store an ACL document under a profile name
   mv        Rename a profile
   rm        Remove profiles from the index

activate and inspect
   apply     Copy a profile into the output ACL file
   ls        List profiles
   show      Print the content of a profile

Environment: HSACL_DIR, HSACL_OUTPUT, HSACL_LOG_LEVEL, HSACL_LOG_FILE.
See 'hsacl <command> --help' to read about a specific command."""
    )
    parser.add_argument(
        "--dir",
        dest="base_dir",
        help="Directory holding profiles/ (default: $HSACL_DIR or current directory)"
    )
    parser.add_argument(
        "--output",
        dest="output_path",
        help="ACL file written by apply (default: $HSACL_OUTPUT or ./acl.hujson)"
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        help="Logging level (default: $HSACL_LOG_LEVEL or WARNING)"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__import__('hsacl').__version__}"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="hsacl command to run (see command list below)",
        metavar="<command>"
    )

    for command_class in COMMANDS.values():
        command_class.register_parser(subparsers)

    return parser

def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    settings = load_settings(args.base_dir, args.output_path, args.log_level)
    try:
        setup_logging(settings.log_level, settings.log_file)
    except OSError as e:
        print(f"fatal: cannot open log file {settings.log_file}: {e}", file=sys.stderr)
        return 1

    try:
        index = Index.open(settings.base_dir, settings.output_path)
        logger.debug("Opened index %s with %d profiles", index.index_file, len(index))

        command = COMMANDS[args.command](index)
        command.execute_from_args(args)

    except HsaclError as e:
        logger.debug("Command '%s' failed", args.command, exc_info=True)
        print(f"fatal: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    except Exception as e:
        logger.exception("Unexpected error in command '%s'", args.command)
        print(f"fatal: unexpected error: {e}", file=sys.stderr)
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
