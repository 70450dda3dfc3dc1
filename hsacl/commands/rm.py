"""Remove command implementation."""
from argparse import ArgumentParser, _SubParsersAction
from typing import Any, List
from .base import BaseCommand

class RmCommand(BaseCommand):
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        parser = subparsers.add_parser('rm', help='Remove profiles from the index')
        parser.add_argument('names', nargs='+', help='Profiles to remove')
        parser.add_argument('-q', '--quiet', action='store_true', help='Quiet mode')
        return parser
    
    def execute_from_args(self, args: Any):
        self.remove(args.names, quiet=args.quiet)
    
    def remove(self, names: List[str], quiet: bool = False):
        """Remove profiles. Unknown names are not an error."""
        for name in names:
            known = name in self.index
            self.index.remove(name)
            if not known:
                self.logger.debug("Profile '%s' was not in the index", name)
                continue
            self.report(f"rm '{name}'", echo=not quiet)
