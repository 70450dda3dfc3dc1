"""List command implementation."""
from argparse import ArgumentParser, _SubParsersAction
from typing import Any
from .base import BaseCommand

class LsCommand(BaseCommand):
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        parser = subparsers.add_parser('ls', help='List profiles')
        parser.add_argument('-l', '--long', action='store_true',
                          help='Show the content file of each profile')
        return parser
    
    def execute_from_args(self, args: Any):
        self.list_profiles(long=args.long)
    
    def list_profiles(self, long: bool = False):
        """Print profile names, one per line."""
        for name in self.index.names():
            if long:
                print(f"{name}\t{self.index.record(name).path}")
            else:
                print(name)
