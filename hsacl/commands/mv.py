"""Rename command implementation."""
from argparse import ArgumentParser, _SubParsersAction
from typing import Any
from .base import BaseCommand

class MvCommand(BaseCommand):
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        parser = subparsers.add_parser('mv', help='Rename a profile')
        parser.add_argument('source', help='Current profile name')
        parser.add_argument('destination', help='New profile name')
        parser.add_argument('-v', '--verbose', action='store_true', help='Be verbose')
        return parser
    
    def execute_from_args(self, args: Any):
        self.rename(args.source, args.destination, verbose=args.verbose)
    
    def rename(self, source: str, destination: str, verbose: bool = False):
        """Rename a profile; an existing destination is never overwritten."""
        self.index.rename(source, destination)
        self.report(f"Renaming {source} to {destination}", echo=verbose)
