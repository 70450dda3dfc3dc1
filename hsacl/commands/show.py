"""Show command implementation."""
import sys
from argparse import ArgumentParser, _SubParsersAction
from typing import Any
from .base import BaseCommand

class ShowCommand(BaseCommand):
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        parser = subparsers.add_parser('show', help='Print the content of a profile')
        parser.add_argument('name', help='Profile to show')
        return parser
    
    def execute_from_args(self, args: Any):
        self.show_profile(args.name)
    
    def show_profile(self, name: str):
        """Write the stored document to stdout unchanged."""
        content = self.index.get(name)
        sys.stdout.buffer.write(content)
        sys.stdout.flush()
