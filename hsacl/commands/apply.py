"""
Apply command implementation.
"""
from argparse import ArgumentParser, _SubParsersAction
from typing import Any
from .base import BaseCommand

class ApplyCommand(BaseCommand):
    """Activate a profile."""
    
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        """Register apply command parser."""
        parser = subparsers.add_parser(
            "apply",
            help="Copy a profile into the output ACL file"
        )
        parser.add_argument("name", help="Profile to activate")
        return parser
    
    def execute_from_args(self, args: Any) -> None:
        """Execute apply command from parsed arguments."""
        self.execute(args.name)
    
    def execute(self, name: str) -> None:
        """Overwrite the output file with the profile's content."""
        self.index.apply(name)
        self.report(f"Applied profile '{name}' to {self.index.output_path}")
