"""
Init command implementation.
"""
from argparse import ArgumentParser, _SubParsersAction
from typing import Any
from .base import BaseCommand

class InitCommand(BaseCommand):
    """Create or open the profile directory."""
    
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        """Register init command parser."""
        parser = subparsers.add_parser(
            "init",
            help="Create the profile directory and an empty index"
        )
        return parser
    
    def execute_from_args(self, args: Any) -> None:
        """Execute init command from parsed arguments."""
        self.execute()
    
    def execute(self) -> None:
        """Report where the index lives; opening it already created the layout."""
        count = len(self.index)
        if count:
            print(f"Reinitialized existing profile index in {self.index.profiles_dir} ({count} profiles)")
        else:
            print(f"Initialized empty profile index in {self.index.profiles_dir}")
