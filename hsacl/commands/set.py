"""
Set command implementation.
"""
import sys
from argparse import ArgumentParser, _SubParsersAction
from pathlib import Path
from typing import Any, Optional
from .base import BaseCommand
from ..exceptions import StorageError

class SetCommand(BaseCommand):
    """Create a profile or replace its content."""
    
    @classmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        """Register set command parser."""
        parser = subparsers.add_parser(
            "set",
            help="Store an ACL document under a profile name"
        )
        parser.add_argument("name", help="Profile name")
        parser.add_argument(
            "file",
            nargs="?",
            default="-",
            help="File to read the ACL document from (default: stdin)"
        )
        return parser
    
    def execute_from_args(self, args: Any) -> None:
        """Execute set command from parsed arguments."""
        self.execute(args.name, args.file)
    
    def execute(self, name: str, source: Optional[str] = "-") -> None:
        """Read the document from source and store it under name."""
        content = self._read_source(source)
        existed = name in self.index
        self.index.set(name, content)
        action = "Updated" if existed else "Created"
        self.report(f"{action} profile '{name}' ({len(content)} bytes)", echo=False)
    
    def _read_source(self, source: Optional[str]) -> bytes:
        if source is None or source == "-":
            return sys.stdin.buffer.read()
        try:
            return Path(source).read_bytes()
        except OSError as e:
            raise StorageError(f"cannot read '{source}': {e}") from e
