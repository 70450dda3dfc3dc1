"""
Base command class for hsacl commands.
"""
import logging
from abc import ABC, abstractmethod
from argparse import ArgumentParser, _SubParsersAction
from typing import Any
from ..core.index import Index

class BaseCommand(ABC):
    """Base class for all hsacl commands.

    Subclasses get the opened index and a logger named after their module
    (``hsacl.commands.<verb>``), so output lands under the ``hsacl`` logger
    configured by the CLI.
    """
    
    def __init__(self, index: Index):
        self.index = index
        self.logger = logging.getLogger(type(self).__module__)
    
    def report(self, message: str, echo: bool = True) -> None:
        """Log a completed change at INFO and, unless echo is off, print it."""
        self.logger.info(message)
        if echo:
            print(message)
    
    @classmethod
    @abstractmethod
    def register_parser(cls, subparsers: _SubParsersAction) -> ArgumentParser:
        """Register command parser with subparsers."""
        pass
    
    @abstractmethod
    def execute_from_args(self, args: Any) -> None:
        """Execute command from parsed arguments."""
        pass
