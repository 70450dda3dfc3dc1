"""
hsacl command implementations.
"""
from .base import BaseCommand
from .init import InitCommand
from .set import SetCommand
from .rm import RmCommand
from .mv import MvCommand
from .apply import ApplyCommand
from .ls import LsCommand
from .show import ShowCommand
__all__ = [
    "BaseCommand",
    "InitCommand",
    "SetCommand",
    "RmCommand",
    "MvCommand",
    "ApplyCommand",
    "LsCommand",
    "ShowCommand",
]
