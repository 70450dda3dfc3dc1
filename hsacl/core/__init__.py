"""
Core hsacl modules.
"""
from .index import Index, ProfileRecord
__all__ = [
    "Index",
    "ProfileRecord"
]
