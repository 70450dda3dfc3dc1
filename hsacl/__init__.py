"""
hsacl - named headscale ACL profiles
Stores ACL documents under profile names and activates one by copying it to the policy file.
"""
__version__ = "0.1.0"
__author__ = "hsacl"
__description__ = "File-backed registry of headscale ACL profiles"
from .core.index import Index, ProfileRecord
from .exceptions import (
    HsaclError, ConfigurationError, ProfileNotFoundError,
    ProfileExistsError, StorageError, SerializationError
)
__all__ = [
    "Index",
    "ProfileRecord",
    "HsaclError",
    "ConfigurationError",
    "ProfileNotFoundError",
    "ProfileExistsError",
    "StorageError",
    "SerializationError",
    "__version__"
]
