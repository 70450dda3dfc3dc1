"""
Custom exceptions for hsacl.
"""

class HsaclError(Exception):
    """Base exception for all hsacl errors."""
    pass

class ConfigurationError(HsaclError):
    """Raised when the base directory cannot be used."""
    pass

class ProfileNotFoundError(HsaclError):
    """Raised when a profile name is not in the index."""
    pass

class ProfileExistsError(HsaclError):
    """Raised when a profile name is already taken."""
    pass

class StorageError(HsaclError, OSError):
    """Raised when reading or writing a profile, output or index file fails."""
    pass

class SerializationError(HsaclError, ValueError):
    """Raised when the index file cannot be parsed or written as JSON."""
    pass
