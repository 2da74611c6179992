"""
Exceptions raised while building or loading vendor tables.
"""
from __future__ import annotations


class OuiVendorError(Exception):
    """Base exception for all ouivendor errors."""
    pass


class RegistryError(OuiVendorError):
    """Raised when the vendor registry cannot be read or fetched."""
    pass


class RegistryFormatError(RegistryError):
    """Raised when the registry CSV is structurally malformed."""
    pass


class InvalidOUIError(RegistryFormatError):
    """Raised when a registry row carries an OUI that is not 6 hex digits."""
    pass


class TableError(OuiVendorError):
    """Raised when a compiled vendor table is missing or corrupt."""
    pass
