"""MAC address vendor lookup compiled from the IEEE OUI registry."""
from __future__ import annotations

__version__ = "1.0.0"

from ouivendor.builder import build_from_csv, build_table, read_registry, write_table
from ouivendor.lookup import VendorLookup, load_table, parse_oui
from ouivendor.models import Entry, RawRecord, VendorTable
from ouivendor.normalize import normalize_vendor

__all__ = [
    "Entry",
    "RawRecord",
    "VendorLookup",
    "VendorTable",
    "build_from_csv",
    "build_table",
    "load_table",
    "normalize_vendor",
    "parse_oui",
    "read_registry",
    "write_table",
]
