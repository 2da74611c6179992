from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from ouivendor.exceptions import TableError
from ouivendor.log import get_logger
from ouivendor.models import VendorTable

logger = get_logger("lookup")

_DELIMITERS = str.maketrans("", "", ":-")
_HEX_DIGITS = frozenset("0123456789abcdef")


def parse_oui(key: str) -> Optional[str]:
    """Return the 6-digit lowercase OUI at the start of *key*, or None.

    Accepts a bare OUI (``00000f``) or a colon/hyphen delimited MAC prefix
    (``00:00:0F``, ``00-00-0f-01-02-03``).
    """
    digits = key.strip().translate(_DELIMITERS).lower()[:6]
    if len(digits) < 6 or not _HEX_DIGITS.issuperset(digits):
        return None
    return digits


def mac_to_bytes(mac: str) -> bytes:
    digits = mac.strip().translate(_DELIMITERS)
    if len(digits) != 12:
        raise ValueError(f"invalid MAC address: {mac}")
    try:
        return bytes.fromhex(digits)
    except ValueError as exc:
        raise ValueError(f"invalid MAC address: {mac}") from exc


def load_table(path: Union[str, Path]) -> VendorTable:
    """Load and validate a table written by :func:`ouivendor.builder.write_table`."""
    try:
        data = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise TableError(f"cannot read vendor table {path}: {exc}") from exc
    try:
        table = VendorTable.model_validate_json(data)
    except ValidationError as exc:
        raise TableError(f"invalid vendor table {path}: {exc}") from exc
    logger.info("Loaded %d OUIs / %d vendors from %s", len(table.ouis), len(table.vendors), path)
    return table


class VendorLookup:
    """Read-only vendor resolution over a loaded :class:`VendorTable`.

    Nothing mutates the table after construction, so one instance can be
    shared between threads without locking. A miss is never an error: every
    lookup returns ``""`` when no vendor is known.
    """

    def __init__(self, table: VendorTable) -> None:
        self.table = table
        self._ouis = table.ouis
        self._vendors = table.vendors

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> VendorLookup:
        return cls(load_table(path))

    def __len__(self) -> int:
        return len(self._ouis)

    @property
    def vendor_count(self) -> int:
        return len(self._vendors)

    def vendor(self, key: str) -> str:
        oui = parse_oui(key)
        if oui is None:
            return ""
        vendor_id = self._ouis.get(oui)
        if vendor_id is None:
            return ""
        return self._vendors[vendor_id]

    def vendor_from_mac(self, addr: bytes) -> str:
        if len(addr) < 3:
            return ""
        return self.vendor(bytes(addr[:3]).hex())

    def vendor_with_mac(self, addr: bytes) -> str:
        """Return ``Vendor_Name_xx:xx:xx`` built from the device half of *addr*."""
        vendor = self.vendor_from_mac(addr)
        if not vendor or len(addr) < 6:
            return ""
        device = ":".join(f"{octet:02x}" for octet in addr[3:6])
        return f"{vendor.replace(' ', '_')}_{device}"
