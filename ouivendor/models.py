from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

OUI_PATTERN = re.compile(r"[0-9a-f]{6}")


@dataclass(frozen=True)
class RawRecord:
    """One registry row as read from the CSV, before normalization."""

    oui: str
    vendor_name_raw: str
    line: int = 0


class Entry(BaseModel):
    model_config = ConfigDict(frozen=True)

    oui: str
    vendor_id: int
    vendor: str

    @property
    def value(self) -> int:
        return int(self.oui, 16)


class VendorTable(BaseModel):
    """Compiled OUI -> vendor-id map plus the vendor names indexed by id.

    ``ouis`` is emitted in ascending numeric OUI order by the builder so that
    serialized tables are stable across rebuilds; lookups do not depend on it.
    """

    model_config = ConfigDict(frozen=True)

    ouis: Dict[str, int] = Field(default_factory=dict)
    vendors: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_references(self) -> VendorTable:
        count = len(self.vendors)
        for oui, vendor_id in self.ouis.items():
            if not OUI_PATTERN.fullmatch(oui):
                raise ValueError(f"invalid OUI key {oui!r}")
            if not 0 <= vendor_id < count:
                raise ValueError(f"OUI {oui} references unknown vendor id {vendor_id}")
        return self

    def vendor_id(self, oui: str) -> Optional[int]:
        return self.ouis.get(oui)

    def vendor_name(self, vendor_id: int) -> str:
        return self.vendors[vendor_id]

    def entries(self) -> Iterator[Entry]:
        for oui in sorted(self.ouis, key=lambda key: int(key, 16)):
            vendor_id = self.ouis[oui]
            yield Entry(oui=oui, vendor_id=vendor_id, vendor=self.vendors[vendor_id])
