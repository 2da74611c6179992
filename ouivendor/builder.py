"""Compile the IEEE registry CSV into a :class:`VendorTable`.

Records are consumed in file order. The first registration of an OUI wins
and later ones are logged and dropped; vendor ids are handed out in the
order normalized names are first seen. Both rules depend on stream order,
so callers must not reorder records before :func:`build_table`.
"""
from __future__ import annotations

import csv
import os
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, TextIO, Union

from ouivendor.exceptions import InvalidOUIError, RegistryError, RegistryFormatError
from ouivendor.log import get_logger
from ouivendor.models import OUI_PATTERN, Entry, RawRecord, VendorTable
from ouivendor.normalize import normalize_vendor

logger = get_logger("builder")

# Column positions in the IEEE MA-L CSV:
# Registry,Assignment,Organization Name,Organization Address
OUI_COLUMN = 1
NAME_COLUMN = 2

PathLike = Union[str, Path]


def read_registry(
    handle: TextIO,
    oui_column: int = OUI_COLUMN,
    name_column: int = NAME_COLUMN,
) -> Iterator[RawRecord]:
    """Yield one :class:`RawRecord` per data row, skipping the header.

    Every row must have as many fields as the header. Blank lines are
    ignored. Anything else that is not well-formed CSV raises
    :class:`RegistryFormatError`.
    """
    reader = csv.reader(handle, strict=True)
    try:
        header = next(reader)
    except StopIteration:
        raise RegistryFormatError("registry is empty: missing header row") from None
    except csv.Error as exc:
        raise RegistryFormatError(f"line {reader.line_num}: {exc}") from exc

    width = len(header)
    if max(oui_column, name_column) >= width:
        raise RegistryFormatError(
            f"header has {width} columns; cannot read columns {oui_column} and {name_column}"
        )

    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as exc:
            raise RegistryFormatError(f"line {reader.line_num}: {exc}") from exc
        if not row:
            continue
        if len(row) != width:
            raise RegistryFormatError(
                f"line {reader.line_num}: expected {width} fields, got {len(row)}"
            )
        yield RawRecord(oui=row[oui_column], vendor_name_raw=row[name_column], line=reader.line_num)


def _record_oui(record: RawRecord) -> str:
    oui = record.oui.lower()
    if not OUI_PATTERN.fullmatch(oui):
        raise InvalidOUIError(f"line {record.line}: invalid OUI {record.oui!r}")
    return oui


def build_table(records: Iterable[RawRecord]) -> VendorTable:
    """Deduplicate, normalize and number the registry into a vendor table."""
    oui_names: Dict[str, str] = {}
    vendor_ids: Dict[str, int] = {}
    vendors: List[str] = []
    entries: List[Entry] = []
    rows = 0
    duplicates = 0

    for record in records:
        rows += 1
        oui = _record_oui(record)
        name = normalize_vendor(record.vendor_name_raw)
        if not name:
            logger.debug("line %d: %r normalizes to an empty name", record.line, record.vendor_name_raw)

        previous = oui_names.get(oui)
        if previous is not None:
            # 080030 is registered three times in the public registry.
            duplicates += 1
            logger.warning("OUI %s: %r is already registered to %r", oui, name, previous)
            continue
        oui_names[oui] = name

        if name not in vendor_ids:
            vendor_ids[name] = len(vendors)
            vendors.append(name)
        entries.append(Entry(oui=oui, vendor_id=vendor_ids[name], vendor=name))

    entries.sort(key=lambda entry: entry.value)
    table = VendorTable(ouis={entry.oui: entry.vendor_id for entry in entries}, vendors=vendors)
    logger.info(
        "Built vendor table: %d rows, %d OUIs, %d vendors, %d duplicates skipped",
        rows, len(table.ouis), len(table.vendors), duplicates,
    )
    return table


def build_from_csv(
    path: PathLike,
    oui_column: int = OUI_COLUMN,
    name_column: int = NAME_COLUMN,
) -> VendorTable:
    logger.info("Reading registry %s", path)
    try:
        with open(path, "r", encoding="utf-8", newline="") as handle:
            return build_table(read_registry(handle, oui_column, name_column))
    except OSError as exc:
        raise RegistryError(f"cannot read registry {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise RegistryError(f"registry {path} is not valid UTF-8: {exc}") from exc


def write_table(table: VendorTable, path: PathLike) -> Path:
    """Serialize *table* as JSON; identical tables give identical bytes."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    tmp = out.with_name(out.name + ".tmp")
    tmp.write_text(table.model_dump_json(indent=1) + "\n", encoding="utf-8")
    os.replace(tmp, out)
    logger.info("Wrote %d OUIs / %d vendors to %s", len(table.ouis), len(table.vendors), out)
    return out
