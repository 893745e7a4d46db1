"""Reporting helpers for scanned network resources."""
from __future__ import annotations

import json
from dataclasses import asdict, fields
from typing import Any, Dict, Iterable, List, Sequence

from .models import RECORD_TYPES, RESOURCE_COLLECTIONS, NetworkResources


def resources_to_dict(resources: NetworkResources) -> Dict[str, List[Dict[str, Any]]]:
    """Return ``resources`` as JSON-ready lists keyed by collection name."""

    return {
        attribute: [asdict(record) for record in getattr(resources, attribute)]
        for attribute, _ in RESOURCE_COLLECTIONS
    }


def print_records(title: str, records: Sequence[object], *, as_json: bool) -> None:
    """Print a count line and, optionally, each record as indented JSON."""

    if not as_json:
        print(f"Found {len(records)} {title}")
        return

    print(f"Found {len(records)} {title}:")
    for record in records:
        print(json.dumps(asdict(record), indent=2, default=str))
        print("---")


def print_summary(resources: NetworkResources) -> None:
    """Pretty-print a count per resource collection to stdout."""

    width = max(len(title) for _, title in RESOURCE_COLLECTIONS)
    for attribute, title in RESOURCE_COLLECTIONS:
        print(f"{title:<{width}} {len(getattr(resources, attribute)):>5}")


def export_resources_to_json(resources: NetworkResources, path: str) -> str:
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(resources_to_dict(resources), fh, indent=2, default=str)
    return path


def _cell_value(value: Any) -> Any:
    """Flatten nested record values into something a worksheet cell accepts."""

    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, dict):
        return "; ".join(f"{key}={item}" for key, item in sorted(value.items()))
    if isinstance(value, (list, tuple)):
        return "; ".join(str(_cell_value(item)) for item in value)
    return str(value)


def export_inventory_to_excel(resources: NetworkResources, path: str) -> str:
    """Write one worksheet per resource collection to ``path``."""

    try:
        from openpyxl import Workbook
        from openpyxl.utils import get_column_letter
    except ImportError as exc:  # pragma: no cover - dependency missing during tests
        raise RuntimeError(
            "The 'openpyxl' package is required to export "
            "the inventory to Excel. Install it with 'pip install openpyxl'."
        ) from exc

    workbook = Workbook()
    workbook.remove(workbook.active)

    for attribute, title in RESOURCE_COLLECTIONS:
        records: Iterable[Any] = getattr(resources, attribute)
        record_type = RECORD_TYPES[attribute]
        headers = [field.name for field in fields(record_type)]
        # Excel limits sheet titles to 31 characters.
        sheet = workbook.create_sheet(title=title[:31])
        sheet.append(headers)
        column_widths = [len(header) for header in headers]

        for record in records:
            values = [_cell_value(getattr(record, header)) for header in headers]
            sheet.append(values)
            for idx, value in enumerate(values):
                column_widths[idx] = max(column_widths[idx], len(str(value)))

        for idx, width in enumerate(column_widths, start=1):
            sheet.column_dimensions[get_column_letter(idx)].width = min(width + 2, 60)

    workbook.save(path)
    return path


__all__ = [
    "export_inventory_to_excel",
    "export_resources_to_json",
    "print_records",
    "print_summary",
    "resources_to_dict",
]
