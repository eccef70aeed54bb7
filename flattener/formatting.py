from __future__ import annotations

from typing import Iterable, List

from .models import Record
from .rules import FILE_SIZE_UNITS, OUTPUT_SEPARATOR, OUTPUT_TEMPLATE, PREVIEW_ROWS


def format_output(records: Iterable[Record]) -> str:
    """Join records as ``username@displayName`` pairs, comma-newline separated."""
    return OUTPUT_SEPARATOR.join(
        OUTPUT_TEMPLATE.format(username=r.username, display_name=r.display_name)
        for r in records
    )


def format_file_size(size: int) -> str:
    if size <= 0:
        return f"0 {FILE_SIZE_UNITS[0]}"

    i = 0
    while i < len(FILE_SIZE_UNITS) - 1 and size >= 1024 ** (i + 1):
        i += 1

    value = round(size / 1024 ** i, 2)
    # 1.50 -> 1.5, 2.00 -> 2
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {FILE_SIZE_UNITS[i]}"


def preview(records: List[Record], limit: int = PREVIEW_ROWS) -> List[Record]:
    return records[:limit]
