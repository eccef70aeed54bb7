"""
Quote-aware splitting of a single CSV line.

Deliberately simpler than RFC 4180: a double quote only toggles the
"inside quotes" state and is never kept, so an escaped quote (``""``)
toggles twice and contributes nothing. Unbalanced quotes are tolerated.
No trimming happens here; callers clean each field themselves.
"""

from __future__ import annotations

from typing import List

from .rules import FIELD_DELIMITER, QUOTE_CHAR


def tokenize_line(line: str) -> List[str]:
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False

    for char in line:
        if char == QUOTE_CHAR:
            in_quotes = not in_quotes
        elif char == FIELD_DELIMITER and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    # The last field is always emitted, even when empty.
    fields.append("".join(current))
    return fields
