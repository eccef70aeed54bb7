"""
Record extraction from decoded CSV text.

Responsibilities:
- split the text into lines and resolve the header row
- locate the username and display name columns by header name
- turn each data row into a Record, silently dropping rows that are
  too short or have an empty value in either column

Only two things abort an extraction: no lines at all, or a header that
lacks one of the required columns. An empty result is a valid result.
"""

from __future__ import annotations

from typing import List

from .errors import EmptyInputError, MissingColumnsError
from .log import get_logger
from .models import HeaderIndex, Record
from .rules import DISPLAY_NAME_HEADERS, QUOTE_CHAR, USERNAME_HEADER
from .tokenizer import tokenize_line

logger = get_logger(__name__)

_BOM = "\ufeff"


def clean_field(value: str) -> str:
    return value.strip().replace(QUOTE_CHAR, "").strip()


def split_lines(text: str) -> List[str]:
    """
    Split the whole input into lines after trimming it.

    Trailing blank lines never count; blank lines in the middle are kept
    here and skipped by the caller. A trailing CR (CRLF input) stays on
    the line and is removed when fields are cleaned.
    """
    text = text.lstrip(_BOM).strip()
    if not text:
        return []
    return text.split("\n")


def resolve_header(line: str) -> HeaderIndex:
    header = [clean_field(cell).lower() for cell in tokenize_line(line)]

    username_index = _find(header, (USERNAME_HEADER,))
    display_name_index = _find(header, DISPLAY_NAME_HEADERS)

    if username_index is None or display_name_index is None:
        logger.debug("header %r lacks a required column", header)
        raise MissingColumnsError()

    return HeaderIndex(username=username_index, display_name=display_name_index)


def _find(header: List[str], names) -> int | None:
    for i, cell in enumerate(header):
        if cell in names:
            return i
    return None


def extract_records(text: str) -> List[Record]:
    lines = split_lines(text)
    if not lines:
        raise EmptyInputError()

    index = resolve_header(lines[0])
    logger.debug(
        "resolved columns: username=%d display_name=%d",
        index.username,
        index.display_name,
    )

    records: List[Record] = []
    skipped = 0

    for line in lines[1:]:
        if not line.strip():
            continue

        values = tokenize_line(line)
        if len(values) < index.required_width:
            skipped += 1
            continue

        username = clean_field(values[index.username])
        display_name = clean_field(values[index.display_name])

        if username and display_name:
            records.append(Record(username=username, display_name=display_name))
        else:
            skipped += 1

    if skipped:
        logger.debug("skipped %d data row(s) without both values", skipped)

    return records


def count_data_rows(text: str) -> int:
    """Number of non-blank lines after the header."""
    return sum(1 for line in split_lines(text)[1:] if line.strip())
