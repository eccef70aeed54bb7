"""Conversion of one uploaded file into records and formatted output."""

from __future__ import annotations

from .decode import decode_upload
from .errors import NoValidRowsError, UnsupportedFileError
from .extract import count_data_rows, extract_records
from .formatting import format_file_size, format_output, preview
from .log import get_logger
from .models import ConvertResponse, ConvertSummary, FileInfo
from .rules import ACCEPTED_SUFFIX

logger = get_logger(__name__)


def convert_text(filename: str, text: str, size: int | None = None) -> ConvertResponse:
    """
    Extract records from already-decoded text and build the response.

    Raises the extractor's errors unchanged, plus ``NoValidRowsError`` when
    the header resolved but no data row survived validation.
    """
    records = extract_records(text)
    if not records:
        logger.warning("%s: header ok but no valid data rows", filename)
        raise NoValidRowsError()

    shown = preview(records)
    output = format_output(records)
    data_rows = count_data_rows(text)
    if size is None:
        size = len(text.encode("utf-8"))

    logger.info("%s: converted %d record(s)", filename, len(records))

    return ConvertResponse(
        file=FileInfo(name=filename, size=size, size_label=format_file_size(size)),
        summary=ConvertSummary(
            records=len(records),
            skipped_rows=data_rows - len(records),
            preview_rows=len(shown),
            more_records=len(records) - len(shown),
            characters=len(output),
        ),
        records=records,
        preview=shown,
        output=output,
    )


def convert_upload(filename: str, raw: bytes) -> ConvertResponse:
    if not (filename or "").lower().endswith(ACCEPTED_SUFFIX):
        logger.warning("rejected upload %r: not a %s file", filename, ACCEPTED_SUFFIX)
        raise UnsupportedFileError()

    return convert_text(filename, decode_upload(raw), size=len(raw))
