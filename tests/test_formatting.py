"""Tests for flattener.formatting: output text, preview and size labels."""
import pytest

from flattener.formatting import format_file_size, format_output, preview
from flattener.models import Record


def rec(u, d):
    return Record(username=u, display_name=d)


def test_format_output_joins_with_comma_newline():
    records = [rec("john_doe", "John Doe"), rec("jane_smith", "Jane Smith")]
    assert format_output(records) == "john_doe@John Doe,\njane_smith@Jane Smith"


def test_format_output_single_record_has_no_separator():
    assert format_output([rec("a", "A")]) == "a@A"


def test_format_output_empty():
    assert format_output([]) == ""


def test_preview_limits_to_five():
    records = [rec(f"u{i}", f"U{i}") for i in range(8)]
    assert preview(records) == records[:5]
    assert preview(records[:3]) == records[:3]


@pytest.mark.parametrize(
    "size, label",
    [
        (0, "0 Bytes"),
        (500, "500 Bytes"),
        (1023, "1023 Bytes"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (1024 * 1024, "1 MB"),
        (int(2.25 * 1024 * 1024 * 1024), "2.25 GB"),
        (3 * 1024 ** 4, "3072 GB"),
    ],
)
def test_format_file_size(size, label):
    assert format_file_size(size) == label
