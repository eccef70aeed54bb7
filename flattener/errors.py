"""Failures a conversion attempt can end in.

Malformed or short data rows are not errors; the extractor drops them.
"""

from __future__ import annotations


class ConversionError(ValueError):
    """Base class; ``message`` is safe to show to the person uploading."""

    default_message = "Conversion failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyInputError(ConversionError):
    default_message = "CSV file is empty"


class MissingColumnsError(ConversionError):
    default_message = 'CSV must contain "username" and "displayName" columns'


class NoValidRowsError(ConversionError):
    default_message = "No valid data rows found in CSV"


class UnsupportedFileError(ConversionError):
    default_message = "Please upload a valid CSV file"
