"""
Fixed conversion rules.

These are properties of the output format, not deployment settings;
see ``config`` for the knobs that can change per environment.
"""

USERNAME_HEADER = "username"
DISPLAY_NAME_HEADERS = ("displayname", "display_name", "display name")

FIELD_DELIMITER = ","
QUOTE_CHAR = '"'

OUTPUT_TEMPLATE = "{username}@{display_name}"
OUTPUT_SEPARATOR = ",\n"

ACCEPTED_SUFFIX = ".csv"
PREVIEW_ROWS = 5
FILE_SIZE_UNITS = ("Bytes", "KB", "MB", "GB")
