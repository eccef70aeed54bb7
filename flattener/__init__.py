"""Flatten username/displayName CSV files into ``username@displayName`` text."""

__version__ = "0.1.0"
