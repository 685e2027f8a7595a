"""File input for the element data."""

from .data_handler import locate_data_file, read_header, read_rows

__all__ = [
    "locate_data_file",
    "read_header",
    "read_rows"
]
