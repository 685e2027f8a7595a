"""File and table layout constants for pyptable."""

from .table_constants import FileConstants, TableConstants

__all__ = [
    "FileConstants",
    "TableConstants"
]
