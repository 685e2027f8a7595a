"""
Bundled element data and table constants.

This package ships the ``Periodic-Table.csv`` data file as package data and
the constants describing its location and column layout.
"""

from .constants.table_constants import FileConstants, TableConstants

__all__ = [
    "FileConstants",
    "TableConstants"
]
