"""Core periodic table lookups."""

from .exceptions import PeriodicTableError, DataFileError
from .periodic_table import PeriodicTable, get_periodic_table

__all__ = [
    "PeriodicTable",
    "get_periodic_table",
    "PeriodicTableError",
    "DataFileError"
]
