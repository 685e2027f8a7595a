from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class FileConstants:
    """Data file location and reading constants."""
    DATA_FILENAME: Final[str] = 'Periodic-Table.csv'
    DATA_PACKAGE: Final[str] = 'pyptable.data'
    FALLBACK_PATH: Final[str] = 'share/Periodic-Table.csv'
    DEFAULT_ENCODING: Final[str] = 'utf-8'


@dataclass(frozen=True)
class TableConstants:
    """Column layout of the element table."""
    # Lookup key columns
    NUMBER_COLUMN: Final[int] = 0
    NAME_COLUMN: Final[int] = 1
    SYMBOL_COLUMN: Final[int] = 2
    # Identifiers shorter than this are taken to be symbols
    SYMBOL_LENGTH_LIMIT: Final[int] = 4
    HEADER: Final[tuple] = (
        'Atomic Number',
        'Element',
        'Symbol',
        'Atomic Weight',
        'Period',
        'Group',
        'Phase',
        'Most Stable Crystal',
        'Type',
        'Ionic Radius',
        'Atomic Radius',
        'Electronegativity',
        'First Ionization Potential',
        'Density',
        'Melting Point (K)',
        'Boiling Point (K)',
        'Isotopes',
        'Specific Heat Capacity',
        'Electron Configuration',
        'Display Row',
        'Display Column',
    )
