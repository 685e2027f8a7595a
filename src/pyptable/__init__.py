"""
PyPTable - A Python library for chemical element property lookups.

This library loads a bundled table of chemical element properties and
answers lookups by atomic number, element name or chemical symbol.

Key Features:
- Atomic number, name and symbol conversion
- Property lookup by partial, case-insensitive column name
- Raw text values, exactly as stored in the data file
- Lazy, thread-safe loading of the bundled CSV data

Main Components:
- Core: The PeriodicTable lookup class and its exceptions
- Parsing: Location and reading of the CSV data file
- Data: The bundled data file and table layout constants
"""

# Enhanced version handling with multiple fallbacks
try:
    from ._version import version as __version__
except ImportError:
    try:
        from importlib.metadata import version, PackageNotFoundError
        try:
            __version__ = version("pyptable")
        except PackageNotFoundError:
            __version__ = "0.3.0+unknown"
    except ImportError:
        __version__ = "0.3.0+unknown"  # Fallback version

# Core lookups
from .core.periodic_table import PeriodicTable, get_periodic_table
from .core.exceptions import PeriodicTableError, DataFileError

# Data file access
from .parsing.io.data_handler import locate_data_file

__all__ = [
    # Version
    '__version__',

    # Core classes
    'PeriodicTable',
    'get_periodic_table',

    # Exceptions
    'PeriodicTableError',
    'DataFileError',

    # Data file
    'locate_data_file'
]

# Package metadata
__author__ = "Rahil Doshi"
__email__ = "rahil.doshi@fau.de"
__description__ = "Chemical element property lookup library"
