import logging
import re
import threading
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Union

from pyptable.data.constants import TableConstants
from pyptable.parsing.io.data_handler import locate_data_file, read_header, read_rows

logger = logging.getLogger(__name__)

Identifier = Union[str, int]

_DIGITS = re.compile(r'[0-9]+')


class PeriodicTable:
    """
    Lookup of chemical element properties by atomic number, name or symbol.

    The header and the symbol-keyed table are each read from the data file on
    first use and kept for the lifetime of the instance. All field values are
    returned as the raw text stored in the file, except for ``number`` which
    returns an integer.

    Identifiers shorter than four characters are taken to be symbols by
    ``number`` and ``value``. This is a plain length check, so a three letter
    element name would be treated as a symbol.

    Examples:
        >>> pt = PeriodicTable()
        >>> pt.number('H'), pt.number('hydrogen')
        (1, 1)
        >>> pt.name(1), pt.symbol('hydrogen')
        ('Hydrogen', 'H')
        >>> pt.value('H', 'weight')
        '1.00794'
    """

    def __init__(self, file: Optional[Union[str, Path]] = None):
        self._file = Path(file) if file is not None else None
        self._header: Optional[List[str]] = None
        self._table: Optional[Dict[str, List[str]]] = None
        self._lock = threading.Lock()
        logger.debug("PeriodicTable created (file=%s)", self._file)

    def __repr__(self) -> str:
        return f"PeriodicTable(file={str(self._file)!r})"

    def source_file(self) -> Path:
        """Return the data file location, resolving the packaged file if none was given."""
        if self._file is not None:
            return self._file
        return locate_data_file()

    def header(self) -> List[str]:
        """Return the column names from the first row of the data file."""
        if self._header is None:
            with self._lock:
                if self._header is None:
                    self._header = read_header(self.source_file())
        return self._header

    def table(self) -> Dict[str, List[str]]:
        """
        Return the element rows keyed by symbol.
        The first row of the file is skipped. A repeated symbol replaces the earlier row.
        Rows too short to have a symbol field cannot be keyed and are left out with a
        warning; no other check is made on the rows.
        """
        if self._table is None:
            with self._lock:
                if self._table is None:
                    self._table = self._build_table()
        return self._table

    def _build_table(self) -> Dict[str, List[str]]:
        table = {}
        for row in read_rows(self.source_file())[1:]:
            symbol = _field(row, TableConstants.SYMBOL_COLUMN)
            if symbol is None:
                logger.warning("Skipping row without a symbol column: %s", row)
                continue
            if symbol in table:
                logger.debug("Duplicate symbol %s, keeping the later row", symbol)
            table[symbol] = row
        logger.info("Loaded %d elements", len(table))
        return table

    def number(self, identifier: Identifier) -> Optional[int]:
        """
        Return the atomic number of a symbol or an element name.
        Args:
            identifier: Symbol (e.g. 'He', 'he') or name (e.g. 'Helium', 'HELIUM')
        Returns:
            The atomic number, or None if nothing matches.
        """
        text = str(identifier)
        if len(text) < TableConstants.SYMBOL_LENGTH_LIMIT:
            row = self.table().get(text[:1].upper() + text[1:])
        else:
            row = self._find_row(lambda r: _matches(r, TableConstants.NAME_COLUMN, text))
        if row is None:
            logger.debug("No atomic number found for %r", identifier)
            return None
        return _to_int(_field(row, TableConstants.NUMBER_COLUMN))

    def name(self, identifier: Identifier) -> Optional[str]:
        """
        Return the element name of an atomic number or a symbol.
        Passing a name does not match anything.
        """
        text = str(identifier)
        row = self._find_row(
            lambda r: _same_number(r, text) or _matches(r, TableConstants.SYMBOL_COLUMN, text)
        )
        return _field(row, TableConstants.NAME_COLUMN)

    def symbol(self, identifier: Identifier) -> Optional[str]:
        """Return the symbol of an atomic number or an element name."""
        text = str(identifier)
        for symbol, row in self.table().items():
            if _same_number(row, text) or _matches(row, TableConstants.NAME_COLUMN, text):
                return symbol
        return None

    def value(self, identifier: Identifier, property_hint: str) -> Optional[str]:
        """
        Return a single property of an element.
        Args:
            identifier: Atomic number, name or symbol. Symbols must be given in
                their stored case ('He', not 'he').
            property_hint: Case-insensitive part of a column name, e.g. 'weight'
                for 'Atomic Weight'. The first matching column in header order is used.
        Returns:
            The raw field text, or None if the element or the column is not found.
        """
        index = self._column_index(property_hint)
        if index is None:
            logger.debug("No column matches property hint %r", property_hint)
            return None
        text = str(identifier)
        if not _DIGITS.fullmatch(text) and len(text) < TableConstants.SYMBOL_LENGTH_LIMIT:
            row = self.table().get(text)
        else:
            symbol = self.symbol(text)
            row = self.table().get(symbol) if symbol is not None else None
        return _field(row, index)

    def _column_index(self, property_hint: str) -> Optional[int]:
        hint = str(property_hint).lower()
        for index, column in enumerate(self.header()):
            if hint in column.lower():
                return index
        return None

    def _find_row(self, predicate) -> Optional[List[str]]:
        for row in self.table().values():
            if predicate(row):
                return row
        return None


@lru_cache(maxsize=None)
def _shared_table(file_path: str) -> PeriodicTable:
    logger.debug("Creating shared PeriodicTable for %s", file_path)
    return PeriodicTable(file=file_path)


def get_periodic_table(file: Optional[Union[str, Path]] = None) -> PeriodicTable:
    """
    Return a process-wide PeriodicTable shared by every caller using the same data file.
    One instance is kept per resolved path for the life of the process and is never evicted.
    """
    file_path = Path(file) if file is not None else locate_data_file()
    return _shared_table(str(file_path.resolve()))


def _field(row: Optional[List[str]], index: int) -> Optional[str]:
    if row is None or index >= len(row):
        return None
    return row[index]


def _matches(row: List[str], index: int, text: str) -> bool:
    field = _field(row, index)
    return field is not None and field.lower() == text.lower()


def _same_number(row: List[str], text: str) -> bool:
    if not _DIGITS.fullmatch(text):
        return False
    try:
        return float(_field(row, TableConstants.NUMBER_COLUMN)) == int(text)
    except (TypeError, ValueError):
        return False


def _to_int(text: Optional[str]) -> Optional[int]:
    if text is None:
        return None
    try:
        return int(text)
    except ValueError:
        logger.warning("Atomic number field is not an integer: %r", text)
        return None
