"""Unit tests for table constants."""

import dataclasses

import pytest
from pyptable.data.constants import FileConstants, TableConstants


class TestTableConstants:
    """Test cases for the column layout constants."""
    def test_header_length(self):
        """Test that the canonical header has 21 columns."""
        assert len(TableConstants.HEADER) == 21

    def test_key_columns(self):
        """Test that the key columns point at number, name and symbol."""
        assert TableConstants.HEADER[TableConstants.NUMBER_COLUMN] == "Atomic Number"
        assert TableConstants.HEADER[TableConstants.NAME_COLUMN] == "Element"
        assert TableConstants.HEADER[TableConstants.SYMBOL_COLUMN] == "Symbol"

    def test_radius_column_order(self):
        """Test that Ionic Radius comes before Atomic Radius."""
        assert TableConstants.HEADER.index("Ionic Radius") == 9
        assert TableConstants.HEADER.index("Atomic Radius") == 10

    def test_symbol_length_limit(self):
        """Test the symbol length limit."""
        assert TableConstants.SYMBOL_LENGTH_LIMIT == 4

    def test_constants_are_frozen(self):
        """Test that constant instances cannot be modified."""
        constants = TableConstants()
        with pytest.raises(dataclasses.FrozenInstanceError):
            constants.SYMBOL_LENGTH_LIMIT = 5


class TestFileConstants:
    """Test cases for the data file constants."""
    def test_fallback_path(self):
        """Test the fallback path ends with the data file name."""
        assert FileConstants.FALLBACK_PATH == "share/" + FileConstants.DATA_FILENAME

    def test_encoding(self):
        """Test the default encoding."""
        assert FileConstants.DEFAULT_ENCODING == "utf-8"
