"""Shared pytest fixtures for pyptable tests."""
import pytest
from pathlib import Path

from pyptable.core.periodic_table import PeriodicTable
from pyptable.data.constants import TableConstants


@pytest.fixture
def data_file():
    """Path to the bundled element data file."""
    return Path(__file__).parent.parent / "src" / "pyptable" / "data" / "Periodic-Table.csv"


@pytest.fixture
def periodic_table():
    """Fresh PeriodicTable over the bundled data."""
    return PeriodicTable()


@pytest.fixture
def header_line():
    """CSV header line with the canonical column names."""
    return ",".join(TableConstants.HEADER)


@pytest.fixture
def write_csv(tmp_path):
    """Factory writing CSV text to a temporary file and returning its path."""
    def _write(content: str, name: str = "elements.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def small_table_file(write_csv, header_line):
    """Three-element CSV file with hand-picked values."""
    rows = [
        header_line,
        "1,Hydrogen,H,1.00794,1,1,gas,hex,Nonmetal,0.012,0.79,2.2,13.5984,0.0000899,14.175,20.28,3,14.304,1s1,1,1",
        "2,Helium,He,4.002602,1,18,gas,hex,Noble Gas,,0.49,,24.5874,0.000179,0.95,4.22,5,5.193,1s2,1,18",
        '26,Iron,Fe,55.845,4,8,solid,bcc,Transition Metal,0.645,1.7,1.83,7.9024,7.874,1808.15,3134,10,0.449,"[Ar] 3d6, 4s2",4,8',
    ]
    return write_csv("\n".join(rows) + "\n")
