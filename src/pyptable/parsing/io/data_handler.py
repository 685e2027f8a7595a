import csv
import logging
from importlib.resources import files
from pathlib import Path
from typing import List, Optional, Union

from pyptable.core.exceptions import DataFileError
from pyptable.data.constants import FileConstants

logger = logging.getLogger(__name__)


def locate_data_file() -> Path:
    """
    Resolve the location of the element data file.
    The installed package data is tried first. Any failure of the resource
    lookup is logged and ignored, and the relative fallback path is used instead.
    Returns:
        Path to the data file. The fallback path is returned without checking it exists.
    """
    file_path = None
    try:
        resource = files(FileConstants.DATA_PACKAGE) / FileConstants.DATA_FILENAME
        file_path = Path(str(resource))
    except Exception as e:
        logger.debug("Package data lookup failed, using fallback path: %s", e)
    if file_path is not None and file_path.is_file():
        logger.debug("Using packaged data file: %s", file_path)
        return file_path
    logger.debug("Using fallback data file: %s", FileConstants.FALLBACK_PATH)
    return Path(FileConstants.FALLBACK_PATH)


def read_header(file_path: Union[str, Path]) -> List[str]:
    """Read only the first row of the data file."""
    records = _read_csv_file(file_path, nrows=1)
    if not records:
        return []
    header = records[0]
    logger.debug("Read %d header columns from %s", len(header), file_path)
    return header


def read_rows(file_path: Union[str, Path]) -> List[List[str]]:
    """
    Read every row of the data file, header row included, as raw text.
    Args:
        file_path: Path to the CSV data file
    Returns:
        List of rows, each a list of field strings. Each row keeps its own length.
    Raises:
        DataFileError: If the file is missing, unreadable or not parseable as CSV
    """
    records = _read_csv_file(file_path)
    logger.info("Read %d rows from %s", len(records), file_path)
    return records


def _read_csv_file(file_path: Union[str, Path], nrows: Optional[int] = None) -> List[List[str]]:
    """Read a CSV file into lists of strings with proper error handling."""
    records = []
    try:
        with open(file_path, 'r', encoding=FileConstants.DEFAULT_ENCODING, newline='') as f:
            for record in csv.reader(f):
                # Blank lines carry no fields
                if not record:
                    continue
                records.append(record)
                if nrows is not None and len(records) >= nrows:
                    break
    except OSError as e:
        raise DataFileError(file_path, e.strerror or str(e)) from e
    except (csv.Error, UnicodeDecodeError) as e:
        raise DataFileError(file_path, str(e)) from e
    if not records:
        logger.warning("Data file is empty: %s", file_path)
    return records
