"""Custom exceptions for pyptable core functionality."""
import logging

logger = logging.getLogger(__name__)


class PeriodicTableError(Exception):
    """Base exception for all periodic table errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("PeriodicTableError raised: %s", message)


class DataFileError(PeriodicTableError):
    """Exception raised when the element data file cannot be read."""

    def __init__(self, filename, reason=None):
        self.filename = str(filename)
        message = f"Can't read {self.filename}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        logger.error("DataFileError raised for file: %s", self.filename)
