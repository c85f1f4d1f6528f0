"""Custom exceptions for data loading and validation."""
from __future__ import annotations


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when the dataset is missing, unfetchable or unreadable."""


class DataValidationError(DataError):
    """Raised when dataset content fails structural validation."""


class UnusedOverrideError(DataValidationError):
    """Raised when innate poise overrides match no loaded weapon or class."""

    def __init__(self, unused: tuple[str, ...]) -> None:
        self.unused = unused
        super().__init__(f"The following innate poise overrides are not used: {list(unused)}")
