"""Data layer utilities for loading the poise damage dataset."""

from .errors import DataError, DataLoadError, DataValidationError, UnusedOverrideError
from .paths import get_data_dir, get_dataset_path, get_repo_root

__all__ = [
    "DataError",
    "DataLoadError",
    "DataValidationError",
    "UnusedOverrideError",
    "get_data_dir",
    "get_dataset_path",
    "get_repo_root",
]
