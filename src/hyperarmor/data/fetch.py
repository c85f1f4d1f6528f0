"""Hook for populating the local dataset cache when it is missing."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from .errors import DataLoadError

logger = logging.getLogger(__name__)


class DatasetFetcher(Protocol):
    """Writes the poise damage CSV to ``destination`` or raises."""

    def __call__(self, destination: Path) -> None:
        ...


def ensure_dataset(path: Path, fetcher: DatasetFetcher | None = None) -> Path:
    """Return ``path`` once it exists, fetching it first if a fetcher is given."""
    if path.exists():
        return path
    if fetcher is None:
        raise DataLoadError(f"Dataset file not found and no fetcher configured: {path}")
    logger.info("Fetching poise data into %s", path)
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        fetcher(path)
    except DataLoadError:
        raise
    except Exception as exc:
        raise DataLoadError(f"Fetching dataset into {path} failed: {exc}") from exc
    if not path.exists():
        raise DataLoadError(f"Fetcher did not create dataset file: {path}")
    logger.info("Fetched poise data")
    return path
