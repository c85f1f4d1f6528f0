"""Low-level CSV helpers for repositories."""
from __future__ import annotations

import csv
import io
from pathlib import Path

from .errors import DataLoadError


def load_csv_rows(path: Path, *, skip_header: bool = True) -> list[list[str]]:
    """Load CSV rows from disk and raise DataLoadError on failure."""
    try:
        text = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise DataLoadError(f"Dataset file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise DataLoadError(f"Dataset file is not valid UTF-8: {path}") from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read dataset file: {path}") from exc

    try:
        rows = list(csv.reader(io.StringIO(text)))
    except csv.Error as exc:
        raise DataLoadError(f"Invalid CSV in {path}: {exc}") from exc
    return rows[1:] if skip_header else rows
