"""Helpers for resolving data file locations."""
from __future__ import annotations

import os
from pathlib import Path

POISE_DATA_FILE = "poise_data.csv"
DATASET_ENV_VAR = "HYPERARMOR_DATASET"


def get_repo_root() -> Path:
    """Return the repository root."""
    return Path(__file__).resolve().parents[3]


def get_data_dir(base_path: Path | str | None = None) -> Path:
    """Return the directory containing the cached dataset."""
    if base_path is not None:
        return Path(base_path)
    return get_repo_root() / "data"


def get_dataset_path(path: Path | str | None = None) -> Path:
    """Return the dataset file: explicit path, then $HYPERARMOR_DATASET, then the repo cache."""
    if path is not None:
        return Path(path)
    from_env = os.environ.get(DATASET_ENV_VAR)
    if from_env:
        return Path(from_env)
    return get_data_dir() / POISE_DATA_FILE
