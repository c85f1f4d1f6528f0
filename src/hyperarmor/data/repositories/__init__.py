"""Repository exports."""

from .poise_data_repo import PoiseDataRepository, parse_row

__all__ = [
    "PoiseDataRepository",
    "parse_row",
]
