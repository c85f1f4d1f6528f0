"""Service layer exports."""

from .errors import WeaponNotFoundError
from .loadout_service import LoadoutResult, LoadoutService
from .poise_data_store import PoiseDataStore, load_poise_data

__all__ = [
    "WeaponNotFoundError",
    "LoadoutResult",
    "LoadoutService",
    "PoiseDataStore",
    "load_poise_data",
]
