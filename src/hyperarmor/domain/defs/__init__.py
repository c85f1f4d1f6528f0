"""Domain definition exports."""

from .moveset_def import (
    CHAIN_STEP_CAP,
    Chain,
    CriticalBlock,
    GripBlock,
    StanceBlock,
    WeaponMoveset,
)

__all__ = [
    "CHAIN_STEP_CAP",
    "Chain",
    "CriticalBlock",
    "GripBlock",
    "StanceBlock",
    "WeaponMoveset",
]
