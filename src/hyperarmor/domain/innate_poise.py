"""Innate weapon poise values by weapon class, with per-weapon overrides."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

# Keys are weapon classes unless they name a specific weapon, which takes precedence.
INNATE_POISE_OVERRIDES: dict[str, int] = {
    "Colossal Weapon": 99,
    "Colossal Sword": 90,
    "Great Hammer": 77,
    "Longhaft Axe": 70,
    "Greatsword": 59,
    "Curved Greatsword": 59,
    "Greataxe": 59,
    "Great Spear": 59,
    "Heavy Thrusting Sword": 59,
    "Hammer": 52,
    "Flail": 52,
    "Halberd": 52,
    "Straight Sword": 15,
    "Curved Sword": 15,
    "Katana": 15,
    "Twinblade": 15,
    "Axe": 15,
    "Spear": 15,
    "Fist": 15,
    "Reaper": 15,
    "Thrusting Sword": 14,
    "Whip": 14,
    "Dagger": 11,
    "Claw": 11,
    "Rakshasa's Great Katana": 77,
    "Great Katana": 52,
    "Light Greatsword": 30,
    "Thrusting Shield": 27,
    "Bloodfiend's Sacred Spear": 15,
    "Backhand Blade": 15,
    "Hand-to-Hand": 15,
    "Beast Claw": 14,
    "Perfume Bottle": 14,
    "Throwing Blade": 11,
}

DEFAULT_INNATE_POISE = 0


@dataclass(frozen=True, slots=True)
class InnatePoiseResolution:
    values: dict[str, int]
    unused_overrides: tuple[str, ...]


def resolve_innate_poise(
    weapons: Iterable[tuple[str, str]],
    overrides: Mapping[str, int] = INNATE_POISE_OVERRIDES,
) -> InnatePoiseResolution:
    """Map each ``(name, weapon_class)`` to its innate poise and report unmatched overrides."""
    values: dict[str, int] = {}
    used: set[str] = set()
    for name, weapon_class in weapons:
        if name in overrides:
            values[name] = overrides[name]
            used.add(name)
        elif weapon_class in overrides:
            values[name] = overrides[weapon_class]
            used.add(weapon_class)
        else:
            values[name] = DEFAULT_INNATE_POISE
    unused = tuple(sorted(set(overrides) - used))
    return InnatePoiseResolution(values=values, unused_overrides=unused)
