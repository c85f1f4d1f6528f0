"""Weapon hyperarmor rules."""
from __future__ import annotations

from hyperarmor.domain.attacks import Attack

FULL_HYPERARMOR_POISE = 77
PARTIAL_HYPERARMOR_POISE = 52
GREAT_KATANA_CLASS = "Great Katana"
GREAT_KATANA_EXCEPTION = "Rakshasa's Great Katana"
HAMMER_CLASS = "Hammer"


def hyperarmor(
    innate_poise: int,
    attack_multiplier: float,
    weapon_class: str,
    weapon_name: str,
    attack: Attack,
) -> float:
    """
    Return the hyperarmor a weapon grants while performing ``attack``.

    Weapons above 77 innate poise always grant ``innate_poise * attack_multiplier``.
    Between 52 and 77 only some attacks do: two-handed swings in general, also
    heavy swings for hammers, and only Rakshasa's Great Katana among great
    katanas. Anything below 52 grants nothing.
    """
    full = innate_poise * attack_multiplier
    if innate_poise > FULL_HYPERARMOR_POISE:
        return float(full)
    if innate_poise < PARTIAL_HYPERARMOR_POISE:
        return 0.0
    if weapon_class == GREAT_KATANA_CLASS:
        return float(full) if weapon_name == GREAT_KATANA_EXCEPTION else 0.0
    if weapon_class == HAMMER_CLASS:
        return float(full) if attack.is_two_handed or attack.is_heavy_class else 0.0
    return float(full) if attack.is_two_handed else 0.0
