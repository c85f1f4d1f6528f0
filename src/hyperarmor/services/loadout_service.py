"""Loadout evaluation: weapon hyperarmor, armor poise and incoming damage multiplier."""
from __future__ import annotations

from dataclasses import dataclass

from hyperarmor.domain.attacks import Attack
from hyperarmor.services.errors import WeaponNotFoundError
from hyperarmor.services.poise_data_store import PoiseDataStore

BULLGOAT_REDUCTION = 0.25
COLOSSAL_POISE_DAMAGE_MULTIPLIER = 0.5625
POISE_DAMAGE_MULTIPLIER = 0.8125
COLOSSAL_CLASS_MARKER = "Colossal"


@dataclass(frozen=True, slots=True)
class LoadoutResult:
    weapon: str
    weapon_class: str
    attack: Attack
    innate_poise: int
    weapon_hyperarmor: float
    hyperarmor: float
    incoming_multiplier: float


def incoming_multiplier(weapon_class: str, weapon_hyperarmor: float, *, bullgoat: bool) -> float:
    """Poise damage multiplier applied to hits taken during the attack."""
    if int(weapon_hyperarmor) > 0:
        base = (
            COLOSSAL_POISE_DAMAGE_MULTIPLIER
            if COLOSSAL_CLASS_MARKER in weapon_class
            else POISE_DAMAGE_MULTIPLIER
        )
    else:
        base = 1.0
    return base * (1.0 - BULLGOAT_REDUCTION) if bullgoat else base


class LoadoutService:
    """Combines weapon hyperarmor with equipped armor poise and talismans."""

    def __init__(self, store: PoiseDataStore) -> None:
        self._store = store

    def evaluate(
        self,
        weapon: str,
        attack: Attack,
        *,
        armor_poise: int = 0,
        bullgoat: bool = False,
    ) -> LoadoutResult:
        moveset = self._store.lookup(weapon)
        if moveset is None:
            raise WeaponNotFoundError(f"Unknown weapon '{weapon}'.")
        weapon_hyperarmor = self._store.weapon_hyperarmor(weapon, attack)
        assert weapon_hyperarmor is not None
        # Armor poise only holds while the weapon grants hyperarmor.
        total = armor_poise + weapon_hyperarmor if int(weapon_hyperarmor) > 0 else 0.0
        return LoadoutResult(
            weapon=moveset.name,
            weapon_class=moveset.weapon_class,
            attack=attack,
            innate_poise=self._store.innate_poise(weapon),
            weapon_hyperarmor=weapon_hyperarmor,
            hyperarmor=float(total),
            incoming_multiplier=incoming_multiplier(moveset.weapon_class, weapon_hyperarmor, bullgoat=bullgoat),
        )

    def staggering_weapons(
        self, result: LoadoutResult, incoming_attack: Attack
    ) -> dict[str, list[tuple[str, float]]]:
        """Weapons whose ``incoming_attack`` deals at least the loadout's hyperarmor, per class."""
        grouped = self._store.damage_totals_by_class(incoming_attack, result.incoming_multiplier)
        staggering: dict[str, list[tuple[str, float]]] = {}
        for weapon_class, totals in grouped.items():
            hits = [(name, total) for name, total in totals if total >= result.hyperarmor]
            if hits:
                staggering[weapon_class] = hits
        return staggering
