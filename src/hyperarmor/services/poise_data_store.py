"""Read-only store of weapon movesets and the queries built on it."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Mapping

from hyperarmor.data.errors import DataValidationError, UnusedOverrideError
from hyperarmor.data.fetch import DatasetFetcher, ensure_dataset
from hyperarmor.data.paths import get_dataset_path
from hyperarmor.data.repositories import PoiseDataRepository
from hyperarmor.domain.attacks import Attack, select_damage
from hyperarmor.domain.damage import DamageSequence
from hyperarmor.domain.defs import WeaponMoveset
from hyperarmor.domain.hyperarmor import hyperarmor
from hyperarmor.domain.innate_poise import (
    DEFAULT_INNATE_POISE,
    INNATE_POISE_OVERRIDES,
    resolve_innate_poise,
)
from hyperarmor.domain.projection import scale_damage

logger = logging.getLogger(__name__)


class PoiseDataStore:
    """
    Weapon movesets keyed by name, with class and innate poise indices.

    The store is built once and never mutated; every query is total and
    answers None for data that does not exist.
    """

    def __init__(
        self,
        movesets: Iterable[WeaponMoveset],
        overrides: Mapping[str, int] = INNATE_POISE_OVERRIDES,
    ) -> None:
        by_name: dict[str, WeaponMoveset] = {}
        for moveset in movesets:
            if not moveset.name or not moveset.weapon_class:
                raise DataValidationError("Weapon movesets need a non-empty name and class.")
            by_name[moveset.name] = moveset
        self._movesets = {name: by_name[name] for name in sorted(by_name)}

        classes: dict[str, list[str]] = {}
        for name, moveset in self._movesets.items():
            classes.setdefault(moveset.weapon_class, []).append(name)
        self._classes = {weapon_class: sorted(classes[weapon_class]) for weapon_class in sorted(classes)}

        resolution = resolve_innate_poise(
            ((name, moveset.weapon_class) for name, moveset in self._movesets.items()),
            overrides,
        )
        if resolution.unused_overrides:
            raise UnusedOverrideError(resolution.unused_overrides)
        self._innate_poise = resolution.values

    def __len__(self) -> int:
        return len(self._movesets)

    def __contains__(self, weapon: object) -> bool:
        return weapon in self._movesets

    def __iter__(self) -> Iterator[WeaponMoveset]:
        return iter(self._movesets.values())

    def weapons(self) -> list[str]:
        """Return every weapon name in order."""
        return list(self._movesets)

    def lookup(self, weapon: str) -> WeaponMoveset | None:
        return self._movesets.get(weapon)

    def damage_for(self, weapon: str, attack: Attack) -> DamageSequence | None:
        """Return the weapon's damage for ``attack``, or None when it has none."""
        moveset = self._movesets.get(weapon)
        if moveset is None:
            return None
        return select_damage(moveset, attack)

    def damage_for_with_multiplier(
        self, weapon: str, attack: Attack, multiplier: float
    ) -> DamageSequence | None:
        return scale_damage(self.damage_for(weapon, attack), multiplier)

    def weapons_by_class(self) -> dict[str, list[str]]:
        """Return sorted weapon names per class, classes in sorted order."""
        return {weapon_class: list(names) for weapon_class, names in self._classes.items()}

    def innate_poise(self, weapon: str) -> int:
        return self._innate_poise.get(weapon, DEFAULT_INNATE_POISE)

    def weapon_hyperarmor(self, weapon: str, attack: Attack) -> float | None:
        """Hyperarmor ``weapon`` grants during ``attack``; None for unknown weapons."""
        moveset = self._movesets.get(weapon)
        if moveset is None:
            return None
        return hyperarmor(
            self.innate_poise(weapon),
            attack.multiplier,
            moveset.weapon_class,
            moveset.name,
            attack,
        )

    def damage_totals_for_attack(self, attack: Attack, multiplier: float | None = None) -> list[float]:
        """Total damage of ``attack`` for every weapon that has data for it."""
        totals: list[float] = []
        for name in self._movesets:
            damage = self._damage(name, attack, multiplier)
            if damage is not None:
                totals.append(float(damage.total()))
        return totals

    def damage_totals_by_class(
        self, attack: Attack, multiplier: float | None = None
    ) -> dict[str, list[tuple[str, float]]]:
        """Total damage of ``attack`` per weapon, grouped by class."""
        grouped: dict[str, list[tuple[str, float]]] = {}
        for weapon_class, names in self._classes.items():
            for name in names:
                damage = self._damage(name, attack, multiplier)
                if damage is None:
                    logger.warning("Weapon %s does not have poise damage for attack %s", name, attack.key)
                    continue
                grouped.setdefault(weapon_class, []).append((name, float(damage.total())))
        return grouped

    def _damage(self, weapon: str, attack: Attack, multiplier: float | None) -> DamageSequence | None:
        if multiplier is None:
            return self.damage_for(weapon, attack)
        return self.damage_for_with_multiplier(weapon, attack, multiplier)


def load_poise_data(
    path: Path | str | None = None,
    *,
    fetcher: DatasetFetcher | None = None,
    overrides: Mapping[str, int] = INNATE_POISE_OVERRIDES,
) -> PoiseDataStore:
    """
    Build the store from the dataset cache, fetching it first when missing.

    Raises DataLoadError when the file cannot be obtained or read, and
    UnusedOverrideError when the innate poise table has drifted from the data.
    """
    dataset_path = ensure_dataset(get_dataset_path(path), fetcher)
    repository = PoiseDataRepository(base_path=dataset_path.parent, filename=dataset_path.name)
    store = PoiseDataStore(repository.all(), overrides)
    logger.info("Poise data ready: %d weapons in %d classes", len(store), len(store.weapons_by_class()))
    return store
