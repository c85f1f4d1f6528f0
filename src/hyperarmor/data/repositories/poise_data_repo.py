"""Poise damage repository: turns spreadsheet rows into weapon movesets."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Sequence

from hyperarmor.data import paths
from hyperarmor.data.csv_loader import load_csv_rows
from hyperarmor.data.schema import CLASS_COLUMN, COLUMN_SCHEMA, NAME_COLUMN
from hyperarmor.domain.damage import DamageSequence
from hyperarmor.domain.defs import (
    CHAIN_STEP_CAP,
    Chain,
    CriticalBlock,
    GripBlock,
    StanceBlock,
    WeaponMoveset,
)

logger = logging.getLogger(__name__)

Cells = Dict[str, DamageSequence]


def parse_row(row: Sequence[str]) -> WeaponMoveset | None:
    """Build a moveset from one row, or return None for rows without class and name."""
    weapon_class = _cell(row, CLASS_COLUMN).strip()
    name = _cell(row, NAME_COLUMN).strip()
    if not weapon_class or not name:
        return None
    cells: Cells = {spec.path: DamageSequence.parse(_cell(row, spec.index)) for spec in COLUMN_SCHEMA}
    return WeaponMoveset(
        name=name,
        weapon_class=weapon_class,
        one_handed=_grip(cells, "one_handed"),
        two_handed=_grip(cells, "two_handed"),
        paired=_stance(cells, "paired"),
        offhand=_chain(cells, "offhand"),
        backstab=_critical(cells, "backstab"),
        riposte=_critical(cells, "riposte"),
        shieldpoke=cells.get("shieldpoke"),
    )


def _cell(row: Sequence[str], index: int) -> str:
    # Short rows are padded with blanks.
    return row[index] if index < len(row) else ""


def _chain(cells: Cells, prefix: str) -> Chain:
    steps: list[DamageSequence] = []
    for step in range(CHAIN_STEP_CAP):
        value = cells.get(f"{prefix}.{step}")
        if value is None:
            break
        steps.append(value)
    return Chain(tuple(steps))


def _stance(cells: Cells, prefix: str) -> StanceBlock:
    return StanceBlock(
        chain=_chain(cells, f"{prefix}.chain"),
        charged=_chain(cells, f"{prefix}.charged"),
        feint=_chain(cells, f"{prefix}.feint"),
        running=cells.get(f"{prefix}.running"),
        rolling=cells.get(f"{prefix}.rolling"),
        backstep=cells.get(f"{prefix}.backstep"),
        jumping=cells.get(f"{prefix}.jumping"),
        guard_counter=cells.get(f"{prefix}.guard_counter"),
    )


def _grip(cells: Cells, prefix: str) -> GripBlock:
    return GripBlock(r1=_stance(cells, f"{prefix}.r1"), r2=_stance(cells, f"{prefix}.r2"))


def _critical(cells: Cells, prefix: str) -> CriticalBlock:
    return CriticalBlock(
        default=cells.get(f"{prefix}.default"),
        small=cells.get(f"{prefix}.small"),
        large=cells.get(f"{prefix}.large"),
    )


class PoiseDataRepository:
    """Loads weapon movesets from the cached poise damage CSV."""

    def __init__(
        self,
        base_path: Path | str | None = None,
        filename: str = paths.POISE_DATA_FILE,
    ) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._movesets: Dict[str, WeaponMoveset] | None = None

    @property
    def file_path(self) -> Path:
        return paths.get_data_dir(self._base_path) / self._filename

    def _build(self, rows: list[list[str]]) -> Dict[str, WeaponMoveset]:
        movesets: Dict[str, WeaponMoveset] = {}
        for row in rows:
            moveset = parse_row(row)
            if moveset is None:
                continue
            if moveset.name in movesets:
                logger.warning("Duplicate weapon '%s' in %s; keeping the last row", moveset.name, self.file_path)
            movesets[moveset.name] = moveset
        return movesets

    def _ensure_loaded(self) -> None:
        if self._movesets is None:
            logger.info("Loading poise data from %s", self.file_path)
            self._movesets = self._build(load_csv_rows(self.file_path))
            logger.debug("Loaded %d weapons", len(self._movesets))

    def get(self, name: str) -> WeaponMoveset:
        """Return a moveset by weapon name."""
        self._ensure_loaded()
        assert self._movesets is not None
        try:
            return self._movesets[name]
        except KeyError as exc:
            raise KeyError(name) from exc

    def all(self) -> list[WeaponMoveset]:
        """Return all movesets sorted by weapon name."""
        self._ensure_loaded()
        assert self._movesets is not None
        return [self._movesets[key] for key in sorted(self._movesets.keys())]
