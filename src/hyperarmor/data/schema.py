"""Column layout of the poise damage spreadsheet export.

Each ``ColumnSpec`` maps one column to a dotted moveset field path. Chain
steps end in their zero-based index (``one_handed.r1.chain.0``).
"""
from __future__ import annotations

from dataclasses import dataclass

CLASS_COLUMN = 0
NAME_COLUMN = 1
BACKSTAB_WHIFF_COLUMN = 42
IGNORED_COLUMNS = frozenset({BACKSTAB_WHIFF_COLUMN})


@dataclass(frozen=True, slots=True)
class ColumnSpec:
    index: int
    path: str


def _steps(start: int, path: str, count: int) -> list[ColumnSpec]:
    return [ColumnSpec(start + offset, f"{path}.{offset}") for offset in range(count)]


def _grip_columns(start: int, grip: str) -> list[ColumnSpec]:
    """The 17 columns shared by the one-handed and two-handed blocks."""
    return [
        *_steps(start, f"{grip}.r1.chain", 6),
        *_steps(start + 6, f"{grip}.r2.chain", 2),
        *_steps(start + 8, f"{grip}.r2.charged", 2),
        ColumnSpec(start + 10, f"{grip}.r1.running"),
        ColumnSpec(start + 11, f"{grip}.r2.running"),
        ColumnSpec(start + 12, f"{grip}.r1.rolling"),
        ColumnSpec(start + 13, f"{grip}.r1.backstep"),
        ColumnSpec(start + 14, f"{grip}.r1.jumping"),
        ColumnSpec(start + 15, f"{grip}.r2.jumping"),
        ColumnSpec(start + 16, f"{grip}.r1.guard_counter"),
    ]


COLUMN_SCHEMA: tuple[ColumnSpec, ...] = (
    *_grip_columns(2, "one_handed"),
    *_grip_columns(19, "two_handed"),
    *_steps(36, "offhand", 6),
    ColumnSpec(43, "backstab.default"),
    ColumnSpec(44, "riposte.default"),
    ColumnSpec(45, "backstab.small"),
    ColumnSpec(46, "riposte.small"),
    ColumnSpec(47, "riposte.large"),
    ColumnSpec(48, "shieldpoke"),
    *_steps(49, "one_handed.r2.feint", 2),
    *_steps(51, "two_handed.r2.feint", 2),
    *_steps(53, "paired.chain", 6),
    ColumnSpec(59, "paired.running"),
    ColumnSpec(60, "paired.rolling"),
    ColumnSpec(61, "paired.backstep"),
    ColumnSpec(62, "paired.jumping"),
)

SCHEMA_WIDTH = max(spec.index for spec in COLUMN_SCHEMA) + 1
