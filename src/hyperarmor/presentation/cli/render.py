"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable, Sequence

from hyperarmor.domain.damage import DamageSequence
from hyperarmor.domain.defs import Chain, WeaponMoveset

NO_DATA = "-"


def debug_enabled() -> bool:
    """Return True only when HYPERARMOR_DEBUG is explicitly set to '1'."""
    return os.getenv("HYPERARMOR_DEBUG") == "1"


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_bullet_lines(lines: Iterable[str]) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        print(f"- {line}")


def format_cell(value: DamageSequence | Chain | None) -> str:
    if value is None:
        return NO_DATA
    return str(value) or NO_DATA


def format_table(header: Sequence[str], rows: Sequence[Sequence[str]]) -> list[str]:
    """Left-aligned columns separated by ' | '."""
    widths = [len(title) for title in header]
    for row in rows:
        for idx, cell in enumerate(row):
            widths[idx] = max(widths[idx], len(cell))

    def _line(cells: Sequence[str]) -> str:
        return " | ".join(cell.ljust(widths[idx]) for idx, cell in enumerate(cells)).rstrip()

    separator = "-+-".join("-" * width for width in widths)
    return [_line(header), separator, *(_line(row) for row in rows)]


def moveset_rows(moveset: WeaponMoveset) -> list[list[str]]:
    """One row per move with one-handed and two-handed columns."""
    one, two = moveset.one_handed, moveset.two_handed
    pairs = [
        ("R1 Chain", one.r1.chain, two.r1.chain),
        ("R1 Running", one.r1.running, two.r1.running),
        ("R1 Rolling", one.r1.rolling, two.r1.rolling),
        ("R1 Backstep", one.r1.backstep, two.r1.backstep),
        ("R1 Jumping", one.r1.jumping, two.r1.jumping),
        ("R1 Guard Counter", one.r1.guard_counter, two.r1.guard_counter),
        ("R2 Chain", one.r2.chain, two.r2.chain),
        ("R2 Charged", one.r2.charged, two.r2.charged),
        ("R2 Running", one.r2.running, two.r2.running),
        ("R2 Jumping", one.r2.jumping, two.r2.jumping),
        ("R2 Feint", one.r2.feint, two.r2.feint),
    ]
    return [[label, format_cell(left), format_cell(right)] for label, left, right in pairs]


def extra_moveset_lines(moveset: WeaponMoveset) -> list[str]:
    """Paired, off-hand and critical figures that have no grip column."""
    return [
        f"Paired L1 Chain: {format_cell(moveset.paired.chain)}",
        f"Paired L1 Running: {format_cell(moveset.paired.running)}",
        f"Paired L1 Rolling: {format_cell(moveset.paired.rolling)}",
        f"Paired L1 Backstep: {format_cell(moveset.paired.backstep)}",
        f"Paired L1 Jumping: {format_cell(moveset.paired.jumping)}",
        f"Off Hand R1 Chain: {format_cell(moveset.offhand)}",
        f"Backstab: {format_cell(moveset.backstab.default)} (small {format_cell(moveset.backstab.small)})",
        (
            f"Riposte: {format_cell(moveset.riposte.default)} "
            f"(small {format_cell(moveset.riposte.small)}, large {format_cell(moveset.riposte.large)})"
        ),
        f"Shieldpoke: {format_cell(moveset.shieldpoke)}",
    ]


def render_moveset(moveset: WeaponMoveset) -> None:
    render_heading(f"{moveset.name} ({moveset.weapon_class})")
    if moveset.multiplier != 1.0:
        print(f"Incoming poise damage multiplier: {moveset.multiplier:g}")
    for line in format_table(["Attack Type", "One Handed", "Two Handed"], moveset_rows(moveset)):
        print(line)
    print()
    render_bullet_lines(extra_moveset_lines(moveset))
