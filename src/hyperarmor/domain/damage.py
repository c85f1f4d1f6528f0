"""Poise damage sequences and the damage-expression cell grammar."""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Iterator

logger = logging.getLogger(__name__)

EXPRESSION_SEPARATOR = "+"
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def to_damage(value: float) -> int:
    """Truncate toward zero; negative and non-finite values become 0."""
    if not math.isfinite(value) or value < 0:
        return 0
    return int(value)


def parse_damage_expression(text: str) -> tuple[int, ...]:
    """
    Parse a dataset cell such as ``"302.5 + 605"`` into per-hit damage.

    Blank cells parse to an empty tuple. Each ``+``-separated segment is
    parsed as a plain decimal and truncated toward zero; a segment that is
    not a decimal is logged and counted as 0, as is a negative one.
    """
    if not text or not text.strip():
        return ()
    values: list[int] = []
    for segment in text.split(EXPRESSION_SEPARATOR):
        stripped = segment.strip()
        if not _DECIMAL.fullmatch(stripped):
            logger.warning("Error parsing poise damage %r: not a decimal number. Defaulting to 0", segment)
            values.append(0)
            continue
        values.append(to_damage(float(stripped)))
    return tuple(values)


@dataclass(frozen=True, slots=True)
class DamageSequence:
    """Poise damage of each hit of one attack, in temporal order."""

    values: tuple[int, ...] = ()

    @classmethod
    def parse(cls, text: str) -> "DamageSequence":
        return cls(parse_damage_expression(text))

    def scaled(self, multiplier: float) -> "DamageSequence":
        """
        Return a copy with every hit multiplied and truncated toward zero.

        Products that are negative, infinite or NaN become 0, so any float
        multiplier is accepted.
        """
        return DamageSequence(tuple(to_damage(value * multiplier) for value in self.values))

    def total(self) -> int:
        return sum(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __bool__(self) -> bool:
        return bool(self.values)

    def __str__(self) -> str:
        return " + ".join(str(value) for value in self.values)
