"""Attack catalog: every attack category, its hyperarmor multiplier and moveset field.

Adding an ``AttackKind`` means adding an entry to both ``HYPERARMOR_MULTIPLIERS``
and ``MOVESET_ACCESSORS``; ``tests/test_attacks.py`` checks both tables cover
every kind.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Literal

from hyperarmor.domain.damage import DamageSequence
from hyperarmor.domain.defs import CHAIN_STEP_CAP, CriticalBlock, WeaponMoveset

GripName = Literal["none", "one_handed", "two_handed", "paired", "offhand", "critical", "shield"]
StanceName = Literal["r1", "r2", "l1"]

_CHAINED_MOVES = {"chain", "charged", "feint"}
_CRITICAL_MOVES = {"backstab", "riposte"}
_KEY_SEPARATOR = ":"

_GRIP_LABELS = {
    "one_handed": "One Handed",
    "two_handed": "Two Handed",
    "paired": "Paired",
    "offhand": "Off Hand",
}


class CriticalSize(Enum):
    DEFAULT = "default"
    SMALL = "small"
    LARGE = "large"


class AttackKind(Enum):
    """Attack categories keyed by their (grip, stance, move) structure."""

    NONE = ("none", None, "none")
    ONE_HANDED_R1_CHAIN = ("one_handed", "r1", "chain")
    ONE_HANDED_R1_RUNNING = ("one_handed", "r1", "running")
    ONE_HANDED_R1_ROLLING = ("one_handed", "r1", "rolling")
    ONE_HANDED_R1_BACKSTEP = ("one_handed", "r1", "backstep")
    ONE_HANDED_R1_JUMPING = ("one_handed", "r1", "jumping")
    ONE_HANDED_R1_GUARD_COUNTER = ("one_handed", "r1", "guard_counter")
    ONE_HANDED_R2_CHAIN = ("one_handed", "r2", "chain")
    ONE_HANDED_R2_CHARGED = ("one_handed", "r2", "charged")
    ONE_HANDED_R2_RUNNING = ("one_handed", "r2", "running")
    ONE_HANDED_R2_JUMPING = ("one_handed", "r2", "jumping")
    ONE_HANDED_R2_FEINT = ("one_handed", "r2", "feint")
    TWO_HANDED_R1_CHAIN = ("two_handed", "r1", "chain")
    TWO_HANDED_R1_RUNNING = ("two_handed", "r1", "running")
    TWO_HANDED_R1_ROLLING = ("two_handed", "r1", "rolling")
    TWO_HANDED_R1_BACKSTEP = ("two_handed", "r1", "backstep")
    TWO_HANDED_R1_JUMPING = ("two_handed", "r1", "jumping")
    TWO_HANDED_R1_GUARD_COUNTER = ("two_handed", "r1", "guard_counter")
    TWO_HANDED_R2_CHAIN = ("two_handed", "r2", "chain")
    TWO_HANDED_R2_CHARGED = ("two_handed", "r2", "charged")
    TWO_HANDED_R2_RUNNING = ("two_handed", "r2", "running")
    TWO_HANDED_R2_JUMPING = ("two_handed", "r2", "jumping")
    TWO_HANDED_R2_FEINT = ("two_handed", "r2", "feint")
    PAIRED_L1_CHAIN = ("paired", "l1", "chain")
    PAIRED_L1_RUNNING = ("paired", "l1", "running")
    PAIRED_L1_ROLLING = ("paired", "l1", "rolling")
    PAIRED_L1_BACKSTEP = ("paired", "l1", "backstep")
    PAIRED_L1_JUMPING = ("paired", "l1", "jumping")
    OFFHAND_R1_CHAIN = ("offhand", "r1", "chain")
    BACKSTAB = ("critical", None, "backstab")
    RIPOSTE = ("critical", None, "riposte")
    SHIELDPOKE = ("shield", None, "shieldpoke")

    @property
    def grip(self) -> GripName:
        return self.value[0]

    @property
    def stance(self) -> StanceName | None:
        return self.value[1]

    @property
    def move(self) -> str:
        return self.value[2]

    @property
    def is_chained(self) -> bool:
        return self.move in _CHAINED_MOVES

    @property
    def is_critical(self) -> bool:
        return self.move in _CRITICAL_MOVES


@dataclass(frozen=True, slots=True)
class Attack:
    """One concrete attack: a kind plus its chain step or critical target size."""

    kind: AttackKind
    step: int | None = None
    size: CriticalSize | None = None

    def __post_init__(self) -> None:
        if self.kind.is_chained:
            if self.step is None:
                raise ValueError(f"{self.kind.name} requires a chain step.")
            if self.step < 0:
                raise ValueError(f"Chain step must be non-negative, got {self.step}.")
        elif self.step is not None:
            raise ValueError(f"{self.kind.name} does not take a chain step.")
        if self.kind.is_critical:
            if self.size is None:
                raise ValueError(f"{self.kind.name} requires a target size.")
        elif self.size is not None:
            raise ValueError(f"{self.kind.name} does not take a target size.")

    @property
    def multiplier(self) -> float:
        """Fixed hyperarmor multiplier of this attack category."""
        return HYPERARMOR_MULTIPLIERS[self.kind]

    @property
    def is_two_handed(self) -> bool:
        return self.kind.grip == "two_handed"

    @property
    def is_heavy_class(self) -> bool:
        return self.kind.stance == "r2"

    @property
    def label(self) -> str:
        """Display name, e.g. ``Two Handed R2 Charged 1`` or ``Backstab (Small)``."""
        kind = self.kind
        if kind is AttackKind.NONE:
            return "None"
        if kind.is_critical:
            assert self.size is not None
            return f"{kind.move.title()} ({self.size.value.title()})"
        if kind is AttackKind.SHIELDPOKE:
            return "Shieldpoke"
        parts = [_GRIP_LABELS[kind.grip], (kind.stance or "").upper(), kind.move.replace("_", " ").title()]
        if self.step is not None:
            parts.append(str(self.step + 1))
        return " ".join(parts)

    @property
    def key(self) -> str:
        """Stable identifier accepted by ``parse_attack``."""
        key = self.kind.name.lower()
        if self.step is not None:
            key = f"{key}{_KEY_SEPARATOR}{self.step}"
        if self.size is not None:
            key = f"{key}{_KEY_SEPARATOR}{self.size.value}"
        return key

    def __str__(self) -> str:
        return self.label


NO_ATTACK = Attack(AttackKind.NONE)


def parse_attack(key: str) -> Attack:
    """Parse an attack key such as ``two_handed_r2_charged:0`` or ``riposte:large``."""
    name, _, parameter = key.strip().partition(_KEY_SEPARATOR)
    try:
        kind = AttackKind[name.strip().upper()]
    except KeyError as exc:
        raise ValueError(f"Unknown attack '{key}'.") from exc
    if kind.is_chained:
        try:
            step = int(parameter)
        except ValueError as exc:
            raise ValueError(f"Attack '{key}' needs an integer chain step.") from exc
        return Attack(kind, step=step)
    if kind.is_critical:
        try:
            size = CriticalSize(parameter.strip().lower())
        except ValueError as exc:
            raise ValueError(f"Attack '{key}' needs a target size (default, small, large).") from exc
        return Attack(kind, size=size)
    if parameter:
        raise ValueError(f"Attack '{key}' does not take a parameter.")
    return Attack(kind)


def iter_attacks() -> Iterator[Attack]:
    """Yield every concrete attack, excluding the no-attack sentinel."""
    for kind in AttackKind:
        if kind is AttackKind.NONE:
            continue
        if kind.is_chained:
            for step in range(CHAIN_STEP_CAP):
                yield Attack(kind, step=step)
        elif kind.is_critical:
            for size in CriticalSize:
                yield Attack(kind, size=size)
        else:
            yield Attack(kind)


# Source: https://www.reddit.com/r/EldenRingPVP/comments/1dl2j8n/
HYPERARMOR_MULTIPLIERS: dict[AttackKind, float] = {
    AttackKind.NONE: 0.0,
    AttackKind.ONE_HANDED_R1_CHAIN: 1.0,
    AttackKind.ONE_HANDED_R1_RUNNING: 0.75,
    AttackKind.ONE_HANDED_R1_ROLLING: 0.75,
    AttackKind.ONE_HANDED_R1_BACKSTEP: 0.75,
    AttackKind.ONE_HANDED_R1_JUMPING: 0.75,
    AttackKind.ONE_HANDED_R1_GUARD_COUNTER: 0.5,
    AttackKind.ONE_HANDED_R2_CHAIN: 1.0,
    AttackKind.ONE_HANDED_R2_CHARGED: 2.0,
    AttackKind.ONE_HANDED_R2_RUNNING: 1.0,
    AttackKind.ONE_HANDED_R2_JUMPING: 1.0,
    AttackKind.ONE_HANDED_R2_FEINT: 1.0,
    AttackKind.TWO_HANDED_R1_CHAIN: 1.0,
    AttackKind.TWO_HANDED_R1_RUNNING: 0.75,
    AttackKind.TWO_HANDED_R1_ROLLING: 0.75,
    AttackKind.TWO_HANDED_R1_BACKSTEP: 0.75,
    AttackKind.TWO_HANDED_R1_JUMPING: 0.75,
    AttackKind.TWO_HANDED_R1_GUARD_COUNTER: 0.5,
    AttackKind.TWO_HANDED_R2_CHAIN: 1.0,
    AttackKind.TWO_HANDED_R2_CHARGED: 2.0,
    AttackKind.TWO_HANDED_R2_RUNNING: 1.0,
    AttackKind.TWO_HANDED_R2_JUMPING: 1.0,
    AttackKind.TWO_HANDED_R2_FEINT: 1.0,
    # Paired values are unconfirmed in-game.
    AttackKind.PAIRED_L1_CHAIN: 1.0,
    AttackKind.PAIRED_L1_RUNNING: 1.0,
    AttackKind.PAIRED_L1_ROLLING: 1.0,
    AttackKind.PAIRED_L1_BACKSTEP: 1.0,
    AttackKind.PAIRED_L1_JUMPING: 1.0,
    AttackKind.OFFHAND_R1_CHAIN: 1.0,
    AttackKind.BACKSTAB: 1.0,
    AttackKind.RIPOSTE: 1.0,
    AttackKind.SHIELDPOKE: 1.0,
}


def _by_size(block: CriticalBlock, size: CriticalSize | None) -> DamageSequence | None:
    if size is CriticalSize.SMALL:
        return block.small
    if size is CriticalSize.LARGE:
        return block.large
    return block.default


MovesetAccessor = Callable[[WeaponMoveset, Attack], "DamageSequence | None"]

MOVESET_ACCESSORS: dict[AttackKind, MovesetAccessor] = {
    AttackKind.NONE: lambda m, a: None,
    AttackKind.ONE_HANDED_R1_CHAIN: lambda m, a: m.one_handed.r1.chain.get(a.step),
    AttackKind.ONE_HANDED_R1_RUNNING: lambda m, a: m.one_handed.r1.running,
    AttackKind.ONE_HANDED_R1_ROLLING: lambda m, a: m.one_handed.r1.rolling,
    AttackKind.ONE_HANDED_R1_BACKSTEP: lambda m, a: m.one_handed.r1.backstep,
    AttackKind.ONE_HANDED_R1_JUMPING: lambda m, a: m.one_handed.r1.jumping,
    AttackKind.ONE_HANDED_R1_GUARD_COUNTER: lambda m, a: m.one_handed.r1.guard_counter,
    AttackKind.ONE_HANDED_R2_CHAIN: lambda m, a: m.one_handed.r2.chain.get(a.step),
    AttackKind.ONE_HANDED_R2_CHARGED: lambda m, a: m.one_handed.r2.charged.get(a.step),
    AttackKind.ONE_HANDED_R2_RUNNING: lambda m, a: m.one_handed.r2.running,
    AttackKind.ONE_HANDED_R2_JUMPING: lambda m, a: m.one_handed.r2.jumping,
    AttackKind.ONE_HANDED_R2_FEINT: lambda m, a: m.one_handed.r2.feint.get(a.step),
    AttackKind.TWO_HANDED_R1_CHAIN: lambda m, a: m.two_handed.r1.chain.get(a.step),
    AttackKind.TWO_HANDED_R1_RUNNING: lambda m, a: m.two_handed.r1.running,
    AttackKind.TWO_HANDED_R1_ROLLING: lambda m, a: m.two_handed.r1.rolling,
    AttackKind.TWO_HANDED_R1_BACKSTEP: lambda m, a: m.two_handed.r1.backstep,
    AttackKind.TWO_HANDED_R1_JUMPING: lambda m, a: m.two_handed.r1.jumping,
    AttackKind.TWO_HANDED_R1_GUARD_COUNTER: lambda m, a: m.two_handed.r1.guard_counter,
    AttackKind.TWO_HANDED_R2_CHAIN: lambda m, a: m.two_handed.r2.chain.get(a.step),
    AttackKind.TWO_HANDED_R2_CHARGED: lambda m, a: m.two_handed.r2.charged.get(a.step),
    AttackKind.TWO_HANDED_R2_RUNNING: lambda m, a: m.two_handed.r2.running,
    AttackKind.TWO_HANDED_R2_JUMPING: lambda m, a: m.two_handed.r2.jumping,
    AttackKind.TWO_HANDED_R2_FEINT: lambda m, a: m.two_handed.r2.feint.get(a.step),
    AttackKind.PAIRED_L1_CHAIN: lambda m, a: m.paired.chain.get(a.step),
    AttackKind.PAIRED_L1_RUNNING: lambda m, a: m.paired.running,
    AttackKind.PAIRED_L1_ROLLING: lambda m, a: m.paired.rolling,
    AttackKind.PAIRED_L1_BACKSTEP: lambda m, a: m.paired.backstep,
    AttackKind.PAIRED_L1_JUMPING: lambda m, a: m.paired.jumping,
    AttackKind.OFFHAND_R1_CHAIN: lambda m, a: m.offhand.get(a.step),
    AttackKind.BACKSTAB: lambda m, a: _by_size(m.backstab, a.size),
    AttackKind.RIPOSTE: lambda m, a: _by_size(m.riposte, a.size),
    AttackKind.SHIELDPOKE: lambda m, a: m.shieldpoke,
}


def select_damage(moveset: WeaponMoveset, attack: Attack) -> DamageSequence | None:
    """Return the moveset's damage for ``attack``, or None when it has no entry."""
    return MOVESET_ACCESSORS[attack.kind](moveset, attack)
