"""Weapon moveset definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field

from hyperarmor.domain.damage import DamageSequence

CHAIN_STEP_CAP = 6


@dataclass(frozen=True, slots=True)
class Chain:
    """Up to six chained attack steps; only schema-populated steps are stored."""

    steps: tuple[DamageSequence, ...] = ()

    def __post_init__(self) -> None:
        if len(self.steps) > CHAIN_STEP_CAP:
            raise ValueError(f"Chain holds at most {CHAIN_STEP_CAP} steps, got {len(self.steps)}.")

    def get(self, step: int) -> DamageSequence | None:
        if step < 0 or step >= CHAIN_STEP_CAP or step >= len(self.steps):
            return None
        return self.steps[step]

    def __len__(self) -> int:
        return len(self.steps)

    def __str__(self) -> str:
        return " ⏵ ".join(str(step) for step in self.steps if step)


@dataclass(frozen=True, slots=True)
class StanceBlock:
    """Light (R1/L1) or heavy (R2) attacks of one grip."""

    chain: Chain = field(default_factory=Chain)
    charged: Chain = field(default_factory=Chain)
    feint: Chain = field(default_factory=Chain)
    running: DamageSequence | None = None
    rolling: DamageSequence | None = None
    backstep: DamageSequence | None = None
    jumping: DamageSequence | None = None
    guard_counter: DamageSequence | None = None


@dataclass(frozen=True, slots=True)
class GripBlock:
    r1: StanceBlock = field(default_factory=StanceBlock)
    r2: StanceBlock = field(default_factory=StanceBlock)


@dataclass(frozen=True, slots=True)
class CriticalBlock:
    """Backstab or riposte damage grouped by target size."""

    default: DamageSequence | None = None
    small: DamageSequence | None = None
    large: DamageSequence | None = None


@dataclass(frozen=True, slots=True)
class WeaponMoveset:
    """Every poise damage figure of one weapon."""

    name: str
    weapon_class: str
    one_handed: GripBlock = field(default_factory=GripBlock)
    two_handed: GripBlock = field(default_factory=GripBlock)
    paired: StanceBlock = field(default_factory=StanceBlock)
    offhand: Chain = field(default_factory=Chain)
    backstab: CriticalBlock = field(default_factory=CriticalBlock)
    riposte: CriticalBlock = field(default_factory=CriticalBlock)
    shieldpoke: DamageSequence | None = None
    multiplier: float = 1.0
