"""Rescale a whole moveset under an incoming poise damage multiplier."""
from __future__ import annotations

from dataclasses import replace

from hyperarmor.domain.damage import DamageSequence
from hyperarmor.domain.defs import Chain, CriticalBlock, GripBlock, StanceBlock, WeaponMoveset


def scale_damage(sequence: DamageSequence | None, multiplier: float) -> DamageSequence | None:
    """Scale one damage sequence the same way ``apply_multiplier`` scales a moveset."""
    if sequence is None:
        return None
    return sequence.scaled(multiplier)


def _scale_chain(chain: Chain, multiplier: float) -> Chain:
    return Chain(tuple(step.scaled(multiplier) for step in chain.steps))


def _scale_stance(stance: StanceBlock, multiplier: float) -> StanceBlock:
    return StanceBlock(
        chain=_scale_chain(stance.chain, multiplier),
        charged=_scale_chain(stance.charged, multiplier),
        feint=_scale_chain(stance.feint, multiplier),
        running=scale_damage(stance.running, multiplier),
        rolling=scale_damage(stance.rolling, multiplier),
        backstep=scale_damage(stance.backstep, multiplier),
        jumping=scale_damage(stance.jumping, multiplier),
        guard_counter=scale_damage(stance.guard_counter, multiplier),
    )


def _scale_grip(grip: GripBlock, multiplier: float) -> GripBlock:
    return GripBlock(r1=_scale_stance(grip.r1, multiplier), r2=_scale_stance(grip.r2, multiplier))


def _scale_critical(block: CriticalBlock, multiplier: float) -> CriticalBlock:
    return CriticalBlock(
        default=scale_damage(block.default, multiplier),
        small=scale_damage(block.small, multiplier),
        large=scale_damage(block.large, multiplier),
    )


def apply_multiplier(moveset: WeaponMoveset, multiplier: float) -> WeaponMoveset:
    """
    Return a new moveset with every hit scaled by ``multiplier``.

    Each value is truncated toward zero, with negative or non-finite products
    becoming 0. Sequence lengths and absent fields are preserved, and
    ``multiplier`` is recorded on the result. The input moveset is not
    modified.
    """
    return replace(
        moveset,
        one_handed=_scale_grip(moveset.one_handed, multiplier),
        two_handed=_scale_grip(moveset.two_handed, multiplier),
        paired=_scale_stance(moveset.paired, multiplier),
        offhand=_scale_chain(moveset.offhand, multiplier),
        backstab=_scale_critical(moveset.backstab, multiplier),
        riposte=_scale_critical(moveset.riposte, multiplier),
        shieldpoke=scale_damage(moveset.shieldpoke, multiplier),
        multiplier=multiplier,
    )
