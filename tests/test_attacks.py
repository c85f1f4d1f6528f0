from __future__ import annotations

import re

import pytest

from hyperarmor.domain.attacks import (
    HYPERARMOR_MULTIPLIERS,
    MOVESET_ACCESSORS,
    NO_ATTACK,
    Attack,
    AttackKind,
    CriticalSize,
    iter_attacks,
    parse_attack,
    select_damage,
)
from hyperarmor.domain.defs import WeaponMoveset


def test_every_kind_has_multiplier_and_accessor() -> None:
    for kind in AttackKind:
        assert kind in HYPERARMOR_MULTIPLIERS, kind
        assert kind in MOVESET_ACCESSORS, kind
    assert len(HYPERARMOR_MULTIPLIERS) == len(AttackKind)
    assert len(MOVESET_ACCESSORS) == len(AttackKind)


def test_every_attack_resolves_against_empty_moveset() -> None:
    moveset = WeaponMoveset(name="Empty", weapon_class="Test")
    for attack in iter_attacks():
        assert select_damage(moveset, attack) is None
    assert select_damage(moveset, NO_ATTACK) is None


def test_structural_predicates_match_label_wording() -> None:
    for attack in [NO_ATTACK, *iter_attacks()]:
        assert attack.is_two_handed == ("Two Handed" in attack.label), attack.label
        assert attack.is_heavy_class == ("R2" in attack.label), attack.label


def test_predicates_match_title_cased_variant_names() -> None:
    assert set(_VARIANT_NAMES) == set(AttackKind)
    for attack in [NO_ATTACK, *iter_attacks()]:
        wording = _title_wording(_variant_debug(attack))
        assert attack.is_two_handed == ("Two Handed" in wording), wording
        assert attack.is_heavy_class == ("R2" in wording), wording


@pytest.mark.parametrize(
    ("attack", "wording"),
    [
        (Attack(AttackKind.TWO_HANDED_R2_CHARGED, step=0), "Two Handed R2 Charged 0"),
        (Attack(AttackKind.OFFHAND_R1_CHAIN, step=3), "Off Hand R1 Chain 3"),
        (Attack(AttackKind.PAIRED_L1_BACKSTEP), "Paired L1 Backstep"),
        (Attack(AttackKind.BACKSTAB, size=CriticalSize.SMALL), "Backstab Small"),
        (NO_ATTACK, "None"),
    ],
)
def test_title_wording_of_variant_names(attack: Attack, wording: str) -> None:
    assert _title_wording(_variant_debug(attack)) == wording


def test_iter_attacks_covers_steps_and_sizes() -> None:
    attacks = list(iter_attacks())

    assert len(attacks) == 85
    assert len(set(attacks)) == len(attacks)
    assert NO_ATTACK not in attacks
    assert Attack(AttackKind.PAIRED_L1_CHAIN, step=5) in attacks
    assert Attack(AttackKind.RIPOSTE, size=CriticalSize.LARGE) in attacks


def test_attack_keys_round_trip() -> None:
    for attack in [NO_ATTACK, *iter_attacks()]:
        assert parse_attack(attack.key) == attack


@pytest.mark.parametrize(
    ("key", "multiplier"),
    [
        ("none", 0.0),
        ("one_handed_r1_chain:0", 1.0),
        ("one_handed_r1_running", 0.75),
        ("two_handed_r1_rolling", 0.75),
        ("two_handed_r1_backstep", 0.75),
        ("one_handed_r1_jumping", 0.75),
        ("two_handed_r1_guard_counter", 0.5),
        ("one_handed_r2_chain:1", 1.0),
        ("two_handed_r2_charged:0", 2.0),
        ("one_handed_r2_charged:1", 2.0),
        ("two_handed_r2_running", 1.0),
        ("two_handed_r2_jumping", 1.0),
        ("one_handed_r2_feint:0", 1.0),
        ("paired_l1_chain:2", 1.0),
        ("paired_l1_rolling", 1.0),
        ("offhand_r1_chain:3", 1.0),
        ("backstab:small", 1.0),
        ("riposte:default", 1.0),
        ("shieldpoke", 1.0),
    ],
)
def test_hyperarmor_multipliers(key: str, multiplier: float) -> None:
    assert parse_attack(key).multiplier == multiplier


def test_labels() -> None:
    assert parse_attack("two_handed_r2_charged:0").label == "Two Handed R2 Charged 1"
    assert parse_attack("one_handed_r1_guard_counter").label == "One Handed R1 Guard Counter"
    assert parse_attack("offhand_r1_chain:2").label == "Off Hand R1 Chain 3"
    assert parse_attack("backstab:small").label == "Backstab (Small)"
    assert str(parse_attack("shieldpoke")) == "Shieldpoke"
    assert NO_ATTACK.label == "None"


def test_predicates() -> None:
    assert parse_attack("two_handed_r1_running").is_two_handed
    assert not parse_attack("two_handed_r1_running").is_heavy_class
    assert parse_attack("one_handed_r2_chain:0").is_heavy_class
    assert not parse_attack("one_handed_r2_chain:0").is_two_handed
    assert not parse_attack("paired_l1_chain:0").is_two_handed
    assert not parse_attack("riposte:large").is_heavy_class


@pytest.mark.parametrize(
    "kwargs",
    [
        {"kind": AttackKind.ONE_HANDED_R1_CHAIN},
        {"kind": AttackKind.ONE_HANDED_R1_CHAIN, "step": -1},
        {"kind": AttackKind.SHIELDPOKE, "step": 0},
        {"kind": AttackKind.BACKSTAB},
        {"kind": AttackKind.TWO_HANDED_R1_RUNNING, "size": CriticalSize.SMALL},
    ],
)
def test_invalid_attack_construction_raises(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        Attack(**kwargs)


def test_step_beyond_cap_is_constructible() -> None:
    assert Attack(AttackKind.ONE_HANDED_R1_CHAIN, step=6).step == 6


@pytest.mark.parametrize(
    "key",
    ["overhead_smash", "one_handed_r1_chain", "one_handed_r1_chain:x", "backstab:huge", "shieldpoke:1"],
)
def test_parse_attack_rejects_bad_keys(key: str) -> None:
    with pytest.raises(ValueError):
        parse_attack(key)


_VARIANT_NAMES = {
    AttackKind.NONE: "None",
    AttackKind.ONE_HANDED_R1_CHAIN: "OneHandedR1Chain",
    AttackKind.ONE_HANDED_R1_RUNNING: "OneHandedR1Running",
    AttackKind.ONE_HANDED_R1_ROLLING: "OneHandedR1Rolling",
    AttackKind.ONE_HANDED_R1_BACKSTEP: "OneHandedR1Backstep",
    AttackKind.ONE_HANDED_R1_JUMPING: "OneHandedR1Jumping",
    AttackKind.ONE_HANDED_R1_GUARD_COUNTER: "OneHandedR1GuardCounter",
    AttackKind.ONE_HANDED_R2_CHAIN: "OneHandedR2Chain",
    AttackKind.ONE_HANDED_R2_CHARGED: "OneHandedR2Charged",
    AttackKind.ONE_HANDED_R2_RUNNING: "OneHandedR2Running",
    AttackKind.ONE_HANDED_R2_JUMPING: "OneHandedR2Jumping",
    AttackKind.ONE_HANDED_R2_FEINT: "OneHandedR2Feint",
    AttackKind.TWO_HANDED_R1_CHAIN: "TwoHandedR1Chain",
    AttackKind.TWO_HANDED_R1_RUNNING: "TwoHandedR1Running",
    AttackKind.TWO_HANDED_R1_ROLLING: "TwoHandedR1Rolling",
    AttackKind.TWO_HANDED_R1_BACKSTEP: "TwoHandedR1Backstep",
    AttackKind.TWO_HANDED_R1_JUMPING: "TwoHandedR1Jumping",
    AttackKind.TWO_HANDED_R1_GUARD_COUNTER: "TwoHandedR1GuardCounter",
    AttackKind.TWO_HANDED_R2_CHAIN: "TwoHandedR2Chain",
    AttackKind.TWO_HANDED_R2_CHARGED: "TwoHandedR2Charged",
    AttackKind.TWO_HANDED_R2_RUNNING: "TwoHandedR2Running",
    AttackKind.TWO_HANDED_R2_JUMPING: "TwoHandedR2Jumping",
    AttackKind.TWO_HANDED_R2_FEINT: "TwoHandedR2Feint",
    AttackKind.PAIRED_L1_CHAIN: "PairedL1Chain",
    AttackKind.PAIRED_L1_RUNNING: "PairedL1Running",
    AttackKind.PAIRED_L1_ROLLING: "PairedL1Rolling",
    AttackKind.PAIRED_L1_BACKSTEP: "PairedL1Backstep",
    AttackKind.PAIRED_L1_JUMPING: "PairedL1Jumping",
    AttackKind.OFFHAND_R1_CHAIN: "OffHandR1Chain",
    AttackKind.BACKSTAB: "Backstab",
    AttackKind.RIPOSTE: "Riposte",
    AttackKind.SHIELDPOKE: "Shieldpoke",
}


def _variant_debug(attack: Attack) -> str:
    """CamelCase variant name with its payload, e.g. ``TwoHandedR2Charged(0)``."""
    name = _VARIANT_NAMES[attack.kind]
    if attack.step is not None:
        return f"{name}({attack.step})"
    if attack.size is not None:
        return f"{name}({attack.size.value.title()})"
    return name


def _title_wording(debug: str) -> str:
    words = " ".join(re.findall(r"[A-Z][a-z]*|[0-9]+", debug))
    return words.replace("R 1", "R1").replace("R 2", "R2").replace("L 1", "L1")
