from __future__ import annotations

import logging
from pathlib import Path

import pytest

from hyperarmor.data.errors import DataLoadError
from hyperarmor.data.repositories import PoiseDataRepository, parse_row
from hyperarmor.domain.attacks import AttackKind, Attack, select_damage
from hyperarmor.domain.damage import DamageSequence
from tests.helpers.poise_rows import make_row, write_dataset


def test_dagger_row_populates_light_chain() -> None:
    moveset = parse_row(make_row("Dagger", "Dagger", {"one_handed.r1.chain.0": "40"}))

    assert moveset is not None
    assert select_damage(moveset, Attack(AttackKind.ONE_HANDED_R1_CHAIN, step=0)) == DamageSequence((40,))
    assert moveset.paired.chain.get(4) == DamageSequence()
    assert moveset.multiplier == 1.0


@pytest.mark.parametrize(("weapon_class", "name"), [("", "Dagger"), ("Dagger", ""), ("  ", "  ")])
def test_rows_without_class_or_name_are_skipped(weapon_class: str, name: str) -> None:
    assert parse_row(make_row(weapon_class, name, {"one_handed.r1.chain.0": "40"})) is None


def test_row_fields_map_to_moveset() -> None:
    moveset = parse_row(
        make_row(
            "Greatsword",
            "Claymore",
            {
                "two_handed.r2.charged.0": "302.5 + 605",
                "two_handed.r1.running": "57",
                "one_handed.r2.feint.1": "40",
                "riposte.large": "200",
                "backstab.small": "150",
                "shieldpoke": "12",
                "paired.backstep": "33",
                "offhand.5": "9",
            },
        )
    )

    assert moveset is not None
    assert moveset.two_handed.r2.charged.get(0) == DamageSequence((302, 605))
    assert moveset.two_handed.r1.running == DamageSequence((57,))
    assert moveset.one_handed.r2.feint.get(1) == DamageSequence((40,))
    assert moveset.riposte.large == DamageSequence((200,))
    assert moveset.backstab.small == DamageSequence((150,))
    assert moveset.backstab.large is None
    assert moveset.shieldpoke == DamageSequence((12,))
    assert moveset.paired.backstep == DamageSequence((33,))
    assert moveset.offhand.get(5) == DamageSequence((9,))


def test_stance_fields_outside_schema_are_absent() -> None:
    moveset = parse_row(make_row("Greatsword", "Claymore"))

    assert moveset is not None
    assert moveset.one_handed.r2.rolling is None
    assert moveset.two_handed.r2.guard_counter is None
    assert moveset.paired.guard_counter is None
    assert len(moveset.one_handed.r1.charged) == 0
    assert len(moveset.one_handed.r2.chain) == 2
    assert len(moveset.two_handed.r1.chain) == 6


def test_chain_text_skips_empty_steps() -> None:
    moveset = parse_row(
        make_row(
            "Greatsword",
            "Claymore",
            {"one_handed.r1.chain.1": "60 + 20", "one_handed.r1.chain.3": "70"},
        )
    )

    assert moveset is not None
    assert str(moveset.one_handed.r1.chain) == "60 + 20 ⏵ 70"
    assert str(moveset.one_handed.r1.charged) == ""


def test_short_row_is_padded() -> None:
    moveset = parse_row(["Dagger", "Dagger", "40", "35 + 10"])

    assert moveset is not None
    assert moveset.one_handed.r1.chain.get(1) == DamageSequence((35, 10))
    assert moveset.paired.jumping == DamageSequence()


def test_malformed_cell_logs_warning_and_keeps_loading(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    dataset = write_dataset(
        tmp_path / "poise_data.csv",
        [
            make_row("Dagger", "Dagger", {"one_handed.r1.chain.0": "forty"}),
            make_row("Dagger", "Misericorde", {"one_handed.r1.chain.0": "45"}),
        ],
    )
    repo = PoiseDataRepository(base_path=dataset.parent)

    with caplog.at_level(logging.WARNING):
        movesets = repo.all()

    assert [moveset.name for moveset in movesets] == ["Dagger", "Misericorde"]
    assert movesets[0].one_handed.r1.chain.get(0) == DamageSequence((0,))
    assert any("forty" in record.getMessage() for record in caplog.records)


def test_repository_orders_by_name_and_skips_blank_rows(tmp_path: Path) -> None:
    write_dataset(
        tmp_path / "poise_data.csv",
        [
            make_row("Straight Sword", "Longsword"),
            make_row("", ""),
            make_row("Dagger", "Dagger"),
            make_row("Axe", "Battle Axe"),
        ],
    )
    repo = PoiseDataRepository(base_path=tmp_path)

    assert [moveset.name for moveset in repo.all()] == ["Battle Axe", "Dagger", "Longsword"]
    assert repo.get("Dagger").weapon_class == "Dagger"


def test_repository_get_missing_raises(tmp_path: Path) -> None:
    write_dataset(tmp_path / "poise_data.csv", [make_row("Dagger", "Dagger")])
    repo = PoiseDataRepository(base_path=tmp_path)

    with pytest.raises(KeyError):
        repo.get("Missing Weapon")


def test_duplicate_weapon_keeps_last_row(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    write_dataset(
        tmp_path / "poise_data.csv",
        [
            make_row("Dagger", "Dagger", {"one_handed.r1.chain.0": "40"}),
            make_row("Dagger", "Dagger", {"one_handed.r1.chain.0": "41"}),
        ],
    )
    repo = PoiseDataRepository(base_path=tmp_path)

    with caplog.at_level(logging.WARNING):
        moveset = repo.get("Dagger")

    assert moveset.one_handed.r1.chain.get(0) == DamageSequence((41,))
    assert any("Duplicate" in record.getMessage() for record in caplog.records)


def test_missing_dataset_raises_load_error(tmp_path: Path) -> None:
    repo = PoiseDataRepository(base_path=tmp_path)
    with pytest.raises(DataLoadError):
        repo.all()


def test_undecodable_dataset_raises_load_error(tmp_path: Path) -> None:
    (tmp_path / "poise_data.csv").write_bytes(b"\xff\xfe\x00bad")
    repo = PoiseDataRepository(base_path=tmp_path)
    with pytest.raises(DataLoadError):
        repo.all()
