"""Command line front end for the poise data queries."""
from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import Sequence

from hyperarmor.data.errors import DataError
from hyperarmor.domain.attacks import Attack, iter_attacks, parse_attack
from hyperarmor.domain.projection import apply_multiplier
from hyperarmor.presentation.cli.config import load_config, save_config
from hyperarmor.presentation.cli.render import (
    debug_enabled,
    format_table,
    render_bullet_lines,
    render_heading,
    render_moveset,
)
from hyperarmor.services import LoadoutService, PoiseDataStore, WeaponNotFoundError, load_poise_data

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """Warnings for everything, debug output for this package when requested."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    level = logging.DEBUG if verbose or debug_enabled() else logging.WARNING
    logging.getLogger("hyperarmor").setLevel(level)


def _attack_arg(value: str) -> Attack:
    try:
        return parse_attack(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer.") from exc
    if number < 0:
        raise argparse.ArgumentTypeError("Value must be zero or greater.")
    return number


def _finite_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"'{value}' is not a number.") from exc
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError(f"'{value}' is not a finite number.")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hyperarmor", description="Weapon poise damage and hyperarmor figures.")
    parser.add_argument("--dataset", type=Path, help="Poise data CSV (default: config, $HYPERARMOR_DATASET, repo cache).")
    parser.add_argument("--config", type=Path, help="Config file path.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    commands = parser.add_subparsers(dest="command", required=True)

    weapons = commands.add_parser("weapons", help="List weapons grouped by class.")
    weapons.add_argument("--class", dest="weapon_class", help="Only this weapon class.")

    moveset = commands.add_parser("moveset", help="Show a weapon's poise damage table.")
    moveset.add_argument("weapon")
    moveset.add_argument("--multiplier", type=_finite_float, help="Incoming poise damage multiplier.")

    loadout = commands.add_parser("hyperarmor", help="Evaluate hyperarmor for a weapon and attack.")
    loadout.add_argument("weapon")
    loadout.add_argument("attack", type=_attack_arg)
    loadout.add_argument("--armor-poise", type=_non_negative_int)
    loadout.add_argument("--bullgoat", action=argparse.BooleanOptionalAction, default=None)
    loadout.add_argument("--against", type=_attack_arg, help="List weapons whose attack breaks this hyperarmor.")

    attack = commands.add_parser("attack", help="Total damage of one attack for every weapon, by class.")
    attack.add_argument("attack", type=_attack_arg)
    attack.add_argument("--multiplier", type=_finite_float)

    commands.add_parser("attacks", help="List attack keys.")

    configure = commands.add_parser("configure", help="Persist default options.")
    configure.add_argument("--set-dataset", type=Path)
    configure.add_argument("--armor-poise", type=_non_negative_int)
    configure.add_argument("--bullgoat", action=argparse.BooleanOptionalAction, default=None)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one CLI command and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    config = load_config(args.config)

    if args.command == "attacks":
        _show_attacks()
        return 0
    if args.command == "configure":
        _configure(args, config)
        return 0

    dataset = args.dataset or config["dataset_path"]
    try:
        store = load_poise_data(dataset)
        if args.command == "weapons":
            return _show_weapons(store, args.weapon_class)
        if args.command == "moveset":
            return _show_moveset(store, args.weapon, args.multiplier)
        if args.command == "hyperarmor":
            armor_poise = args.armor_poise if args.armor_poise is not None else config["armor_poise"]
            bullgoat = args.bullgoat if args.bullgoat is not None else config["bullgoat"]
            return _show_loadout(store, args.weapon, args.attack, armor_poise, bullgoat, args.against)
        return _show_attack_totals(store, args.attack, args.multiplier)
    except (DataError, WeaponNotFoundError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


def _show_attacks() -> None:
    rows = [[attack.key, attack.label, f"{attack.multiplier:g}"] for attack in iter_attacks()]
    for line in format_table(["Key", "Attack", "Hyperarmor x"], rows):
        print(line)


def _configure(args: argparse.Namespace, config: dict) -> None:
    if args.set_dataset is not None:
        config["dataset_path"] = str(args.set_dataset)
    if args.armor_poise is not None:
        config["armor_poise"] = args.armor_poise
    if args.bullgoat is not None:
        config["bullgoat"] = args.bullgoat
    save_config(config, args.config)
    render_heading("Config")
    render_bullet_lines(f"{key}: {config[key]}" for key in sorted(config))


def _show_weapons(store: PoiseDataStore, weapon_class: str | None) -> int:
    classes = store.weapons_by_class()
    if weapon_class is not None:
        if weapon_class not in classes:
            print(f"error: Unknown weapon class '{weapon_class}'.", file=sys.stderr)
            return 1
        classes = {weapon_class: classes[weapon_class]}
    for name, weapons in classes.items():
        render_heading(name)
        render_bullet_lines(f"{weapon} (innate poise {store.innate_poise(weapon)})" for weapon in weapons)
    return 0


def _show_moveset(store: PoiseDataStore, weapon: str, multiplier: float | None) -> int:
    moveset = store.lookup(weapon)
    if moveset is None:
        raise WeaponNotFoundError(f"Unknown weapon '{weapon}'.")
    if multiplier is not None:
        moveset = apply_multiplier(moveset, multiplier)
    render_moveset(moveset)
    return 0


def _show_loadout(
    store: PoiseDataStore,
    weapon: str,
    attack: Attack,
    armor_poise: int,
    bullgoat: bool,
    against: Attack | None = None,
) -> int:
    service = LoadoutService(store)
    result = service.evaluate(weapon, attack, armor_poise=armor_poise, bullgoat=bullgoat)
    damage = store.damage_for(weapon, attack)
    render_heading(f"{result.weapon}: {attack.label}")
    render_bullet_lines(
        [
            f"Class: {result.weapon_class}",
            f"Innate poise: {result.innate_poise}",
            f"Attack poise damage: {damage if damage else '-'}",
            f"Weapon hyperarmor: {result.weapon_hyperarmor:g}",
            f"Armor poise: {armor_poise}",
            f"Hyperarmor: {result.hyperarmor:g}",
            f"Bull-Goat equipped: {'yes' if bullgoat else 'no'}",
            f"Incoming poise damage multiplier: {result.incoming_multiplier:g}",
        ]
    )
    if against is not None:
        render_heading(f"{against.label} breaking {result.hyperarmor:g} hyperarmor")
        staggering = service.staggering_weapons(result, against)
        if not staggering:
            print("None.")
        for weapon_class, totals in staggering.items():
            render_bullet_lines(f"{weapon_class}: {name} ({total:g})" for name, total in totals)
    return 0


def _show_attack_totals(store: PoiseDataStore, attack: Attack, multiplier: float | None) -> int:
    grouped = store.damage_totals_by_class(attack, multiplier)
    if not grouped:
        print(f"No weapon has poise damage for {attack.label}.")
        return 0
    for weapon_class, totals in grouped.items():
        render_heading(weapon_class)
        render_bullet_lines(f"{weapon}: {total:g}" for weapon, total in totals)
    return 0
