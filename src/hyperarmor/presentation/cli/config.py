"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

_APP_DIR_NAME = "HyperarmorInspector"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / _APP_DIR_NAME
        return Path.home() / _APP_DIR_NAME
    return Path.home() / ".config" / "hyperarmor_inspector"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def default_config() -> Dict[str, Any]:
    return {"dataset_path": None, "armor_poise": 0, "bullgoat": False}


def _normalize(raw: dict[str, Any]) -> Dict[str, Any]:
    config = default_config()
    dataset_path = raw.get("dataset_path")
    if isinstance(dataset_path, str) and dataset_path.strip():
        config["dataset_path"] = dataset_path
    armor_poise = raw.get("armor_poise")
    if isinstance(armor_poise, int) and not isinstance(armor_poise, bool) and armor_poise >= 0:
        config["armor_poise"] = armor_poise
    if isinstance(raw.get("bullgoat"), bool):
        config["bullgoat"] = raw["bullgoat"]
    return config


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return _normalize(raw)


def save_config(config: Dict[str, Any], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = _normalize(config)
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
