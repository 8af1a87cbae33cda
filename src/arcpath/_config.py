from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

CONFIG_DIR = Path.home() / ".arcpath"
CONFIG_FILE = CONFIG_DIR / "arcpath.cfg"
DEFAULT_CONFIG = {
    "_comment": (
        "CLI defaults for arcpath. default_samples is the resample count used when "
        "--samples is omitted (>= 2); precision is the number of decimals printed (0-9)."
    ),
    "default_samples": 5,
    "precision": 4,
}
_PRECISION_RANGE = (0, 9)


@dataclass(frozen=True)
class CliSettings:
    """Resolved CLI defaults from arcpath.cfg."""

    default_samples: int
    precision: int


def ensure_user_config() -> bool:
    """Write the default arcpath.cfg if none exists.

    Returns ``False`` when the config directory or file cannot be created, in
    which case callers run on the built-in defaults.
    """

    if CONFIG_FILE.is_file():
        return True
    try:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        CONFIG_FILE.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
    except OSError:
        return False
    return True


def _load_user_config() -> Dict[str, Any]:
    merged = dict(DEFAULT_CONFIG)
    if not ensure_user_config():
        return merged
    try:
        loaded = json.loads(CONFIG_FILE.read_text())
    except (OSError, json.JSONDecodeError):
        return merged
    if isinstance(loaded, dict):
        merged.update(loaded)
    return merged


def _coerce_int(value: Any, fallback: int, low: int, high: int | None = None) -> int:
    if isinstance(value, bool):
        return fallback
    try:
        number = int(value)
    except (TypeError, ValueError):
        return fallback
    if number < low or (high is not None and number > high):
        return fallback
    return number


def get_cli_settings() -> CliSettings:
    """Return the configured CLI defaults, falling back on invalid entries."""

    raw_config = _load_user_config()
    samples = _coerce_int(raw_config.get("default_samples"), DEFAULT_CONFIG["default_samples"], 2)
    precision = _coerce_int(raw_config.get("precision"), DEFAULT_CONFIG["precision"], *_PRECISION_RANGE)
    return CliSettings(default_samples=samples, precision=precision)
