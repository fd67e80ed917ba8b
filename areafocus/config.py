"""User JSON config for focus defaults.

Supplies the history cap and key-token overrides.
All access is defensive: malformed or missing config falls back to defaults.
Focus state itself is never written to disk.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

from .history import DEFAULT_MAX_HISTORY
from .keys import DEFAULT_KEY_BINDINGS

logger = logging.getLogger(__name__)

APP_NAME = "areafocus"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


@dataclass(frozen=True)
class FocusConfig:
    """Resolved focus defaults."""

    max_history: int = DEFAULT_MAX_HISTORY
    key_bindings: dict[str, tuple[str, ...]] = field(default_factory=lambda: dict(DEFAULT_KEY_BINDINGS))


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable focus config %s: %s", CONFIG_PATH, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring focus config %s: top-level value is not an object", CONFIG_PATH)
        return {}
    return data


def _coerce_max_history(value: object) -> int:
    """Accept positive integers only; booleans are rejected."""
    if value is None:
        return DEFAULT_MAX_HISTORY
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        logger.warning("invalid max_history %r, using %d", value, DEFAULT_MAX_HISTORY)
        return DEFAULT_MAX_HISTORY
    return value


def _coerce_key_bindings(value: object) -> dict[str, tuple[str, ...]]:
    """Merge valid action overrides onto the default token bindings."""
    bindings = dict(DEFAULT_KEY_BINDINGS)
    if value is None:
        return bindings
    if not isinstance(value, dict):
        logger.warning("invalid key_bindings %r, using defaults", value)
        return bindings

    for action, raw in value.items():
        if action not in DEFAULT_KEY_BINDINGS:
            logger.warning("ignoring unknown key binding action %r", action)
            continue
        if isinstance(raw, str):
            combos = (raw,)
        elif isinstance(raw, list) and raw and all(isinstance(item, str) and item for item in raw):
            combos = tuple(raw)
        else:
            logger.warning("ignoring invalid key tokens for %r: %r", action, raw)
            continue
        if not all(combo.strip() for combo in combos):
            logger.warning("ignoring blank key token for %r", action)
            continue
        bindings[action] = combos
    return bindings


def load_focus_config() -> FocusConfig:
    """Load and sanitize focus defaults from the user config file."""
    data = load_config()
    return FocusConfig(
        max_history=_coerce_max_history(data.get("max_history")),
        key_bindings=_coerce_key_bindings(data.get("key_bindings")),
    )
