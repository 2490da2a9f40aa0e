"""Persistent JSON config helpers.

Reads the default size-annotation preference and the file name used when
``--save`` points at a directory. mole never writes this file; users edit
``config.json`` in the platform config directory by hand, for example::

    {"show_size": true, "default_save_name": "tree"}

All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .save import DEFAULT_SAVE_NAME

APP_NAME = "mole"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def load_show_size() -> bool:
    """Return persisted size-annotation default.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("show_size")
    return bool(value) if isinstance(value, bool) else False


def _valid_save_name(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    if not stripped or stripped in {".", ".."}:
        return None
    if "/" in stripped or "\\" in stripped:
        return None
    return stripped


def load_default_save_name() -> str:
    """Load the file stem used when the save target is a directory."""
    return _valid_save_name(load_config().get("default_save_name")) or DEFAULT_SAVE_NAME


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "load_show_size",
    "load_default_save_name",
]
