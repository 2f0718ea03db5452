"""Configuration manager for ng-explorer using TOML files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict

import toml

logger = logging.getLogger(__name__)

BASE_DIR = Path(os.environ.get("NG_EXPLORER_HOME", str(Path.home() / ".ng-explorer"))).expanduser()
CONFIG_FILE = BASE_DIR / "config.toml"

DEFAULT_SEARCH_CONFIG: Dict[str, Any] = {
    "doc_path": "./documentation.json",
    "limit": 50,
    "threshold": 0.3,
    "min_match_length": 2,
}


def load_full_config(config_file: Path | None = None) -> Dict[str, Any]:
    """Load the entire TOML config (all sections)."""
    path = config_file or CONFIG_FILE
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            return toml.load(f)
    except (OSError, toml.TomlDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return {}


def load_search_config(config_file: Path | None = None) -> Dict[str, Any]:
    """Load the ``[search]`` section merged over the defaults.

    Unknown keys are ignored; values of the wrong type fall back to the
    default for that key.
    """
    merged = DEFAULT_SEARCH_CONFIG.copy()
    section = load_full_config(config_file).get("search", {})
    if not isinstance(section, dict):
        return merged

    for key, default in DEFAULT_SEARCH_CONFIG.items():
        if key not in section:
            continue
        value = section[key]
        if isinstance(default, float) and isinstance(value, int) and not isinstance(value, bool):
            value = float(value)
        if type(value) is not type(default):
            logger.warning("Config key search.%s has wrong type, using default", key)
            continue
        merged[key] = value
    return merged
