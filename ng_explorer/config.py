"""Effective settings for ng-explorer, resolved from config file and environment."""

from __future__ import annotations

import os

from .config_manager import BASE_DIR, CONFIG_FILE, load_search_config

_search_config = load_search_config()

# NG_EXPLORER_DOC_PATH wins over config.toml
DOC_PATH: str = os.environ.get("NG_EXPLORER_DOC_PATH") or _search_config["doc_path"]
DEFAULT_LIMIT: int = _search_config["limit"]
FUZZY_THRESHOLD: float = _search_config["threshold"]
MIN_MATCH_LENGTH: int = _search_config["min_match_length"]

__all__ = [
    "BASE_DIR",
    "CONFIG_FILE",
    "DOC_PATH",
    "DEFAULT_LIMIT",
    "FUZZY_THRESHOLD",
    "MIN_MATCH_LENGTH",
]
