"""Loader for Compodoc documentation.json with an in-memory cache."""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional

from .models import Documentation

logger = logging.getLogger(__name__)

COMPODOC_COMMAND = "npx compodoc -p tsconfig.json -e json -d . --disablePrivate --disableProtected"


class DocumentationError(Exception):
    """Base class for failures to obtain the documentation document."""


class DocumentationNotFoundError(DocumentationError):
    pass


class DocumentationParseError(DocumentationError):
    pass


class DocumentationLoadError(DocumentationError):
    pass


class DocumentationLoader:
    """Read documentation.json once and serve the parsed result from cache."""

    def __init__(self, doc_path: str | Path = "./documentation.json") -> None:
        self._doc_path = (Path.cwd() / Path(doc_path)).resolve()
        self._cache: Optional[Documentation] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any], doc_path: str | Path = "<memory>") -> "DocumentationLoader":
        """Build a loader whose cache is already populated from ``payload``."""
        loader = cls(doc_path)
        loader._cache = Documentation.from_dict(payload)
        return loader

    @property
    def doc_path(self) -> Path:
        return self._doc_path

    def load(self) -> Documentation:
        if self._cache is not None:
            return self._cache

        started = time.perf_counter()
        try:
            content = self._doc_path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise DocumentationNotFoundError(
                f"Documentation file not found at: {self._doc_path}\n\n"
                "Please run Compodoc to generate the documentation.json file:\n"
                f"  {COMPODOC_COMMAND}"
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentationLoadError(f"Failed to load documentation: {exc}") from exc

        try:
            payload = json.loads(content)
        except json.JSONDecodeError as exc:
            raise DocumentationParseError(
                f"Failed to parse documentation.json at: {self._doc_path}\n"
                f"The file may be corrupted. Error: {exc}"
            ) from exc

        if not isinstance(payload, dict):
            raise DocumentationLoadError(
                f"Failed to load documentation: expected a JSON object at the top level of {self._doc_path}"
            )

        self._cache = Documentation.from_dict(payload)
        logger.debug(
            "Loaded %s in %.1f ms: %s",
            self._doc_path,
            (time.perf_counter() - started) * 1000,
            self._cache.counts(),
        )
        return self._cache

    def clear_cache(self) -> None:
        """Force a reload on the next ``load()`` call."""
        self._cache = None
