"""Query engine over the constructs of a loaded documentation.json."""

from __future__ import annotations

from typing import Dict, List, Literal, Optional, Sequence

from . import config
from .globbing import filter_by_path
from .loader import DocumentationLoader
from .models import AngularConstruct
from .search_index import SearchIndex, normalize_query

ConstructType = Literal["component", "injectable", "directive", "pipe", "module", "class", "all"]

VALID_TYPES: tuple[str, ...] = ("component", "injectable", "directive", "pipe", "module", "class", "all")


class InvalidTypeError(ValueError):
    pass


def validate_type(value: str) -> ConstructType:
    """Reject type filters outside the closed set."""
    if value not in VALID_TYPES:
        raise InvalidTypeError(f"Invalid type: {value}. Valid types: {', '.join(VALID_TYPES)}")
    return value  # type: ignore[return-value]


class Searcher:
    """Fuzzy, exact and listing queries with type/path filters and limits.

    The loader is the cache that owns the parsed document; the searcher
    builds its index once from whatever the loader returns.
    """

    def __init__(
        self,
        loader: DocumentationLoader,
        threshold: float = config.FUZZY_THRESHOLD,
        min_match_length: int = config.MIN_MATCH_LENGTH,
    ) -> None:
        self.documentation = loader.load()
        self._constructs: List[AngularConstruct] = self.documentation.all_constructs()
        self.index = SearchIndex(self._constructs, threshold=threshold, min_match_length=min_match_length)

    @property
    def constructs(self) -> List[AngularConstruct]:
        return list(self._constructs)

    def _filter(
        self,
        constructs: Sequence[AngularConstruct],
        type: ConstructType,
        path_pattern: Optional[str],
    ) -> List[AngularConstruct]:
        results = list(constructs)
        if type != "all":
            results = [c for c in results if c.type == type]
        if path_pattern:
            results = filter_by_path(results, path_pattern)
        return results

    @staticmethod
    def _limit(results: List[AngularConstruct], limit: int) -> List[AngularConstruct]:
        return results[: max(limit, 0)]

    def search(
        self,
        query: str,
        type: ConstructType = "all",
        path_pattern: Optional[str] = None,
        limit: int = config.DEFAULT_LIMIT,
    ) -> List[AngularConstruct]:
        """Fuzzy search; results keep their relevance order through filtering."""
        hits = self.index.search(normalize_query(query.strip()))
        return self._limit(self._filter([hit.construct for hit in hits], type, path_pattern), limit)

    def search_exact(
        self,
        query: str,
        type: ConstructType = "all",
        path_pattern: Optional[str] = None,
        limit: int = config.DEFAULT_LIMIT,
    ) -> List[AngularConstruct]:
        """Case-insensitive full-name equality, in collection order."""
        wanted = query.lower()
        matches = [c for c in self._constructs if c.name.lower() == wanted]
        return self._limit(self._filter(matches, type, path_pattern), limit)

    def list_by_type(
        self,
        type: ConstructType = "all",
        path_pattern: Optional[str] = None,
        limit: int = config.DEFAULT_LIMIT,
    ) -> List[AngularConstruct]:
        return self._limit(self._filter(self._constructs, type, path_pattern), limit)

    def count_by_type(self, type: ConstructType = "all", path_pattern: Optional[str] = None) -> int:
        """Number of constructs ``list_by_type`` would return without a limit."""
        return len(self._filter(self._constructs, type, path_pattern))

    def find_by_name(self, name: str, type: Optional[ConstructType] = None) -> Optional[AngularConstruct]:
        wanted = name.lower()
        for construct in self._filter(self._constructs, type or "all", None):
            if construct.name.lower() == wanted:
                return construct
        return None

    def suggest(self, name: str, type: ConstructType = "all", count: int = 5) -> List[AngularConstruct]:
        """Closest fuzzy matches, for "did you mean" hints."""
        return self.search(name, type=type, limit=count)

    def stats(self) -> Dict[str, int]:
        counts = self.documentation.counts()
        counts["total"] = len(self._constructs)
        return counts
