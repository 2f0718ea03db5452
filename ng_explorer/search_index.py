"""Weighted fuzzy index over Angular construct names and selectors."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from thefuzz import fuzz

from .models import AngularConstruct, Component, Directive

logger = logging.getLogger(__name__)

ROLE_SUFFIXES = ("Component", "Directive", "Service", "Pipe", "Module")

NAME_WEIGHT = 2.0
SELECTOR_WEIGHT = 1.5


def normalize_name(name: str) -> str:
    """Strip a trailing Angular role suffix, e.g. ``UserComponent`` -> ``User``."""
    for suffix in ROLE_SUFFIXES:
        if name.endswith(suffix) and len(name) > len(suffix):
            return name[: -len(suffix)]
    return name


def normalize_query(query: str) -> str:
    """Like ``normalize_name`` but ignoring case, so ``userservice`` -> ``user``."""
    lowered = query.lower()
    for suffix in ROLE_SUFFIXES:
        if lowered.endswith(suffix.lower()) and len(query) > len(suffix):
            return query[: -len(suffix)]
    return query


@dataclass
class IndexEntry:
    construct: AngularConstruct
    normalized_name: str
    # lowercased values used for matching
    name_key: str
    full_name_key: str
    selector_key: Optional[str] = None


@dataclass
class SearchHit:
    construct: AngularConstruct
    score: float


class SearchIndex:
    """Fuzzy index with two weighted fields: normalized name and selector.

    ``threshold`` follows the 0..1 distance convention: 0 demands a perfect
    match, 1 accepts anything. A field matches when its similarity is at
    least ``(1 - threshold) * 100``.
    """

    def __init__(
        self,
        constructs: Sequence[AngularConstruct],
        threshold: float = 0.3,
        min_match_length: int = 2,
    ) -> None:
        self.threshold = threshold
        self.min_match_length = min_match_length
        self._cutoff = (1.0 - threshold) * 100
        self.entries: List[IndexEntry] = [self._make_entry(c) for c in constructs]
        logger.debug("Built search index with %d entries", len(self.entries))

    @staticmethod
    def _make_entry(construct: AngularConstruct) -> IndexEntry:
        normalized = normalize_name(construct.name)
        # Only real selectors; a pipe's pipeName is display-only
        selector = construct.selector if isinstance(construct, (Component, Directive)) else None
        return IndexEntry(
            construct=construct,
            normalized_name=normalized,
            name_key=normalized.lower(),
            full_name_key=construct.name.lower(),
            selector_key=selector.lower() if selector else None,
        )

    def __len__(self) -> int:
        return len(self.entries)

    def _similarity(self, query: str, value: str) -> Optional[int]:
        if len(value) < self.min_match_length:
            return None
        # Shorter queries may land anywhere inside the value
        if len(query) <= len(value):
            similarity = fuzz.partial_ratio(query, value)
        else:
            similarity = fuzz.ratio(query, value)
        return similarity if similarity >= self._cutoff else None

    def _name_similarity(self, query: str, entry: IndexEntry) -> Optional[int]:
        similarity = self._similarity(query, entry.name_key)
        # A query longer than the stripped name may still be a typo of the full name
        if similarity is None and len(query) > len(entry.name_key) and entry.full_name_key != entry.name_key:
            similarity = self._similarity(query, entry.full_name_key)
        return similarity

    def search(self, query: str) -> List[SearchHit]:
        """Return matching constructs, best first."""
        needle = query.strip().lower()
        if len(needle) < self.min_match_length:
            return []

        hits: List[SearchHit] = []
        for entry in self.entries:
            score = 0.0
            similarity = self._name_similarity(needle, entry)
            if similarity is not None:
                score += NAME_WEIGHT * similarity / 100
            if entry.selector_key:
                similarity = self._similarity(needle, entry.selector_key)
                if similarity is not None:
                    score += SELECTOR_WEIGHT * similarity / 100
            if score > 0:
                hits.append(SearchHit(construct=entry.construct, score=score))

        # sort is stable, so ties keep collection order
        hits.sort(key=lambda hit: hit.score, reverse=True)
        return hits
