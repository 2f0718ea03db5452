"""Glob matching of construct file paths (``**``, ``*``, ``?``, ``{a,b}``, match-base)."""

from __future__ import annotations

from fnmatch import fnmatchcase
from functools import lru_cache
from typing import Iterable, List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def clean_path(file_path: str) -> str:
    """Drop a leading ``./`` so patterns need not account for it."""
    return file_path[2:] if file_path.startswith("./") else file_path


def _split_alternatives(body: str) -> List[str]:
    """Split a brace body on its top-level commas."""
    options: List[str] = []
    depth = 0
    current = ""
    for char in body:
        if char == "," and depth == 0:
            options.append(current)
            current = ""
            continue
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        current += char
    options.append(current)
    return options


@lru_cache(maxsize=256)
def expand_braces(pattern: str) -> Tuple[str, ...]:
    """Expand ``{a,b}`` alternatives, e.g. ``src/{app,lib}/**``.

    A brace group without a top-level comma is kept literally.
    """
    depth = 0
    start = 0
    for index, char in enumerate(pattern):
        if char == "{":
            if depth == 0:
                start = index
            depth += 1
        elif char == "}" and depth:
            depth -= 1
            if depth == 0:
                options = _split_alternatives(pattern[start + 1 : index])
                if len(options) > 1:
                    prefix, suffix = pattern[:start], pattern[index + 1 :]
                    expanded: List[str] = []
                    for option in options:
                        for candidate in expand_braces(prefix + option + suffix):
                            if candidate not in expanded:
                                expanded.append(candidate)
                    return tuple(expanded)
    return (pattern,)


@lru_cache(maxsize=256)
def _split(pattern: str) -> Tuple[str, ...]:
    parts = [part for part in clean_path(pattern).split("/") if part]
    # Collapse runs of ** so matching stays linear in practice
    collapsed: List[str] = []
    for part in parts:
        if part == "**" and collapsed and collapsed[-1] == "**":
            continue
        collapsed.append(part)
    return tuple(collapsed)


def _match_segments(path: Sequence[str], pattern: Sequence[str]) -> bool:
    if not pattern:
        return not path
    head, rest = pattern[0], pattern[1:]
    if head == "**":
        # ** consumes zero or more whole segments
        return any(_match_segments(path[i:], rest) for i in range(len(path) + 1))
    if not path:
        return False
    return fnmatchcase(path[0], head) and _match_segments(path[1:], rest)


def _match_one(path: str, pattern: str) -> bool:
    segments = _split(pattern)
    if "/" not in pattern:
        # match-base: slash-free patterns test the file name only
        return bool(segments) and fnmatchcase(path.rsplit("/", 1)[-1], segments[0])
    return _match_segments([part for part in path.split("/") if part], segments)


def match_path(file_path: str, pattern: str) -> bool:
    path = clean_path(file_path)
    return any(_match_one(path, alternative) for alternative in expand_braces(pattern))


def filter_by_path(items: Iterable[T], pattern: str, key=lambda item: item.file) -> List[T]:
    """Keep items whose file path matches ``pattern``, preserving order."""
    return [item for item in items if match_path(key(item), pattern)]
