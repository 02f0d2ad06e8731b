from __future__ import annotations

import re
from dataclasses import dataclass

SPACE_RE = re.compile(r"\s")


@dataclass(frozen=True)
class NormalizedMatch:
    start: int
    length: int


def is_whitespace(ch: str) -> bool:
    return SPACE_RE.match(ch) is not None


def fold_char(ch: str) -> str:
    """Comparison form of a single character: "" for whitespace, else its lower-case form."""
    if is_whitespace(ch):
        return ""
    return ch.lower()


def normalize_text(text: str) -> str:
    # Folded char by char so every normalized position traces back to exactly one original index.
    return "".join(fold_char(ch) for ch in text)


def _fold_with_boundaries(text: str) -> tuple[str, set[int]]:
    parts: list[str] = []
    boundaries = {0}
    position = 0
    for ch in text:
        folded = fold_char(ch)
        if folded:
            parts.append(folded)
            position += len(folded)
            boundaries.add(position)
    return "".join(parts), boundaries


def find_match(text: str, query: str) -> NormalizedMatch | None:
    if not query:
        return None
    normalized_query = normalize_text(query)
    if not normalized_query:
        return None
    normalized_text, boundaries = _fold_with_boundaries(text)
    length = len(normalized_query)
    # An occurrence must start and end on whole folded characters to map back onto the original.
    start = normalized_text.find(normalized_query)
    while start >= 0:
        if start in boundaries and start + length in boundaries:
            return NormalizedMatch(start=start, length=length)
        start = normalized_text.find(normalized_query, start + 1)
    return None


def contains(text: str, query: str) -> bool:
    return find_match(text, query) is not None
