from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .normalization import find_match, fold_char


@dataclass(frozen=True)
class MatchSpan:
    start: int
    end: int


@dataclass(frozen=True)
class Highlight:
    before: str
    match: str = ""
    after: str = ""

    @property
    def matched(self) -> bool:
        return bool(self.match)

    @property
    def text(self) -> str:
        return self.before + self.match + self.after

    def segments(self) -> Iterator[tuple[str, bool]]:
        """Yield ``(text, emphasized)`` pieces in display order, skipping empty ones."""
        for piece, emphasized in ((self.before, False), (self.match, True), (self.after, False)):
            if piece:
                yield piece, emphasized

    def to_dict(self) -> dict[str, str]:
        return {"before": self.before, "match": self.match, "after": self.after}


def map_to_original_span(text: str, start: int, length: int) -> MatchSpan:
    """Translate a ``[start, start + length)`` range of ``normalize_text(text)`` into ``text`` indices.

    Whitespace removal is not a constant shift, so the original text is walked again
    while counting the normalized positions each character produces. The span runs
    from the character producing ``start`` through the one producing the last matched
    position, so whitespace inside the match is part of the span.
    """
    last = start + length - 1
    start_original: int | None = None
    end_original: int | None = None
    position = 0
    for index, ch in enumerate(text):
        width = len(fold_char(ch))
        if width == 0:
            continue
        if start_original is None and position + width > start:
            start_original = index
        if position + width > last:
            end_original = index + 1
            break
        position += width

    if start_original is None:
        start_original = len(text)
    if end_original is None or end_original < start_original:
        end_original = len(text)
    return MatchSpan(start=start_original, end=end_original)


def find_span(text: str, query: str) -> MatchSpan | None:
    found = find_match(text, query)
    if found is None:
        return None
    return map_to_original_span(text, found.start, found.length)


def highlight(text: str, query: str) -> Highlight:
    span = find_span(text, query)
    if span is None:
        return Highlight(before=text)
    return Highlight(
        before=text[: span.start],
        match=text[span.start : span.end],
        after=text[span.end :],
    )
