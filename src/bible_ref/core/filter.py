from __future__ import annotations

from typing import Iterable

from bible_ref.core.numbers import parse_int
from bible_ref.data.verse import Verse


def range_bounds(verse_range: str) -> list[int]:
    """Numbers found in a hyphenated range; unparseable pieces are dropped."""
    bounds = []
    for piece in verse_range.split("-"):
        n = parse_int(piece)
        if n is not None:
            bounds.append(n)
    return bounds


def filter_verses(verses: Iterable[Verse], verse_range: str) -> list[Verse]:
    verses = list(verses)
    if not verse_range:
        return verses

    bounds = range_bounds(verse_range)
    if len(bounds) == 2:
        lo, hi = bounds
        return [v for v in verses if lo <= v.verse_id <= hi]
    if len(bounds) == 1:
        return [v for v in verses if v.verse_id == bounds[0]]
    return verses
