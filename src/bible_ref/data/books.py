from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from bible_ref.core.errors import InvalidBook


_BOOK_NAMES = (
    "Genesis",
    "Exodus",
    "Leviticus",
    "Numbers",
    "Deuteronomy",
    "Joshua",
    "Judges",
    "Ruth",
    "1 Samuel",
    "2 Samuel",
    "1 Kings",
    "2 Kings",
    "1 Chronicles",
    "2 Chronicles",
    "Ezra",
    "Nehemiah",
    "Esther",
    "Job",
    "Psalm",
    "Proverbs",
    "Ecclesiastes",
    "Song of Solomon",
    "Isaiah",
    "Jeremiah",
    "Lamentations",
    "Ezekiel",
    "Daniel",
    "Hosea",
    "Joel",
    "Amos",
    "Obadiah",
    "Jonah",
    "Micah",
    "Nahum",
    "Habakkuk",
    "Zephaniah",
    "Haggai",
    "Zechariah",
    "Malachi",
    "Matthew",
    "Mark",
    "Luke",
    "John",
    "Acts",
    "Romans",
    "1 Corinthians",
    "2 Corinthians",
    "Galatians",
    "Ephesians",
    "Philippians",
    "Colossians",
    "1 Thessalonians",
    "2 Thessalonians",
    "1 Timothy",
    "2 Timothy",
    "Titus",
    "Philemon",
    "Hebrews",
    "James",
    "1 Peter",
    "2 Peter",
    "1 John",
    "2 John",
    "3 John",
    "Jude",
    "Revelation",
)

BOOKS: Mapping[str, int] = MappingProxyType({name: i for i, name in enumerate(_BOOK_NAMES, start=1)})
BOOK_NAMES: Mapping[int, str] = MappingProxyType({i: name for name, i in BOOKS.items()})


def lookup_book(name: str) -> int:
    """Exact, case-sensitive match against the canonical book names."""
    try:
        return BOOKS[name]
    except KeyError:
        raise InvalidBook(f"Unknown book name: {name!r}") from None


def book_name(book_id: int) -> str:
    try:
        return BOOK_NAMES[book_id]
    except KeyError:
        raise InvalidBook(f"Unknown book id: {book_id!r}") from None


@dataclass(frozen=True)
class BibleVersion:
    name: str
    id: str


BIBLE_VERSIONS = (
    BibleVersion(name="New International Version", id="NIV"),
    BibleVersion(name="King James Version", id="KJV"),
    BibleVersion(name="New Living Translation", id="NLT"),
    BibleVersion(name="American Standard Version", id="ASV"),
    BibleVersion(name="English Standard Version", id="ESV"),
)

DEFAULT_TRANSLATION = "NIV"


def translation_codes() -> list[str]:
    return [v.id for v in BIBLE_VERSIONS]


def translation_name(code: str) -> str:
    for v in BIBLE_VERSIONS:
        if v.id == code:
            return v.name
    raise KeyError(f"Unknown translation: {code!r}")
