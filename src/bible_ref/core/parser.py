from __future__ import annotations

from dataclasses import dataclass
from itertools import takewhile

from bible_ref.core.numbers import parse_int


@dataclass(frozen=True)
class ParsedReference:
    book: str
    chapter: str = ""
    verse_range: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"book": self.book, "chapter": self.chapter, "verse_range": self.verse_range}


def parse_reference(reference: str) -> ParsedReference:
    """
    Split a free-text reference into book, chapter and verse range.

    Never raises. Anything that cannot be understood is left empty, and the
    book name is not checked against the book table.

    Examples:
      "John 3:16"           -> ("John", "3", "16")
      "Song of Solomon 2:1" -> ("Song of Solomon", "2", "1")
      "John 3"              -> ("John", "3", "")
    """
    tokens = reference.split()
    book = " ".join(takewhile(lambda t: ":" not in t, tokens))
    chapter = ""
    verse_range = ""

    if tokens and ":" in tokens[-1]:
        parts = [p for p in tokens[-1].split(":") if p]
        if parts:
            chapter = parts[0]
        if len(parts) > 1:
            verse_range = parts[1]
    elif len(tokens) > 1:
        chapter = tokens[-1]

    # A bare "<book> <chapter>" leaves the chapter number inside book; this
    # pass always wins over the assignments above.
    head, sep, tail = book.rpartition(" ")
    if sep and parse_int(tail) is not None:
        chapter = tail
        book = head

    return ParsedReference(book=book.strip(), chapter=chapter, verse_range=verse_range)
