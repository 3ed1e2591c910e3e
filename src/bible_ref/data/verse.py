from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from bible_ref.core.errors import DecodingError, InvalidBook
from bible_ref.data.books import book_name


def _int_field(record: dict, key: str) -> int:
    value = record.get(key)
    # bool is an int subclass; JSON true/false is not a valid id.
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodingError(f"Expected integer field {key!r}, got {value!r}")
    return value


def _str_field(record: dict, key: str) -> str:
    value = record.get(key)
    if not isinstance(value, str):
        raise DecodingError(f"Expected string field {key!r}, got {value!r}")
    return value


@dataclass(frozen=True)
class Verse:
    id: int
    book_id: int
    chapter_id: int
    verse_id: int
    text: str

    @property
    def ref(self) -> str:
        try:
            book = book_name(self.book_id)
        except InvalidBook:
            book = f"Book {self.book_id}"
        return f"{book} {self.chapter_id}:{self.verse_id}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "book_id": self.book_id,
            "chapter_id": self.chapter_id,
            "verse_id": self.verse_id,
            "text": self.text,
            "ref": self.ref,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Verse":
        return cls(
            id=int(data["id"]),
            book_id=int(data["book_id"]),
            chapter_id=int(data["chapter_id"]),
            verse_id=int(data["verse_id"]),
            text=str(data["text"]),
        )

    @classmethod
    def from_record(cls, record: Any) -> "Verse":
        """
        Decode one verse record as returned by the verse API:

          {"id": 43003016, "book": {"id": 43, "name": "John", "testament": "NT"},
           "chapterId": 3, "verseId": 16, "verse": "For God so loved ..."}
        """
        if not isinstance(record, dict):
            raise DecodingError(f"Expected verse object, got {type(record).__name__}")
        book = record.get("book")
        if not isinstance(book, dict):
            raise DecodingError(f"Expected book object, got {book!r}")
        _str_field(book, "name")
        _str_field(book, "testament")
        return cls(
            id=_int_field(record, "id"),
            book_id=_int_field(book, "id"),
            chapter_id=_int_field(record, "chapterId"),
            verse_id=_int_field(record, "verseId"),
            text=_str_field(record, "verse"),
        )


def decode_chapter(payload: Any) -> list[Verse]:
    if not isinstance(payload, list):
        raise DecodingError(f"Expected a list of verses, got {type(payload).__name__}")
    return [Verse.from_record(r) for r in payload]
