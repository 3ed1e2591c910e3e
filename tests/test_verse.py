import pytest

from bible_ref.core.errors import DecodingError
from bible_ref.data.verse import Verse, decode_chapter


def _record(**overrides) -> dict:
    rec = {
        "id": 43003016,
        "book": {"id": 43, "name": "John", "testament": "NT"},
        "chapterId": 3,
        "verseId": 16,
        "verse": "For God so loved the world...",
    }
    rec.update(overrides)
    return rec


def test_from_record() -> None:
    v = Verse.from_record(_record())
    assert v == Verse(id=43003016, book_id=43, chapter_id=3, verse_id=16, text="For God so loved the world...")
    assert v.ref == "John 3:16"


def test_from_record_missing_field() -> None:
    rec = _record()
    del rec["verseId"]
    with pytest.raises(DecodingError):
        Verse.from_record(rec)


def test_from_record_wrong_types() -> None:
    with pytest.raises(DecodingError):
        Verse.from_record(_record(chapterId="3"))
    with pytest.raises(DecodingError):
        Verse.from_record(_record(verseId=True))
    with pytest.raises(DecodingError):
        Verse.from_record(_record(book={"id": 43, "name": "John"}))
    with pytest.raises(DecodingError):
        Verse.from_record("John 3:16")


def test_decode_chapter_requires_list() -> None:
    assert decode_chapter([]) == []
    assert len(decode_chapter([_record(), _record(id=43003017, verseId=17)])) == 2
    with pytest.raises(DecodingError):
        decode_chapter({"error": "not found"})


def test_dict_roundtrip_and_ref_for_unknown_book() -> None:
    v = Verse(id=1, book_id=99, chapter_id=1, verse_id=1, text="x")
    assert v.ref == "Book 99 1:1"
    assert Verse.from_dict(v.to_dict()) == v
