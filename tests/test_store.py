import json

import pytest

from bible_ref.data.verse import Verse
from bible_ref.results.store import load_selection, save_batch, save_selection


def test_save_and_load_selection(tmp_path) -> None:
    verses = [
        Verse(id=43003016, book_id=43, chapter_id=3, verse_id=16, text="For God so loved the world"),
        Verse(id=43003017, book_id=43, chapter_id=3, verse_id=17, text="For God did not send his Son"),
    ]
    path = save_selection(tmp_path / "out" / "selection.json", verses)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data[0]["ref"] == "John 3:16"
    assert load_selection(path) == verses


def test_load_selection_rejects_non_list(tmp_path) -> None:
    path = tmp_path / "selection.json"
    path.write_text('{"id": 1}', encoding="utf-8")
    with pytest.raises(ValueError):
        load_selection(path)


def test_save_batch(tmp_path) -> None:
    path = save_batch(tmp_path / "nested" / "batch.json", [{"reference": "John 3:16", "ok": True}])
    assert json.loads(path.read_text(encoding="utf-8")) == [{"reference": "John 3:16", "ok": True}]
