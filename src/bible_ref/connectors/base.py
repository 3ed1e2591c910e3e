from __future__ import annotations

from dataclasses import dataclass

from bible_ref.data.verse import Verse


@dataclass(frozen=True)
class ChapterRequest:
    book_id: int
    chapter: str
    translation: str


class VerseSource:
    def fetch_chapter(self, req: ChapterRequest) -> list[Verse]:
        raise NotImplementedError
