from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from bible_ref.connectors.base import ChapterRequest, VerseSource
from bible_ref.connectors.http import HttpOptions, HttpVerseSource
from bible_ref.connectors.local import LocalOptions, LocalVerseSource
from bible_ref.core.errors import BibleError, ErrorKind
from bible_ref.core.filter import filter_verses
from bible_ref.core.parser import parse_reference
from bible_ref.data.books import DEFAULT_TRANSLATION, lookup_book
from bible_ref.data.verse import Verse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResult:
    """Either the verses that were found (`ok`) or the error that stopped the fetch."""

    verses: tuple[Verse, ...] = ()
    error: Optional[BibleError] = None

    @classmethod
    def success(cls, verses: Iterable[Verse]) -> "FetchResult":
        return cls(verses=tuple(verses))

    @classmethod
    def failure(cls, error: BibleError) -> "FetchResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> list[Verse]:
        if self.error is not None:
            raise self.error
        return list(self.verses)


class VerseFetcher:
    def __init__(self, source: VerseSource, *, translation: str = DEFAULT_TRANSLATION) -> None:
        self.source = source
        self.translation = translation

    @classmethod
    def from_config(cls, cfg: dict) -> "VerseFetcher":
        source_cfg = cfg.get("source", {}) or {}
        connector_name = source_cfg.get("connector", "http")
        opts = source_cfg.get("options", {}) or {}

        if connector_name == "http":
            source: VerseSource = HttpVerseSource(HttpOptions(**opts))
        elif connector_name in {"local", "file"}:
            source = LocalVerseSource(LocalOptions(**opts))
        else:
            raise ValueError(f"Unknown connector: {connector_name!r}")

        return cls(source, translation=str(cfg.get("translation") or DEFAULT_TRANSLATION))

    def fetch_verses(
        self, book: str, chapter: str, verse_range: str, *, translation: Optional[str] = None
    ) -> FetchResult:
        req_translation = translation or self.translation
        try:
            book_id = lookup_book(book)
            chapter_verses = self.source.fetch_chapter(
                ChapterRequest(book_id=book_id, chapter=chapter, translation=req_translation)
            )
        except BibleError as e:
            logger.debug("Fetch failed for %r %r (%s): %s", book, chapter, e.kind.value, e)
            return FetchResult.failure(e)
        return FetchResult.success(filter_verses(chapter_verses, verse_range))

    def parse_and_fetch(self, text: str, *, translation: Optional[str] = None) -> FetchResult:
        parsed = parse_reference(text)
        return self.fetch_verses(parsed.book, parsed.chapter, parsed.verse_range, translation=translation)
