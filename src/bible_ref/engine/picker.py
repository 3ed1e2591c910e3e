from __future__ import annotations

import logging
from typing import Optional

from bible_ref.core.errors import BibleError
from bible_ref.core.parser import ParsedReference, parse_reference
from bible_ref.data.books import translation_codes
from bible_ref.data.verse import Verse
from bible_ref.engine.fetcher import VerseFetcher

logger = logging.getLogger(__name__)


class PickerSession:
    """
    State behind a "type a reference, pick the verses" dialog.

    The host calls `edit()` whenever the reference text changes and finally
    `confirm()` or `cancel()`. Each edit re-parses and re-fetches synchronously;
    a failed fetch is logged and leaves the previously shown verses in place.
    """

    def __init__(self, fetcher: VerseFetcher, *, translation: Optional[str] = None) -> None:
        self.fetcher = fetcher
        self.translation = translation or fetcher.translation
        self.reference = ""
        self.parsed: ParsedReference = parse_reference("")
        self.verses: list[Verse] = []
        self.is_loading = False
        self.last_error: Optional[BibleError] = None
        self.closed = False

    def _check_open(self) -> None:
        if self.closed:
            raise RuntimeError("Picker session is closed")

    def _refresh(self) -> None:
        self.is_loading = True
        try:
            result = self.fetcher.fetch_verses(
                self.parsed.book, self.parsed.chapter, self.parsed.verse_range, translation=self.translation
            )
        finally:
            self.is_loading = False

        if result.ok:
            self.verses = list(result.verses)
            self.last_error = None
        else:
            logger.warning("Error fetching verses for %r: %s", self.reference, result.error)
            self.last_error = result.error

    def edit(self, text: str) -> list[Verse]:
        self._check_open()
        self.reference = text
        self.parsed = parse_reference(text)
        self._refresh()
        return list(self.verses)

    def select_translation(self, code: str) -> list[Verse]:
        self._check_open()
        if code not in translation_codes():
            raise ValueError(f"Unknown translation: {code!r}")
        self.translation = code
        if self.reference:
            self._refresh()
        return list(self.verses)

    def confirm(self) -> list[Verse]:
        self._check_open()
        self.closed = True
        return list(self.verses)

    def cancel(self) -> None:
        self._check_open()
        self.closed = True
