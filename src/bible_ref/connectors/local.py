from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from bible_ref.connectors.base import ChapterRequest, VerseSource
from bible_ref.core.errors import DecodingError, NetworkError
from bible_ref.data.verse import Verse, decode_chapter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocalOptions:
    """
    Verse source backed by a JSON file for offline / smoke testing.

    The file holds a list of records in the same shape the verse API returns,
    for any mix of books and chapters. `translation`, when set, is the only
    translation the file can answer for; requests for others come back empty.
    A file that cannot be read is reported as NetworkError, the same kind an
    unreachable API gives; a file that is not valid JSON is DecodingError.
    """

    path: str = "verses.json"
    translation: Optional[str] = None


class LocalVerseSource(VerseSource):
    def __init__(self, opts: Optional[LocalOptions] = None) -> None:
        self.opts = opts or LocalOptions()

    def _load(self) -> list[Verse]:
        path = Path(self.opts.path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise NetworkError(f"Cannot read verse file: {path}") from e
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodingError(f"Verse file is not valid JSON: {path}") from e
        verses = decode_chapter(payload)
        logger.debug("Loaded %d verses from %s", len(verses), path)
        return verses

    def fetch_chapter(self, req: ChapterRequest) -> list[Verse]:
        if self.opts.translation and req.translation != self.opts.translation:
            return []
        return [v for v in self._load() if v.book_id == req.book_id and str(v.chapter_id) == req.chapter]
