from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass
from typing import Optional

from bible_ref.connectors.base import ChapterRequest, VerseSource
from bible_ref.core.errors import DecodingError, InvalidURL, NetworkError
from bible_ref.data.verse import Verse, decode_chapter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpOptions:
    base_url: str = "https://bible-go-api.rkeplin.com"
    timeout_s: float = 30.0


class HttpVerseSource(VerseSource):
    def __init__(self, opts: Optional[HttpOptions] = None) -> None:
        self.opts = opts or HttpOptions()

    def build_url(self, req: ChapterRequest) -> str:
        if isinstance(req.book_id, bool) or not isinstance(req.book_id, int) or req.book_id <= 0:
            raise InvalidURL(f"Invalid book id: {req.book_id!r}")
        if not (req.chapter.isascii() and req.chapter.isdigit()):
            raise InvalidURL(f"Invalid chapter: {req.chapter!r}")
        query = urllib.parse.urlencode({"translation": req.translation})
        url = f"{self.opts.base_url.rstrip('/')}/v1/books/{req.book_id}/chapters/{req.chapter}?{query}"
        parts = urllib.parse.urlsplit(url)
        if parts.scheme not in {"http", "https"} or not parts.netloc:
            raise InvalidURL(f"Invalid URL: {url!r}")
        return url

    def fetch_chapter(self, req: ChapterRequest) -> list[Verse]:
        url = self.build_url(req)
        logger.debug("GET %s", url)
        request = urllib.request.Request(url, headers={"Accept": "application/json"})
        try:
            with urllib.request.urlopen(request, timeout=self.opts.timeout_s) as resp:
                raw = resp.read()
        except (urllib.error.URLError, http.client.HTTPException, OSError) as e:
            # HTTPError, truncated bodies and socket timeouts all land here.
            raise NetworkError(f"Request failed: {url}: {e}") from e

        try:
            payload = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DecodingError(f"Response is not valid JSON: {url}") from e
        return decode_chapter(payload)
