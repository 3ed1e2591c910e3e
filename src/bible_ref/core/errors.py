from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_BOOK = "invalid_book"
    INVALID_URL = "invalid_url"
    NETWORK_ERROR = "network_error"
    DECODING_ERROR = "decoding_error"


class BibleError(Exception):
    kind: ErrorKind


class InvalidBook(BibleError):
    kind = ErrorKind.INVALID_BOOK


class InvalidURL(BibleError):
    kind = ErrorKind.INVALID_URL


class NetworkError(BibleError):
    kind = ErrorKind.NETWORK_ERROR


class DecodingError(BibleError):
    kind = ErrorKind.DECODING_ERROR
