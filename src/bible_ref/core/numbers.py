from __future__ import annotations

import re
from typing import Optional


_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str) -> Optional[int]:
    """Strict base-10 parse: optional sign, ASCII digits only, no padding."""
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)
