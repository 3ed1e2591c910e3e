from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List

from bible_ref.data.verse import Verse


def save_selection(path: Path, verses: Iterable[Verse]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    data = [v.to_dict() for v in verses]
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    return path


def load_selection(path: Path) -> List[Verse]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"Invalid selection format (expected list): {path}")
    return [Verse.from_dict(d) for d in data]


def save_batch(path: Path, entries: List[Dict[str, Any]]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(entries, ensure_ascii=False, indent=2), encoding="utf-8")
    return path
