from __future__ import annotations

import copy
from typing import Any, Optional

import yaml

from bible_ref.data.books import DEFAULT_TRANSLATION


DEFAULT_CONFIG: dict[str, Any] = {
    "translation": DEFAULT_TRANSLATION,
    "source": {
        "connector": "http",
        "options": {},
    },
}


def load_config(path: Optional[str] = None) -> dict[str, Any]:
    """
    Read a YAML config and merge it over DEFAULT_CONFIG.

    Without a path the defaults are returned as-is (HTTP source, NIV).
    """
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    if not path:
        return cfg

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid config format (expected mapping): {path}")

    if data.get("translation"):
        cfg["translation"] = str(data["translation"])
    source = data.get("source") or {}
    if not isinstance(source, dict):
        raise ValueError(f"Invalid 'source' section in config: {path}")
    if source.get("connector"):
        cfg["source"]["connector"] = str(source["connector"])
    cfg["source"]["options"].update(source.get("options") or {})
    return cfg
