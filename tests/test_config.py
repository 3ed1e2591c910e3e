import pytest

from bible_ref.config import DEFAULT_CONFIG, load_config


def test_defaults_without_path() -> None:
    cfg = load_config(None)
    assert cfg == DEFAULT_CONFIG
    cfg["source"]["options"]["base_url"] = "http://changed"
    assert DEFAULT_CONFIG["source"]["options"] == {}


def test_yaml_merged_over_defaults(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "translation: KJV\nsource:\n  options:\n    base_url: http://localhost:9000\n    timeout_s: 5\n",
        encoding="utf-8",
    )
    cfg = load_config(str(path))
    assert cfg["translation"] == "KJV"
    assert cfg["source"]["connector"] == "http"
    assert cfg["source"]["options"] == {"base_url": "http://localhost:9000", "timeout_s": 5}


def test_empty_yaml_gives_defaults(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == DEFAULT_CONFIG


def test_invalid_yaml_shape(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))
    path.write_text("source: local\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))
