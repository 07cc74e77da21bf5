import json
from pathlib import Path

import pytest

from tools_gallery.config.io import load_global_config
from tools_gallery.core.exceptions import ConfigError


def _write_global(root: Path, data) -> None:
    root.mkdir(parents=True, exist_ok=True)
    (root / "global.json").write_text(json.dumps(data), encoding="utf-8")


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv("TOOLS_GALLERY_SOURCE", raising=False)
    monkeypatch.delenv("TOOLS_GALLERY_FETCH_TIMEOUT", raising=False)


def test_load_global_config_defaults(tmp_path):
    config_root = tmp_path / "config"
    _write_global(config_root, {})

    cfg = load_global_config(config_root)

    assert cfg.ui_title == "AI Tools Gallery"
    assert cfg.source == str((config_root / "tools.csv").resolve())
    assert cfg.fetch_timeout is None
    assert cfg.config_root == config_root


def test_load_global_config_reads_values(tmp_path):
    config_root = tmp_path / "config"
    _write_global(
        config_root,
        {
            "ui_title": "Test Gallery",
            "subtitle": "sub",
            "source": "https://example.com/tools.csv",
            "fetch_timeout": 2.5,
        },
    )

    cfg = load_global_config(config_root)

    assert cfg.ui_title == "Test Gallery"
    assert cfg.subtitle == "sub"
    assert cfg.source == "https://example.com/tools.csv"
    assert cfg.fetch_timeout == 2.5


def test_relative_source_resolved_against_config_root(tmp_path):
    config_root = tmp_path / "config"
    _write_global(config_root, {"source": "data/tools.csv"})

    cfg = load_global_config(config_root)

    assert cfg.source == str((config_root / "data" / "tools.csv").resolve())


def test_env_overrides_win(tmp_path, monkeypatch):
    config_root = tmp_path / "config"
    _write_global(config_root, {"source": "tools.csv", "fetch_timeout": 10})
    monkeypatch.setenv("TOOLS_GALLERY_SOURCE", "https://mirror.example.com/tools.csv")
    monkeypatch.setenv("TOOLS_GALLERY_FETCH_TIMEOUT", "4")

    cfg = load_global_config(config_root)

    assert cfg.source == "https://mirror.example.com/tools.csv"
    assert cfg.fetch_timeout == 4.0


def test_missing_global_json_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_global_config(tmp_path)


@pytest.mark.parametrize("timeout", ["soon", -1, 0])
def test_invalid_timeout_raises_config_error(tmp_path, timeout):
    _write_global(tmp_path, {"fetch_timeout": timeout})

    with pytest.raises(ConfigError, match="fetch_timeout"):
        load_global_config(tmp_path)


def test_non_object_global_json_raises_config_error(tmp_path):
    _write_global(tmp_path, ["not", "an", "object"])

    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_malformed_global_json_raises_config_error(tmp_path):
    (tmp_path / "global.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_global_config(tmp_path)
