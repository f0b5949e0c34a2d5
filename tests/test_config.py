from __future__ import annotations
from json import dumps, loads
from pathlib import Path

from tracklist.config import Config


def test_creates_default_file(tmp_path: Path):
    cfg = Config(config_dir=tmp_path)
    assert cfg.data["default_capacity"] == 50
    saved = loads((tmp_path / "config.json").read_text(encoding="utf-8"))
    assert saved == cfg.default_config


def test_missing_keys_fall_back_to_defaults(tmp_path: Path):
    (tmp_path / "config.json").write_text(dumps({"default_capacity": 7}), encoding="utf-8")
    cfg = Config(config_dir=tmp_path)
    assert cfg.data["default_capacity"] == 7
    assert cfg.data["show_progress"] is True
