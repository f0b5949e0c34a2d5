from __future__ import annotations
from pathlib import Path
from json import load, dump


class Config:
    def __init__(self, config_dir: Path | None = None) -> None:
        self.config_dir = config_dir or Path.home() / ".config" / "tracklist"
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file = self.config_dir / "config.json"
        self.default_config = {
            "default_capacity": 50,
            "show_progress": True,
        }
        self.data = self.load()

    def load(self) -> dict:
        if self.config_file.exists():
            with open(self.config_file, "r", encoding="utf-8") as f:
                # Keys missing from an older file fall back to the defaults
                return {**self.default_config, **load(f)}
        else:
            self.save(self.default_config)
            return dict(self.default_config)

    def save(self, data: dict) -> None:
        with open(self.config_file, "w", encoding="utf-8") as f:
            dump(data, f, indent=4)
