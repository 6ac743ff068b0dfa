from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.json"

DEFAULTS = {
    "dictionary_file": "",
    "auto_advance_seconds": None,
    "host": "127.0.0.1",
    "port": 8765,
    "log_level": "INFO",
}


@dataclass
class Settings:
    dictionary_file: str = DEFAULTS["dictionary_file"]
    auto_advance_seconds: float | None = DEFAULTS["auto_advance_seconds"]
    host: str = DEFAULTS["host"]
    port: int = DEFAULTS["port"]
    log_level: str = DEFAULTS["log_level"]

    @property
    def project_root(self) -> Path:
        return Path(__file__).resolve().parent.parent

    @property
    def data_dir(self) -> Path:
        return Path(__file__).resolve().parent / "data"

    @property
    def dictionary_path(self) -> Path:
        """Configured word list, relative to the project root; bundled list if unset."""
        if self.dictionary_file:
            path = Path(self.dictionary_file)
            return path if path.is_absolute() else self.project_root / path
        return self.data_dir / "kelimeler.json"

    def to_dict(self) -> dict:
        return {
            "dictionary_file": self.dictionary_file,
            "auto_advance_seconds": self.auto_advance_seconds,
            "host": self.host,
            "port": self.port,
            "log_level": self.log_level,
        }


def load_settings() -> Settings:
    if CONFIG_PATH.exists():
        raw = json.loads(CONFIG_PATH.read_text())
        known = {f.name for f in Settings.__dataclass_fields__.values()}
        filtered = {k: v for k, v in raw.items() if k in known}
        return Settings(**filtered)
    return Settings()


def save_settings(settings: Settings) -> None:
    CONFIG_PATH.write_text(json.dumps(settings.to_dict(), indent=4) + "\n")
