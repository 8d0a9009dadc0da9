"""Configuration Management Package

Settings live in a JSON ``.sillyrc``. The one in the current directory wins
over the one in the home directory.
"""

import json
import sys
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional

CONFIG_FILENAME = ".sillyrc"


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class Config:
    """User configuration with sensible defaults."""
    names_file: Optional[str] = None      # None means the bundled names
    messages_file: Optional[str] = None   # None means the bundled messages
    count: int = 1
    seed: Optional[int] = None

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def validate(self) -> list[str]:
        """Reset invalid values to their defaults and return a warning for each."""
        warnings = []

        for key in ('names_file', 'messages_file'):
            value = getattr(self, key)
            if value is not None and (not isinstance(value, str) or not value.strip()):
                warnings.append(f"Invalid {key} '{value}', using bundled list")
                setattr(self, key, None)

        if not _is_int(self.count) or self.count <= 0:
            warnings.append(f"Invalid count '{self.count}', using 1")
            self.count = 1

        if self.seed is not None and not _is_int(self.seed):
            warnings.append(f"Invalid seed '{self.seed}', ignoring")
            self.seed = None

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        known = {f.name for f in fields(cls)}
        config = cls(**{k: v for k, v in data.items() if k in known})
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Finds, reads and writes ``.sillyrc``; caches the first load."""

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    @staticmethod
    def search_paths() -> list[Path]:
        return [Path.cwd() / CONFIG_FILENAME, Path.home() / CONFIG_FILENAME]

    def load(self) -> Config:
        if self._config is None:
            path = next((p for p in self.search_paths() if p.is_file()), None)
            self._config = self._read(path) if path else Config()
            self._config_path = path
        return self._config

    @staticmethod
    def _read(path: Path) -> Config:
        try:
            data = json.loads(path.read_text(encoding='utf-8'))
        except (ValueError, OSError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()
        if not isinstance(data, dict):
            print(f"Warning: Could not load {path}: expected a JSON object", file=sys.stderr)
            return Config()
        return Config.from_dict(data)

    def save(self, config: Config, global_config: bool = True) -> Path:
        base = Path.home() if global_config else Path.cwd()
        path = base / CONFIG_FILENAME
        path.write_text(json.dumps(config.to_dict(), indent=2) + "\n", encoding='utf-8')
        return path

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def save_config(config: Config, global_config: bool = True) -> Path:
    return _manager.save(config, global_config)


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "CONFIG_FILENAME",
    "Config",
    "ConfigManager",
    "load_config",
    "save_config",
    "get_config_path",
]
