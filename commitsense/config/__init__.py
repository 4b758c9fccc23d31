"""Configuration Management Package"""

import json
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from commitsense.llm.completions import DEFAULT_ENDPOINT


@dataclass
class Config:
    """User configuration with sensible defaults. The API key never lives here."""
    model: str = "gpt-4"
    max_tokens: int = 100
    endpoint: str = DEFAULT_ENDPOINT
    timeout: Optional[int] = None  # None keeps the transport default

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        if not isinstance(self.model, str) or not self.model.strip():
            warnings.append(f"Invalid model '{self.model}', using '{defaults.model}'")
            self.model = defaults.model

        if isinstance(self.max_tokens, bool) or not isinstance(self.max_tokens, int) or self.max_tokens <= 0:
            warnings.append(f"Invalid max_tokens '{self.max_tokens}', using {defaults.max_tokens}")
            self.max_tokens = defaults.max_tokens

        if not isinstance(self.endpoint, str) or not self.endpoint.startswith(('http://', 'https://')):
            warnings.append(f"Invalid endpoint '{self.endpoint}', using '{defaults.endpoint}'")
            self.endpoint = defaults.endpoint

        if self.timeout is not None and (isinstance(self.timeout, bool) or not isinstance(self.timeout, int) or self.timeout <= 0):
            warnings.append(f"Invalid timeout '{self.timeout}', using transport default")
            self.timeout = defaults.timeout

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Loads configuration from the current directory, then the home directory."""

    CONFIG_FILENAME = ".commitsenserc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        for path in (Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME):
            if path.exists():
                self._config = self._load_from_file(path)
                self._config_path = path
                return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a JSON object")
            return Config.from_dict(data)
        except (ValueError, IOError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


__all__ = [
    "Config",
    "ConfigManager",
    "DEFAULT_ENDPOINT",
    "load_config",
    "get_config_path",
]
