"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..schemas.config import AppConfig, load_config


class ConfigManager:
    """YAML-backed configuration loader."""

    def __init__(self, base_path: str | Path):
        self._base_path = Path(base_path)

    def load(self, name: str) -> dict[str, Any]:
        """Load a YAML configuration by name without file extension."""
        return read_yaml(self._base_path / f"{name}.yaml")

    def load_app_config(self, name: str = "recruitscreening") -> AppConfig:
        """Load and validate a named configuration file."""
        return load_config(self.load(name))


def read_yaml(path: str | Path) -> Any:
    with Path(path).open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def load_config_file(path: str | Path) -> AppConfig:
    """Validate the YAML document at ``path``."""
    return load_config(read_yaml(path))


__all__ = ["ConfigManager", "load_config_file", "read_yaml"]
