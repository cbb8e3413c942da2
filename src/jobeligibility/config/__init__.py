"""Configuration management utilities."""

from __future__ import annotations

from pathlib import Path

import yaml

from ..schemas import AppConfig, load_config


class ConfigManager:
    """YAML-backed configuration loader."""

    def __init__(self, base_path: str | Path):
        self._base_path = Path(base_path)

    def path_for(self, name: str) -> Path:
        return self._base_path / f"{name}.yaml"

    def load(self, name: str) -> AppConfig:
        """Load and validate a YAML configuration by name without file extension."""
        return load_config_file(self.path_for(name))


def load_config_file(path: Path) -> AppConfig:
    """Read a YAML file and validate it as an :class:`AppConfig`."""
    with path.open("r", encoding="utf-8") as handle:
        return load_config(yaml.safe_load(handle))


__all__ = ["ConfigManager", "load_config_file"]
