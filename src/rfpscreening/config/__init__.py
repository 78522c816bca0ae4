"""Configuration loading for CLI and container settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..schemas.config import AppConfig, load_config


def load_settings(path: str | Path) -> dict[str, Any]:
    """Read a YAML settings file and return validated container settings."""
    with Path(path).open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle)
    if raw is not None and not isinstance(raw, dict):
        raise ValueError("Config file must be a YAML mapping")
    return load_config(raw).to_settings()


__all__ = ["AppConfig", "load_settings"]
