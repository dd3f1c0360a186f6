from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path

import yaml


class ConfigError(ValueError):
    """Raised when a configuration file cannot be applied."""


@dataclass
class RenderConfig:
    max_heading_level: int = 6
    copy_reset_seconds: float = 2.0
    body_font: str = "Calibri"
    code_font: str = "Consolas"
    font_size_pt: int = 11
    page_title: str = "Analysis Results"


def load_config(path: str | Path | None = None) -> RenderConfig:
    """Load render settings from a YAML mapping, falling back to defaults."""
    if path is None:
        return RenderConfig()
    text = Path(path).read_text(encoding="utf-8")
    return config_from_yaml(text)


def config_from_yaml(text: str) -> RenderConfig:
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping of setting names to values.")

    known = {f.name: f for f in fields(RenderConfig)}
    values = {}
    for key, value in data.items():
        if key not in known:
            logging.warning("Ignoring unknown config key %r", key)
            continue
        values[key] = _coerce(key, value, known[key].default)

    config = RenderConfig(**values)
    if not 1 <= config.max_heading_level <= 6:
        raise ConfigError(f"max_heading_level must be between 1 and 6, got {config.max_heading_level}")
    if config.copy_reset_seconds < 0:
        raise ConfigError("copy_reset_seconds must not be negative")
    return config


def _coerce(key: str, value, default):
    # bool is an int subclass; never accept it for numeric settings
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be a {type(default).__name__}, got bool")
    if isinstance(default, float) and isinstance(value, int):
        return float(value)
    if not isinstance(value, type(default)):
        raise ConfigError(f"{key} must be a {type(default).__name__}, got {type(value).__name__}")
    return value
