"""
config.py - User-defined zones from a TOML file

    [zones.usET]
    dst = { abbrev = "EDT", week = 2, dow = 1, month = 3, hour = 2, offset = -240 }
    std = { abbrev = "EST", week = 1, dow = 1, month = 11, hour = 2, offset = -300 }

MIT License - Copyright (c) 2025 Matthew S. Smith
"""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .validation import ZoneModel

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """The zone config file is missing or invalid."""


class ZonesConfig(BaseModel):
    model_config = {"frozen": True}

    zones: dict[str, ZoneModel] = Field(default_factory=dict)


def load_config(path) -> ZonesConfig:
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    try:
        return ZonesConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid zone definition in {path}: {exc}") from exc


def load_zones(path):
    """Return {key: Zone} for every zone defined in the file."""
    config = load_config(path)
    logger.debug("Loaded %d zone(s) from %s", len(config.zones), path)
    return {key: model.to_zone() for key, model in config.zones.items()}
