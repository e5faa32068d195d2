# weather_candles/utils/config_loader.py
from __future__ import annotations

import copy
import logging
import os
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "WEATHER_CANDLES_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "weather_candles.yaml"

DEFAULT_CONFIG: dict = {
    "chart": {
        "width": 50,
        "wick_char": "|",
        "body_char": "#",
    },
    "aggregation": {
        "default_period": "month",
    },
    "logging": {
        "level": "INFO",
    },
}


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: str | Path | None = None) -> dict:
    """
    Loads the YAML configuration on top of DEFAULT_CONFIG.

    Resolution order:
      1. explicit path
      2. $WEATHER_CANDLES_CONFIG
      3. config/weather_candles.yaml at the repository root

    An explicitly requested file must exist; a missing default file
    just yields the built-in defaults.
    """
    explicit = path if path is not None else os.getenv(CONFIG_ENV_VAR)

    if explicit:
        config_path = Path(explicit)
        if not config_path.is_file():
            raise FileNotFoundError(f"Config file not found: {config_path.resolve()}")
    else:
        config_path = DEFAULT_CONFIG_PATH
        if not config_path.is_file():
            logger.debug("No config file, using defaults", extra={"path": str(config_path)})
            return copy.deepcopy(DEFAULT_CONFIG)

    with open(config_path, encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError(f"Config root must be a mapping: {config_path}")

    logger.debug("Config loaded", extra={"path": str(config_path)})

    return _merge(DEFAULT_CONFIG, loaded)
