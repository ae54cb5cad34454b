"""Configuration helpers: per-user settings persistence and logging setup."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from sentiment.domain.entities.character import DEFAULT_TOKEN_IMAGE_PATH

_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "Sentiment"
        return Path.home() / "Sentiment"
    return Path.home() / ".config" / "sentiment"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def default_config() -> Dict[str, Any]:
    return {
        "log_level": _DEFAULT_LOG_LEVEL,
        "default_token_image_path": DEFAULT_TOKEN_IMAGE_PATH,
        "dice_seed": None,
    }


def normalize_config(raw: Dict[str, Any]) -> Dict[str, Any]:
    config = default_config()
    log_level = raw.get("log_level")
    if isinstance(log_level, str) and log_level.upper() in _LOG_LEVELS:
        config["log_level"] = log_level.upper()
    token_path = raw.get("default_token_image_path")
    if isinstance(token_path, str) and token_path:
        config["default_token_image_path"] = token_path
    seed = raw.get("dice_seed")
    if isinstance(seed, int) and not isinstance(seed, bool):
        config["dice_seed"] = seed
    return config


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except (OSError, json.JSONDecodeError):
        return default_config()
    if not isinstance(raw, dict):
        return default_config()
    return normalize_config(raw)


def save_config(config: Dict[str, Any], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = normalize_config(config)
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def configure_logging(level: str = _DEFAULT_LOG_LEVEL) -> None:
    """Configure root logging once; later calls only adjust the level."""
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=numeric_level, format=_LOG_FORMAT)
    logging.getLogger("sentiment").setLevel(numeric_level)
