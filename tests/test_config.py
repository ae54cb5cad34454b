from __future__ import annotations

import json
from pathlib import Path

from sentiment.config import default_config, load_config, normalize_config, save_config


def test_load_config_missing_file_returns_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "missing.json") == default_config()


def test_load_config_invalid_json_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")

    assert load_config(path) == default_config()


def test_save_then_load_config(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"

    save_config({"log_level": "debug", "dice_seed": 12, "default_token_image_path": "tokens/x.png"}, path)

    assert json.loads(path.read_text(encoding="utf-8"))["log_level"] == "DEBUG"
    assert load_config(path) == {
        "log_level": "DEBUG",
        "dice_seed": 12,
        "default_token_image_path": "tokens/x.png",
    }


def test_normalize_config_drops_invalid_values() -> None:
    config = normalize_config({"log_level": "LOUD", "dice_seed": True, "default_token_image_path": ""})

    assert config == default_config()
