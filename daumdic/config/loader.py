"""Configuration loading utilities."""

import json
import os
import re
from pathlib import Path
from typing import Any

from loguru import logger

from daumdic.config.schema import DictionaryConfig

ENV_BASE_URL = "DAUMDIC_BASE_URL"


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".daumdic" / "config.json"


def load_config(config_path: Path | None = None) -> DictionaryConfig:
    """
    Load configuration from file or fall back to defaults.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.
    """
    path = config_path or get_config_path()

    data: dict[str, Any] = {}
    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = convert_keys(json.load(f))
            if not isinstance(data, dict):
                raise ValueError("top-level value must be an object")
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning("Failed to load config from {}: {}; using defaults", path, e)
            data = {}

    data = _apply_env_overrides(data)
    try:
        return DictionaryConfig.model_validate(data)
    except ValueError as e:
        logger.warning("Invalid config in {}: {}; using defaults", path, e)
        return DictionaryConfig()


def save_config(config: DictionaryConfig, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = convert_to_camel(config.model_dump())

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    base_url = os.environ.get(ENV_BASE_URL, "").strip()
    if base_url:
        data["base_url"] = base_url
    return data


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case recursively."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def convert_to_camel(data: Any) -> Any:
    """Convert snake_case keys to camelCase recursively."""
    if isinstance(data, dict):
        return {snake_to_camel(k): convert_to_camel(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_to_camel(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def snake_to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)
