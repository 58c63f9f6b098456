"""Configuration module for daumdic."""

from daumdic.config.loader import get_config_path, load_config, save_config
from daumdic.config.schema import DictionaryConfig

__all__ = ["DictionaryConfig", "load_config", "save_config", "get_config_path"]
