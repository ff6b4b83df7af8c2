"""Configuration module for sessionbrief."""

from sessionbrief.config.loader import get_config_path, load_config, save_config
from sessionbrief.config.schema import Config

__all__ = ["Config", "get_config_path", "load_config", "save_config"]
