"""Configuration module for eolapi."""

from eolapi.config.loader import get_config_path, load_config, save_config
from eolapi.config.schema import Config

__all__ = ["Config", "get_config_path", "load_config", "save_config"]
