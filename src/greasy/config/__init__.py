"""Configuration loading for markers and environment."""

from greasy.config.settings import get_config_loaded_sources, load_config

__all__ = [
    "load_config",
    "get_config_loaded_sources",
]
