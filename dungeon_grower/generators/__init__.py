"""
Dungeon generators: layout growth, room palettes and generator configuration.

Usage:
    from dungeon_grower.generators import GeneratorConfig, save_config, load_config

    config = GeneratorConfig(room_count=20, palette=["Hall", "Chamber"])
    save_config(config, "caves")
    restored = load_config("caves")  # None if missing or unreadable
"""

from .config import GeneratorConfig, DEFAULT_ROOM_COUNT, DEFAULT_MAX_ATTEMPTS
from .config_storage import (
    CONFIG_DIR_ENV,
    get_config_dir,
    save_config,
    load_config,
    list_saved_configs,
    delete_config,
)


__all__ = [
    # Config
    'GeneratorConfig',
    'DEFAULT_ROOM_COUNT',
    'DEFAULT_MAX_ATTEMPTS',
    # Storage functions
    'CONFIG_DIR_ENV',
    'get_config_dir',
    'save_config',
    'load_config',
    'list_saved_configs',
    'delete_config',
]
