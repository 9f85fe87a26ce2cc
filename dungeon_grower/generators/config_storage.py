"""
Generator config persistence.

Handles save/load of named GeneratorConfig presets to ~/.config/dungeon_grower/configs/
(override with the DUNGEON_GROWER_CONFIG_DIR environment variable).
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from dungeon_grower.validation.core import ConfigError

from .config import GeneratorConfig

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "DUNGEON_GROWER_CONFIG_DIR"


def get_config_dir() -> Path:
    """
    Get the directory for storing config presets.

    Returns:
        Path from DUNGEON_GROWER_CONFIG_DIR, or ~/.config/dungeon_grower/configs/.
        Creates the directory if it doesn't exist.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        config_dir = Path(override)
    else:
        config_dir = Path.home() / ".config" / "dungeon_grower" / "configs"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def _sanitize_filename(name: str) -> str:
    """Lowercase, spaces to underscores, keep only alphanumerics, '_' and '-'."""
    safe = name.lower().replace(" ", "_")
    safe = "".join(c for c in safe if c.isalnum() or c in "_-")
    return safe or "config"


def config_path(name: str = "default") -> Path:
    return get_config_dir() / (_sanitize_filename(name) + ".json")


def save_config(config: GeneratorConfig, name: str = "default") -> Path:
    """
    Save a config preset.

    Args:
        config: The GeneratorConfig to save
        name: Preset name

    Returns:
        Path to the saved file

    Raises:
        ConfigError: If the config is invalid
        OSError: If the file cannot be written
    """
    config.validate()
    file_path = config_path(name)
    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
    logger.debug(f"Saved generator config '{name}' to {file_path}")
    return file_path


def load_config(name: str = "default") -> Optional[GeneratorConfig]:
    """
    Load a config preset by name.

    Returns:
        GeneratorConfig if found and valid, None otherwise
    """
    file_path = config_path(name)
    if not file_path.exists():
        return None

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return GeneratorConfig.from_dict(data)
    except (json.JSONDecodeError, AttributeError, TypeError, ConfigError) as e:
        logger.warning(f"Ignoring unreadable generator config {file_path}: {e}")
        return None


def list_saved_configs() -> List[str]:
    """Sorted preset names (file stems) in the config directory."""
    return sorted(p.stem for p in get_config_dir().glob("*.json"))


def delete_config(name: str) -> bool:
    """
    Delete a saved preset.

    Returns:
        True if deleted, False if not found
    """
    file_path = config_path(name)
    if file_path.exists():
        file_path.unlink()
        return True
    return False
