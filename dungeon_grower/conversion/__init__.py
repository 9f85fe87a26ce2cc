"""
Conversion of generated layouts into scene spawn requests.
"""

from .spawn_placement import (
    SpawnRequest,
    SpawnTranslator,
    SceneBackend,
    InMemoryScene,
    DungeonSpawner,
    IDENTITY_ROTATION,
    grid_to_world,
)

__all__ = [
    'SpawnRequest',
    'SpawnTranslator',
    'SceneBackend',
    'InMemoryScene',
    'DungeonSpawner',
    'IDENTITY_ROTATION',
    'grid_to_world',
]
