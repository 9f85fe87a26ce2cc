"""
Dungeon Grower - UI Module

Thin Qt presentation layer over the generator and spawner.
"""

from .generator_panel import DungeonGeneratorPanel

__all__ = [
    'DungeonGeneratorPanel'
]
