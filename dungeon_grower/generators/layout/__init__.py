"""
Room-growth layout generation.

Provides the grid data model, the occupancy index, the injected random source
and the growth generator itself.
"""

from .layout_types import (
    CellCoord,
    GrowthDirection,
    PlacedRoom,
    DungeonLayout,
    DIRECTIONS,
    ORIGIN,
    room_name_for,
)
from .occupancy import OccupancyIndex
from .random_source import RandomSource
from .growth_generator import GrowthLayoutGenerator, GenerationResult, generate_layout

__all__ = [
    'CellCoord',
    'GrowthDirection',
    'PlacedRoom',
    'DungeonLayout',
    'DIRECTIONS',
    'ORIGIN',
    'room_name_for',
    'OccupancyIndex',
    'RandomSource',
    'GrowthLayoutGenerator',
    'GenerationResult',
    'generate_layout',
]
