"""
Layout types for room-growth dungeon generation.

Defines the core data structures for a grown dungeon layout:
- CellCoord: Grid position (x, y integers; y maps to world depth)
- GrowthDirection: Cardinal unit step used to grow from an anchor room
- PlacedRoom: One room of the finished layout
- DungeonLayout: Ordered rooms in placement order, origin first

Grid coordinates are abstract cells, not world units. The spawn translator
maps (x, y) to world (x, 0, y).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple, Any

import numpy as np

from dungeon_grower.validation.core import LayoutError


ORIGIN_ROOM_NAME = "Starting Room"


@dataclass(frozen=True)
class CellCoord:
    """Grid cell coordinate."""
    x: int
    y: int

    def __add__(self, other: 'CellCoord') -> 'CellCoord':
        return CellCoord(self.x + other.x, self.y + other.y)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


ORIGIN = CellCoord(0, 0)


class GrowthDirection(Enum):
    """Cardinal direction for growing a new room off an anchor.

    Member order is significant: the generator draws an index into it.
    """
    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def offset(self) -> CellCoord:
        dx, dy = self.value
        return CellCoord(dx, dy)


# Index-addressable view of the four directions
DIRECTIONS: Tuple[GrowthDirection, ...] = tuple(GrowthDirection)


def room_name_for(room_id: int) -> str:
    """Human-readable label for a room index."""
    if room_id == 0:
        return ORIGIN_ROOM_NAME
    return f"Room {room_id}"


@dataclass(frozen=True)
class PlacedRoom:
    """A room instance placed on the grid."""
    room_id: int                        # 0 = origin, then placement order
    name: str                           # Display label derived from room_id
    position: CellCoord                 # Grid cell, not world coordinates
    footprint_id: Optional[str]         # Palette entry (None = unassigned slot)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'room_id': self.room_id,
            'name': self.name,
            'position': [self.position.x, self.position.y],
            'footprint_id': self.footprint_id,
        }


@dataclass
class DungeonLayout:
    """
    Ordered set of placed rooms produced by one generation run.

    Insertion order is placement order; later rooms may have been anchored
    to earlier ones. No two rooms share a grid cell.
    """
    rooms: List[PlacedRoom] = field(default_factory=list)

    def add_room(self, room: PlacedRoom) -> None:
        """Append a room.

        Raises:
            LayoutError: If another room already occupies the cell
        """
        if self.room_at(room.position) is not None:
            raise LayoutError(
                f"Cell ({room.position.x}, {room.position.y}) already holds a room; "
                f"cannot place '{room.name}'"
            )
        self.rooms.append(room)

    def room_at(self, position: CellCoord) -> Optional[PlacedRoom]:
        """Return the room at a cell, if any (linear scan)."""
        for room in self.rooms:
            if room.position == position:
                return room
        return None

    def positions(self) -> List[CellCoord]:
        return [room.position for room in self.rooms]

    @property
    def origin(self) -> Optional[PlacedRoom]:
        return self.rooms[0] if self.rooms else None

    def bounds(self) -> Optional[Tuple[int, int, int, int]]:
        """Grid extents of the layout as (min_x, min_y, max_x, max_y).

        Returns None for an empty layout.
        """
        if not self.rooms:
            return None
        cells = np.array([room.position.as_tuple() for room in self.rooms], dtype=np.int64)
        min_x, min_y = cells.min(axis=0)
        max_x, max_y = cells.max(axis=0)
        return (int(min_x), int(min_y), int(max_x), int(max_y))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for debug display."""
        return {
            'room_count': len(self.rooms),
            'bounds': self.bounds(),
            'rooms': [room.to_dict() for room in self.rooms],
        }

    def __len__(self) -> int:
        return len(self.rooms)

    def __iter__(self) -> Iterator[PlacedRoom]:
        return iter(self.rooms)

    def __getitem__(self, index: int) -> PlacedRoom:
        return self.rooms[index]
