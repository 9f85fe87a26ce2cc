"""Tests for the grid data model and the occupancy index."""

import pytest

from dungeon_grower.generators.layout import (
    CellCoord, DungeonLayout, GrowthDirection, OccupancyIndex, PlacedRoom, DIRECTIONS, room_name_for,
)
from dungeon_grower.validation.core import LayoutError


def _room(room_id, x, y, footprint="A"):
    return PlacedRoom(room_id, room_name_for(room_id), CellCoord(x, y), footprint)


class TestCellCoord:

    def test_arithmetic(self):
        assert CellCoord(1, 2) + CellCoord(-3, 4) == CellCoord(-2, 6)
        assert CellCoord(1, -1).as_tuple() == (1, -1)

    def test_hashable(self):
        assert len({CellCoord(0, 0), CellCoord(0, 0), CellCoord(1, 0)}) == 2


class TestDirections:

    def test_order_and_offsets(self):
        assert DIRECTIONS == (GrowthDirection.UP, GrowthDirection.DOWN,
                              GrowthDirection.LEFT, GrowthDirection.RIGHT)
        assert [d.offset for d in DIRECTIONS] == [
            CellCoord(0, 1), CellCoord(0, -1), CellCoord(-1, 0), CellCoord(1, 0),
        ]


class TestDungeonLayout:

    def test_names(self):
        assert room_name_for(0) == "Starting Room"
        assert room_name_for(7) == "Room 7"

    def test_add_and_lookup(self):
        layout = DungeonLayout()
        layout.add_room(_room(0, 0, 0))
        layout.add_room(_room(1, 0, 3))
        assert len(layout) == 2
        assert layout.origin.room_id == 0
        assert layout.room_at(CellCoord(0, 3)).room_id == 1
        assert layout.room_at(CellCoord(5, 5)) is None

    def test_duplicate_cell_rejected(self):
        layout = DungeonLayout()
        layout.add_room(_room(0, 0, 0))
        with pytest.raises(LayoutError):
            layout.add_room(_room(1, 0, 0))
        assert len(layout) == 1

    def test_bounds(self):
        layout = DungeonLayout()
        assert layout.bounds() is None
        for i, (x, y) in enumerate([(0, 0), (3, 0), (3, -4), (-6, 4)]):
            layout.add_room(_room(i, x, y))
        assert layout.bounds() == (-6, -4, 3, 4)

    def test_to_dict(self):
        layout = DungeonLayout()
        layout.add_room(_room(0, 0, 0, footprint=None))
        data = layout.to_dict()
        assert data['room_count'] == 1
        assert data['rooms'][0] == {
            'room_id': 0, 'name': 'Starting Room', 'position': [0, 0], 'footprint_id': None,
        }


class TestOccupancyIndex:

    def test_insert_and_contains(self):
        index = OccupancyIndex()
        assert not index.contains(CellCoord(0, 0))
        index.insert(CellCoord(0, 0))
        assert CellCoord(0, 0) in index
        assert len(index) == 1

    def test_rebuild_from_layout(self):
        layout = DungeonLayout()
        layout.add_room(_room(0, 0, 0))
        layout.add_room(_room(1, 2, 0))
        index = OccupancyIndex.from_layout(layout)
        assert index.matches(layout)
        assert sorted(index, key=lambda c: (c.x, c.y)) == [CellCoord(0, 0), CellCoord(2, 0)]

    def test_detects_divergence(self):
        layout = DungeonLayout()
        layout.add_room(_room(0, 0, 0))
        index = OccupancyIndex([CellCoord(0, 0), CellCoord(1, 1)])
        assert not index.matches(layout)
        assert len(index) == 2
