"""
Occupancy index for grown layouts.

Hash-set of occupied grid cells. Must stay the exact projection of the
layout's room positions, so it is only mutated alongside DungeonLayout.
"""

from typing import Iterable, Iterator, Set, Tuple

from .layout_types import CellCoord, DungeonLayout


class OccupancyIndex:
    """O(1) lookup of occupied cells."""

    def __init__(self, positions: Iterable[CellCoord] = ()):
        self._cells: Set[Tuple[int, int]] = set()
        for position in positions:
            self.insert(position)

    @classmethod
    def from_layout(cls, layout: DungeonLayout) -> 'OccupancyIndex':
        """Rebuild the index from a layout's room positions."""
        return cls(layout.positions())

    def contains(self, position: CellCoord) -> bool:
        return (position.x, position.y) in self._cells

    def insert(self, position: CellCoord) -> None:
        self._cells.add((position.x, position.y))

    def matches(self, layout: DungeonLayout) -> bool:
        """Check the index is consistent with a layout."""
        return self._cells == {p.as_tuple() for p in layout.positions()} \
            and len(self._cells) == len(layout)

    def __contains__(self, position: CellCoord) -> bool:
        return self.contains(position)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[CellCoord]:
        return (CellCoord(x, y) for x, y in sorted(self._cells))
