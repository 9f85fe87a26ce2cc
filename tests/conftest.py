"""Shared fixtures for the dungeon generator tests."""

from typing import Iterable, List

import pytest

from dungeon_grower.generators.palette.room_asset import AssetRegistry, RoomAsset


class ScriptedRandom:
    """Random source that replays a fixed list of indices.

    Each scripted value must be valid for the range it is drawn against.
    """

    def __init__(self, indices: Iterable[int], seed=None):
        self._indices: List[int] = list(indices)
        self.calls: List[int] = []
        self.seed = seed

    def next_index(self, n: int) -> int:
        value = self._indices.pop(0)
        assert 0 <= value < n, f"scripted index {value} out of range for n={n}"
        self.calls.append(n)
        return value

    def next_uniform(self) -> float:
        return 0.0

    @property
    def remaining(self) -> int:
        return len(self._indices)


@pytest.fixture
def registry():
    reg = AssetRegistry()
    reg.register(RoomAsset.box("Cell", 0.0, 3.0, 0.0))
    reg.register(RoomAsset.box("Small", 1.0, 3.0, 1.0))
    reg.register(RoomAsset.box("Wide", 2.0, 3.0, 3.0))
    reg.register(RoomAsset("Flat", bounds_size=(4.0, 2.0, 1.0)))
    reg.register(RoomAsset("NoMesh"))
    return reg
