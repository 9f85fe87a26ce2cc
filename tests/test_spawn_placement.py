"""Tests for spawn translation and teardown."""

import logging

import pytest

from dungeon_grower.conversion import (
    DungeonSpawner, IDENTITY_ROTATION, InMemoryScene, SpawnTranslator,
)
from dungeon_grower.generators.config import GeneratorConfig
from dungeon_grower.generators.layout import CellCoord, DungeonLayout, PlacedRoom, generate_layout
from dungeon_grower.validation.core import IssueCode, Severity


class FailOnceScene(InMemoryScene):
    """Scene whose destroy fails the first time it sees a given handle."""

    def __init__(self, failing_handle):
        super().__init__()
        self.failing_handle = failing_handle

    def destroy(self, handle):
        if handle == self.failing_handle:
            self.failing_handle = None
            raise RuntimeError("scene object is locked")
        super().destroy(handle)


@pytest.fixture
def mixed_layout():
    layout = DungeonLayout()
    layout.add_room(PlacedRoom(0, "Starting Room", CellCoord(0, 0), "Small"))
    layout.add_room(PlacedRoom(1, "Room 1", CellCoord(3, -4), "Wide"))
    layout.add_room(PlacedRoom(2, "Room 2", CellCoord(-1, 0), None))
    layout.add_room(PlacedRoom(3, "Room 3", CellCoord(0, 2), "Ghost"))
    return layout


class TestSpawnTranslator:

    def test_grid_maps_to_world_xz(self, registry, mixed_layout):
        requests, _issues = SpawnTranslator(registry).translate(mixed_layout)
        assert [r.room_id for r in requests] == [0, 1]
        assert requests[1].position == (3.0, 0.0, -4.0)
        assert requests[1].footprint_id == "Wide"
        assert all(r.rotation == IDENTITY_ROTATION for r in requests)

    def test_unresolved_rooms_skipped_with_warning(self, registry, mixed_layout, caplog):
        with caplog.at_level(logging.WARNING, logger="dungeon_grower"):
            _requests, issues = SpawnTranslator(registry).translate(mixed_layout)
        assert [i.room_id for i in issues.issues] == [2, 3]
        assert all(i.code == IssueCode.UNRESOLVED_ROOM_ASSET for i in issues.issues)
        assert all(i.severity == Severity.WARN for i in issues.issues)
        assert "Room 2" in caplog.text


class TestDungeonSpawner:

    def test_spawn_and_clear(self, registry, mixed_layout):
        scene = InMemoryScene()
        spawner = DungeonSpawner(SpawnTranslator(registry), scene)
        issues = spawner.spawn(mixed_layout)
        assert len(scene) == 2
        assert len(spawner.spawned_handles) == 2
        assert len(issues.warnings) == 2

        assert spawner.clear() == 2
        assert len(scene) == 0
        assert spawner.spawned_handles == ()
        assert spawner.clear() == 0

    def test_destroying_unknown_handle_raises(self):
        with pytest.raises(KeyError):
            InMemoryScene().destroy(42)

    def test_regenerate_after_teardown_matches_fresh_run(self, registry):
        config = GeneratorConfig(room_count=20, palette=["Small", "Wide", "Cell"], seed=77)
        scene = InMemoryScene()
        spawner = DungeonSpawner(SpawnTranslator(registry), scene)

        first = generate_layout(config, registry)
        spawner.spawn(first.layout)
        first_scene = sorted(scene.objects.values(), key=lambda r: r.room_id)

        spawner.clear()
        second = generate_layout(config, registry)
        spawner.spawn(second.layout)
        second_scene = sorted(scene.objects.values(), key=lambda r: r.room_id)

        assert second.layout.rooms == first.layout.rooms
        assert second_scene == first_scene
        assert len(spawner.spawned_handles) == len(first_scene)

    def test_failed_destroy_does_not_wedge_teardown(self, registry, caplog):
        layout = DungeonLayout()
        for room_id, x in enumerate((0, 2, 4)):
            layout.add_room(PlacedRoom(room_id, f"Room {room_id}", CellCoord(x, 0), "Small"))
        scene = FailOnceScene(failing_handle=2)
        spawner = DungeonSpawner(SpawnTranslator(registry), scene)
        spawner.spawn(layout)

        with caplog.at_level(logging.WARNING, logger="dungeon_grower"):
            assert spawner.clear() == 2
        assert spawner.spawned_handles == ()
        assert list(scene.objects) == [2]
        assert spawner.teardown_issues.codes() == {IssueCode.TEARDOWN_FAILED}
        assert spawner.teardown_issues.warnings[0].severity == Severity.WARN
        assert "TeardownFailed" in caplog.text

        assert spawner.clear() == 0
        assert len(spawner.teardown_issues) == 0

        spawner.spawn(layout)
        assert len(spawner.spawned_handles) == 3
        assert spawner.clear() == 3
        assert list(scene.objects) == [2]
