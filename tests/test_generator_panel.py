"""Smoke tests for the Qt generator panel (offscreen)."""

import json
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
pytest.importorskip("PyQt5")

from PyQt5.QtCore import QSettings
from PyQt5.QtWidgets import QApplication

from dungeon_grower.conversion import DungeonSpawner, InMemoryScene, SpawnTranslator
from dungeon_grower.ui.generator_panel import DungeonGeneratorPanel
from dungeon_grower.generators import CONFIG_DIR_ENV, load_config
from dungeon_grower.validation.core import IssueCode


@pytest.fixture(scope="module")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def panel(qapp, registry, tmp_path):
    settings = QSettings(str(tmp_path / "panel.ini"), QSettings.IniFormat)
    scene = InMemoryScene()
    widget = DungeonGeneratorPanel(registry, DungeonSpawner(SpawnTranslator(registry), scene),
                                   settings=settings)
    widget.scene = scene
    yield widget
    widget.deleteLater()


class TestGeneratorPanel:

    def test_generate_spawns_rooms(self, panel):
        panel.room_count_spinbox.setValue(6)
        panel.add_slot("Small")
        result = panel.generate()
        assert result.room_count == 6
        assert len(panel.scene) == 6
        assert panel.rooms_list.count() == 6

    def test_generate_replaces_previous_dungeon(self, panel):
        panel.room_count_spinbox.setValue(4)
        panel.add_slot("Wide")
        panel.generate()
        panel.generate()
        assert len(panel.scene) == 4

    def test_clear(self, panel):
        panel.add_slot("Small")
        panel.generate()
        panel.clear()
        assert len(panel.scene) == 0
        assert panel.rooms_list.count() == 0

    def test_empty_palette_reports_failure(self, panel):
        result = panel.generate()
        assert result.aborted
        assert IssueCode.NO_FOOTPRINTS_AVAILABLE.value in panel.status_label.text()
        assert len(panel.scene) == 0

    def test_slots(self, panel):
        panel.add_slot("Small")
        panel.add_slot()
        assert panel.palette_entries() == ["Small", None]
        panel.remove_last_slot()
        assert panel.palette_entries() == ["Small"]
        panel.remove_last_slot()
        panel.remove_last_slot()
        assert panel.palette_entries() == []

    def test_unassigned_slot_rooms_not_spawned(self, panel):
        panel.room_count_spinbox.setValue(3)
        panel.add_slot()
        result = panel.generate()
        assert result.room_count == 3
        assert len(panel.scene) == 0

    def test_parameters_persist(self, qapp, registry, tmp_path):
        ini = str(tmp_path / "persist.ini")
        spawner = DungeonSpawner(SpawnTranslator(registry), InMemoryScene())
        first = DungeonGeneratorPanel(registry, spawner, settings=QSettings(ini, QSettings.IniFormat))
        first.room_count_spinbox.setValue(12)
        first.add_slot("Wide")
        first.add_slot()
        first.generate()
        first.settings.sync()

        second = DungeonGeneratorPanel(registry, spawner, settings=QSettings(ini, QSettings.IniFormat))
        assert second.room_count_spinbox.value() == 12
        assert second.palette_entries() == ["Wide", None]

    def test_unhashable_saved_palette_entry_ignored(self, qapp, registry, tmp_path):
        ini = str(tmp_path / "odd.ini")
        settings = QSettings(ini, QSettings.IniFormat)
        settings.setValue("palette", json.dumps([[1], {"a": 1}, "Small", "Ghost"]))
        settings.sync()

        spawner = DungeonSpawner(SpawnTranslator(registry), InMemoryScene())
        widget = DungeonGeneratorPanel(registry, spawner, settings=QSettings(ini, QSettings.IniFormat))
        assert widget.palette_entries() == [None, None, "Small", None]

    def test_generate_recovers_after_failed_teardown(self, qapp, registry, tmp_path):
        class LockedOnceScene(InMemoryScene):
            locked = True

            def destroy(self, handle):
                if self.locked:
                    self.locked = False
                    raise RuntimeError("scene object is locked")
                super().destroy(handle)

        scene = LockedOnceScene()
        settings = QSettings(str(tmp_path / "locked.ini"), QSettings.IniFormat)
        widget = DungeonGeneratorPanel(registry, DungeonSpawner(SpawnTranslator(registry), scene),
                                       settings=settings)
        widget.room_count_spinbox.setValue(3)
        widget.add_slot("Small")
        widget.generate()

        result = widget.generate()
        assert result.room_count == 3
        assert IssueCode.TEARDOWN_FAILED.value in widget.status_label.text()
        assert len(widget.spawner.spawned_handles) == 3

        widget.clear()
        assert widget.spawner.spawned_handles == ()
        assert len(scene) == 1
        assert IssueCode.TEARDOWN_FAILED.value not in widget.status_label.text()


class TestPresets:

    @pytest.fixture(autouse=True)
    def config_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path / "configs"))

    def test_save_preset_writes_panel_config(self, panel):
        panel.room_count_spinbox.setValue(7)
        panel.add_slot("Wide")
        panel.add_slot()
        assert panel.save_preset()

        saved = load_config(panel.PRESET_NAME)
        assert saved.room_count == 7
        assert saved.palette == ["Wide", None]

    def test_load_preset_replaces_slots(self, panel):
        panel.room_count_spinbox.setValue(9)
        panel.add_slot("Small")
        panel.add_slot("Cell")
        panel.save_preset()

        panel.room_count_spinbox.setValue(2)
        panel.remove_last_slot()
        panel.add_slot("Wide")
        panel.add_slot("Flat")

        assert panel.load_preset()
        assert panel.room_count_spinbox.value() == 9
        assert panel.palette_entries() == ["Small", "Cell"]
        assert json.loads(panel.settings.value("palette")) == ["Small", "Cell"]

    def test_load_missing_preset(self, panel):
        panel.add_slot("Small")
        assert not panel.load_preset()
        assert panel.palette_entries() == ["Small"]
        assert "No saved preset" in panel.status_label.text()
