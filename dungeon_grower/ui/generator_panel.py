"""
Dungeon Generator panel.

Thin presentation layer over the layout generator and the spawner: a room
count field, a list of palette slots, Generate / Clear buttons and Save / Load
preset buttons. All layout logic lives in dungeon_grower.generators.
"""

import json
import logging
from typing import List, Optional

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QLabel, QPushButton,
    QListWidget, QMenu, QAction,
)
from PyQt5.QtCore import pyqtSignal, QSettings, QTimer

from dungeon_grower.conversion.spawn_placement import DungeonSpawner
from dungeon_grower.generators import GeneratorConfig, load_config, save_config
from dungeon_grower.generators.layout.growth_generator import GenerationResult, generate_layout
from dungeon_grower.generators.palette.room_asset import AssetRegistry
from dungeon_grower.validation.core import ConfigError, ValidationResult

from . import style_constants as sc
from .safe_spinbox import SafeSpinBox

logger = logging.getLogger(__name__)

NONE_LABEL = "(none)"


class PaletteSlotButton(QPushButton):
    """One palette slot. Click to choose a registered room asset from a menu.

    Uses a QMenu rather than QComboBox; the native dropdown crashes PyQt5 on macOS.
    """

    slotChanged = pyqtSignal(object)  # str or None

    def __init__(self, choices: List[str], footprint_id: Optional[str] = None, parent=None):
        super().__init__(parent)
        self._choices = list(choices)
        self._footprint_id = footprint_id
        self._menu = QMenu(self)
        self.clicked.connect(self._show_menu)
        self._update_text()

    def footprint_id(self) -> Optional[str]:
        return self._footprint_id

    def set_footprint_id(self, footprint_id: Optional[str]):
        if footprint_id != self._footprint_id:
            self._footprint_id = footprint_id
            self._update_text()
            self.slotChanged.emit(footprint_id)

    def _update_text(self):
        self.setText(self._footprint_id if self._footprint_id is not None else NONE_LABEL)

    def _show_menu(self):
        self._menu.clear()
        for choice in [None] + self._choices:
            action = QAction(choice if choice is not None else NONE_LABEL, self._menu)
            action.setCheckable(True)
            action.setChecked(choice == self._footprint_id)
            # Defer so the menu has closed before handlers run
            action.triggered.connect(
                lambda _checked, c=choice: QTimer.singleShot(0, lambda: self.set_footprint_id(c))
            )
            self._menu.addAction(action)
        self._menu.popup(self.mapToGlobal(self.rect().bottomLeft()))


class DungeonGeneratorPanel(QWidget):
    """Panel for configuring and running room-growth generation."""

    ROOM_COUNT_MIN = 1
    ROOM_COUNT_MAX = 500
    PRESET_NAME = "default"

    def __init__(self, registry: AssetRegistry, spawner: DungeonSpawner,
                 settings: Optional[QSettings] = None, parent=None):
        super().__init__(parent)
        self.registry = registry
        self.spawner = spawner
        self.settings = settings if settings is not None else QSettings("DungeonGrower", "GeneratorPanel")
        self._slot_buttons: List[PaletteSlotButton] = []
        self.last_result: Optional[GenerationResult] = None

        self._init_ui()
        self._load_parameters()

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------

    def _init_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(sc.SPACING_SM, sc.SPACING_SM, sc.SPACING_SM, sc.SPACING_SM)
        main_layout.setSpacing(sc.SPACING_MD)

        title = QLabel("Procedural Dungeon Generator")
        title.setStyleSheet(f"font-weight: bold; font-size: {sc.FONT_SIZE_LG};")
        main_layout.addWidget(title)

        count_layout = QHBoxLayout()
        count_layout.addWidget(QLabel("Number of Rooms to Generate"))
        self.room_count_spinbox = SafeSpinBox(self.ROOM_COUNT_MIN, self.ROOM_COUNT_MAX)
        self.room_count_spinbox.setValue(GeneratorConfig().room_count)
        self.room_count_spinbox.setToolTip("Requested room count; a run may place fewer")
        count_layout.addWidget(self.room_count_spinbox)
        main_layout.addLayout(count_layout)

        palette_group = QGroupBox("Room Prefabs")
        palette_layout = QVBoxLayout(palette_group)
        self._slots_layout = QVBoxLayout()
        palette_layout.addLayout(self._slots_layout)
        self.add_slot_btn = QPushButton("Add Room Prefab")
        self.add_slot_btn.clicked.connect(lambda: self.add_slot())
        palette_layout.addWidget(self.add_slot_btn)
        main_layout.addWidget(palette_group)

        self.generate_btn = QPushButton("Generate Dungeon")
        self.generate_btn.setObjectName("generateButton")
        self.generate_btn.clicked.connect(self.generate)
        main_layout.addWidget(self.generate_btn)

        self.clear_btn = QPushButton("Clear Dungeon")
        self.clear_btn.clicked.connect(self.clear)
        main_layout.addWidget(self.clear_btn)

        self.remove_slot_btn = QPushButton("Remove Last Prefab Slot")
        self.remove_slot_btn.clicked.connect(self.remove_last_slot)
        main_layout.addWidget(self.remove_slot_btn)

        preset_layout = QHBoxLayout()
        self.save_preset_btn = QPushButton("Save Preset")
        self.save_preset_btn.clicked.connect(self.save_preset)
        preset_layout.addWidget(self.save_preset_btn)
        self.load_preset_btn = QPushButton("Load Preset")
        self.load_preset_btn.clicked.connect(self.load_preset)
        preset_layout.addWidget(self.load_preset_btn)
        main_layout.addLayout(preset_layout)

        self.rooms_list = QListWidget()
        main_layout.addWidget(self.rooms_list, 1)

        self.status_label = QLabel("")
        self.status_label.setWordWrap(True)
        main_layout.addWidget(self.status_label)

        self.setStyleSheet(f"""
            QGroupBox {{
                font-weight: bold;
                border: 1px solid {sc.BORDER_DARK};
                border-radius: {sc.BORDER_RADIUS_LG};
                margin-top: {sc.SPACING_SM}px;
                padding-top: {sc.SPACING_SM}px;
                background-color: {sc.BG_MEDIUM};
            }}
            QLabel {{
                color: {sc.TEXT_PRIMARY};
                font-size: {sc.FONT_SIZE_SM};
            }}
            QListWidget {{
                background-color: {sc.BG_DARKEST};
                color: {sc.TEXT_PRIMARY};
                border: 1px solid {sc.BORDER_MEDIUM};
            }}
            QPushButton {{
                background-color: {sc.BG_LIGHT};
                border: 1px solid {sc.BORDER_MEDIUM};
                border-radius: {sc.BORDER_RADIUS_MD};
                padding: {sc.SPACING_XS}px {sc.SPACING_SM}px;
                color: {sc.TEXT_PRIMARY};
            }}
            QPushButton:hover {{ background-color: {sc.BG_HIGHLIGHT}; }}
            QPushButton#generateButton {{ background-color: {sc.PRIMARY_ACTION}; }}
            QPushButton#generateButton:hover {{ background-color: {sc.PRIMARY_ACTION_HOVER}; }}
        """)

    # ------------------------------------------------------------------
    # Palette slots
    # ------------------------------------------------------------------

    def add_slot(self, footprint_id: Optional[str] = None) -> PaletteSlotButton:
        button = PaletteSlotButton(self.registry.list_assets(), footprint_id)
        button.slotChanged.connect(lambda _fid: self._save_parameters())
        self._slot_buttons.append(button)
        self._slots_layout.addWidget(button)
        return button

    def remove_last_slot(self):
        if not self._slot_buttons:
            return
        button = self._slot_buttons.pop()
        self._slots_layout.removeWidget(button)
        button.deleteLater()
        self._save_parameters()

    def palette_entries(self) -> List[Optional[str]]:
        return [b.footprint_id() for b in self._slot_buttons]

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def get_config(self) -> GeneratorConfig:
        return GeneratorConfig(
            room_count=self.room_count_spinbox.value(),
            palette=self.palette_entries(),
        )

    def generate(self) -> Optional[GenerationResult]:
        """Clear the previous dungeon, grow a new layout and spawn it."""
        self.clear()
        try:
            result = generate_layout(self.get_config(), self.registry)
        except ConfigError as e:
            self._show_status(str(e), sc.TEXT_ERROR)
            return None

        teardown_issues = self.spawner.teardown_issues
        spawn_issues = self.spawner.spawn(result.layout).merge(teardown_issues)
        self.last_result = result
        self._save_parameters()
        self._show_result(result, spawn_issues)
        return result

    def clear(self):
        """Destroy everything spawned by the previous run."""
        self.spawner.clear()
        self.rooms_list.clear()
        teardown_issues = self.spawner.teardown_issues
        if teardown_issues.warnings:
            lines = [i.format() for i in teardown_issues.warnings]
            self._show_status("\n".join(lines), sc.TEXT_WARNING)
        else:
            self.status_label.setText("")

    def save_preset(self) -> bool:
        """Save room count and palette as the named generator preset."""
        try:
            path = save_config(self.get_config(), self.PRESET_NAME)
        except (ConfigError, OSError) as e:
            logger.warning(f"Could not save preset '{self.PRESET_NAME}': {e}")
            self._show_status(f"Could not save preset: {e}", sc.TEXT_ERROR)
            return False
        self._show_status(f"Saved preset to {path}", sc.TEXT_SUCCESS)
        return True

    def load_preset(self) -> bool:
        """Replace room count and palette slots with the saved preset."""
        config = load_config(self.PRESET_NAME)
        if config is None:
            self._show_status(f"No saved preset '{self.PRESET_NAME}'", sc.TEXT_WARNING)
            return False

        self.room_count_spinbox.setValue(config.room_count)
        while self._slot_buttons:
            self.remove_last_slot()
        for entry in config.palette:
            self.add_slot(entry if entry in self.registry else None)
        self._save_parameters()
        self._show_status(f"Loaded preset '{self.PRESET_NAME}'", sc.TEXT_SUCCESS)
        return True

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def _show_result(self, result: GenerationResult, spawn_issues: ValidationResult):
        for room in result.layout:
            self.rooms_list.addItem(
                f"{room.name}  ({room.position.x}, {room.position.y})  "
                f"{room.footprint_id or NONE_LABEL}"
            )

        issues = ValidationResult(list(result.issues.issues)).merge(spawn_issues)
        summary = f"{result.room_count}/{result.requested_count} rooms, seed {result.seed}"
        if issues.failed:
            color = sc.TEXT_ERROR
        elif issues.warnings:
            color = sc.TEXT_WARNING
        else:
            color = sc.TEXT_SUCCESS
        lines = [summary] + [i.format() for i in issues.errors + issues.warnings]
        self._show_status("\n".join(lines), color)

    def _show_status(self, text: str, color: str):
        self.status_label.setStyleSheet(f"color: {color};")
        self.status_label.setText(text)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _save_parameters(self):
        self.settings.setValue("room_count", self.room_count_spinbox.value())
        self.settings.setValue("palette", json.dumps(self.palette_entries()))

    def _load_parameters(self):
        room_count = self.settings.value("room_count")
        if room_count is not None:
            try:
                self.room_count_spinbox.setValue(int(room_count))
            except (ValueError, TypeError):
                pass

        palette = []
        raw_palette = self.settings.value("palette")
        if raw_palette:
            try:
                palette = json.loads(raw_palette)
            except (ValueError, TypeError):
                logger.warning(f"Ignoring unreadable saved palette: {raw_palette!r}")
        for entry in palette if isinstance(palette, list) else []:
            self.add_slot(entry if isinstance(entry, str) and entry in self.registry else None)
