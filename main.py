#!/usr/bin/env python3
"""
Dungeon Grower - Application Entry Point

Initializes the Qt application and shows the dungeon generator panel,
backed by a small set of sample room assets and an in-memory scene.
"""

import logging
import os
import sys

# CRITICAL: Disable Qt accessibility to prevent macOS crashes.
# PyQt5's accessibility system segfaults when interacting with buttons and inputs.
os.environ['QT_MAC_WANTS_LAYER'] = '1'
os.environ['QT_ACCESSIBILITY'] = '0'

from PyQt5.QtWidgets import QApplication
from PyQt5.QtGui import QPalette, QColor
from PyQt5.QtCore import Qt

from dungeon_grower.conversion.spawn_placement import DungeonSpawner, InMemoryScene, SpawnTranslator
from dungeon_grower.generators.palette.room_asset import AssetRegistry, RoomAsset
from dungeon_grower.ui.generator_panel import DungeonGeneratorPanel


def build_sample_registry() -> AssetRegistry:
    """Box rooms in a few sizes (width, height, depth)."""
    registry = AssetRegistry()
    registry.register(RoomAsset.box("SmallRoom", 1.0, 3.0, 1.0))
    registry.register(RoomAsset.box("Hall", 3.0, 3.0, 1.0))
    registry.register(RoomAsset.box("Chamber", 2.0, 4.0, 2.0))
    registry.register(RoomAsset.box("GreatHall", 4.0, 6.0, 3.0))
    return registry


def main():
    """Main application entry point."""
    logging.basicConfig(
        level=logging.DEBUG if os.environ.get("DUNGEON_GROWER_DEBUG") else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Dungeon Grower")
    app.setOrganizationName("DungeonGrower")
    app.setStyle("Fusion")

    dark_palette = QPalette()
    dark_palette.setColor(QPalette.Window, QColor(43, 43, 43))
    dark_palette.setColor(QPalette.WindowText, Qt.white)
    dark_palette.setColor(QPalette.Base, QColor(35, 35, 35))
    dark_palette.setColor(QPalette.Text, Qt.white)
    dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ButtonText, Qt.white)
    dark_palette.setColor(QPalette.Highlight, QColor(76, 175, 80))
    dark_palette.setColor(QPalette.HighlightedText, Qt.black)
    app.setPalette(dark_palette)

    registry = build_sample_registry()
    scene = InMemoryScene()
    spawner = DungeonSpawner(SpawnTranslator(registry), scene)

    panel = DungeonGeneratorPanel(registry, spawner)
    panel.setWindowTitle("Dungeon Generator")
    panel.resize(420, 640)
    panel.show()

    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
