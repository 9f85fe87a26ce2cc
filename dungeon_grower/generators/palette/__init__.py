"""
Room palette: caller-owned assets, the ordered footprint palette, and size lookup.
"""

from .room_asset import RoomAsset, AssetRegistry
from .footprint_palette import FootprintPalette
from .geometry import GeometryProvider, FootprintSize, UNRESOLVED_SIZE, footprint_cells

__all__ = [
    'RoomAsset',
    'AssetRegistry',
    'FootprintPalette',
    'GeometryProvider',
    'FootprintSize',
    'UNRESOLVED_SIZE',
    'footprint_cells',
]
