"""
Footprint geometry lookup.

Resolves a footprint identifier to its 2D grid footprint (width along x,
depth along z) from the registered asset's bounding geometry.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from .room_asset import AssetRegistry, RoomAsset


@dataclass(frozen=True)
class FootprintSize:
    """Resolved footprint size. resolved=False means the (0, 0) fallback was used."""
    width: float
    depth: float
    resolved: bool = True

    def as_tuple(self) -> Tuple[float, float]:
        return (self.width, self.depth)


UNRESOLVED_SIZE = FootprintSize(0.0, 0.0, resolved=False)


def asset_bounds_size(asset: RoomAsset) -> Optional[Tuple[float, float, float]]:
    """Axis-aligned bounds extent (x, y, z) of an asset, or None if it has no geometry."""
    if asset.vertices is not None and len(asset.vertices) > 0:
        extent = asset.vertices.max(axis=0) - asset.vertices.min(axis=0)
        return (float(extent[0]), float(extent[1]), float(extent[2]))
    if asset.bounds_size is not None:
        w, h, d = asset.bounds_size
        return (abs(float(w)), abs(float(h)), abs(float(d)))
    return None


class GeometryProvider:
    """Looks up footprint sizes in an AssetRegistry. Stateless apart from the registry reference."""

    def __init__(self, registry: AssetRegistry):
        self.registry = registry

    def resolve(self, footprint_id: Optional[str]) -> FootprintSize:
        asset = self.registry.get(footprint_id)
        if asset is None:
            return UNRESOLVED_SIZE
        bounds = asset_bounds_size(asset)
        if bounds is None:
            return UNRESOLVED_SIZE
        width, _height, depth = bounds
        return FootprintSize(width, depth)

    def footprint_size(self, footprint_id: Optional[str]) -> Tuple[float, float]:
        """Return (width, depth); (0, 0) when the geometry cannot be resolved."""
        return self.resolve(footprint_id).as_tuple()


def footprint_cells(size: FootprintSize) -> Tuple[int, int]:
    """Round a footprint to whole cells (round half to even)."""
    return (int(np.rint(size.width)), int(np.rint(size.depth)))
