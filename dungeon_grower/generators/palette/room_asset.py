"""
Room asset registry — caller-owned mapping of footprint identifiers to room geometry.

The generator only ever sees footprint identifiers. Whatever renders the
dungeon registers a RoomAsset per identifier so that sizes can be resolved
and spawn requests can be turned into scene objects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)

Vec3 = Tuple[float, float, float]


@dataclass
class RoomAsset:
    """
    Geometry for one room type.

    Axes follow the host scene convention: x = width, y = height, z = depth.

    Attributes:
        name: Footprint identifier used in palettes
        vertices: Optional (N, 3) array of model-space vertices
        bounds_size: Optional explicit (width, height, depth) when no mesh is available
        metadata: Free-form data for the rendering side (prefab path, colour...)
    """
    name: str
    vertices: Optional[np.ndarray] = None
    bounds_size: Optional[Vec3] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.vertices is not None:
            vertices = np.asarray(self.vertices, dtype=np.float64)
            if vertices.ndim != 2 or vertices.shape[1] != 3:
                raise ValueError(
                    f"RoomAsset '{self.name}' vertices must be shaped (N, 3), got {vertices.shape}"
                )
            self.vertices = vertices

    @classmethod
    def box(cls, name: str, width: float, height: float, depth: float, **metadata) -> 'RoomAsset':
        """Create an asset from an axis-aligned box centred on the origin."""
        hx, hy, hz = width / 2.0, height / 2.0, depth / 2.0
        corners = np.array([
            [sx * hx, sy * hy, sz * hz]
            for sx in (-1, 1) for sy in (-1, 1) for sz in (-1, 1)
        ], dtype=np.float64)
        return cls(name=name, vertices=corners, metadata=dict(metadata))

    def has_geometry(self) -> bool:
        if self.vertices is not None and len(self.vertices) > 0:
            return True
        return self.bounds_size is not None


class AssetRegistry:
    """Registry mapping footprint identifiers to room assets."""

    def __init__(self):
        self._assets: Dict[str, RoomAsset] = {}

    def register(self, asset: RoomAsset) -> None:
        """Register an asset, replacing any previous one with the same name."""
        if asset.name in self._assets:
            logger.debug(f"Replacing room asset '{asset.name}'")
        self._assets[asset.name] = asset

    def unregister(self, name: str) -> Optional[RoomAsset]:
        return self._assets.pop(name, None)

    def get(self, name: Optional[str]) -> Optional[RoomAsset]:
        if name is None:
            return None
        return self._assets.get(name)

    def list_assets(self) -> List[str]:
        return sorted(self._assets.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._assets

    def __len__(self) -> int:
        return len(self._assets)
