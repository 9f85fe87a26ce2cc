"""
GeneratorConfig — the configuration surface a caller hands to the layout generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from dungeon_grower.validation.core import ConfigError

from .palette.footprint_palette import FootprintPalette


DEFAULT_ROOM_COUNT = 10
DEFAULT_MAX_ATTEMPTS = 100


@dataclass
class GeneratorConfig:
    """
    Parameters for one generation run.

    Attributes:
        room_count: Requested total rooms (>= 1); a run may produce fewer
        palette: Ordered footprint slots (None = unassigned slot)
        seed: Random seed, None = pick one per run
        max_attempts: Retry bound per room index
    """

    room_count: int = DEFAULT_ROOM_COUNT
    palette: List[Optional[str]] = field(default_factory=list)
    seed: Optional[int] = None
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    def validate(self) -> None:
        """Raise ConfigError if any field is out of range."""
        if isinstance(self.room_count, bool) or not isinstance(self.room_count, int):
            raise ConfigError(f"room_count must be an integer, got {self.room_count!r}")
        if self.room_count < 1:
            raise ConfigError(f"room_count must be at least 1, got {self.room_count}")
        if isinstance(self.max_attempts, bool) or not isinstance(self.max_attempts, int):
            raise ConfigError(f"max_attempts must be an integer, got {self.max_attempts!r}")
        if self.max_attempts < 1:
            raise ConfigError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.seed is not None and not isinstance(self.seed, int):
            raise ConfigError(f"seed must be an integer or None, got {self.seed!r}")
        for slot in self.palette:
            if slot is not None and not isinstance(slot, str):
                raise ConfigError(f"palette entries must be strings or None, got {slot!r}")

    def build_palette(self) -> FootprintPalette:
        return FootprintPalette(self.palette)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "room_count": self.room_count,
            "palette": list(self.palette),
            "seed": self.seed,
            "max_attempts": self.max_attempts,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'GeneratorConfig':
        """Create a config from a dictionary, filling defaults for missing keys."""
        config = cls(
            room_count=data.get("room_count", DEFAULT_ROOM_COUNT),
            palette=list(data.get("palette", [])),
            seed=data.get("seed"),
            max_attempts=data.get("max_attempts", DEFAULT_MAX_ATTEMPTS),
        )
        config.validate()
        return config
