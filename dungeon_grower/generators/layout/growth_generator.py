"""
Room-growth layout generator.

Grows a dungeon outward from a starting room at (0, 0):

1. Pick one footprint from the palette for the room index
2. Pick a random existing room as anchor and a random cardinal direction
3. Candidate cell = anchor + direction + direction * rounded footprint size
   along that axis
4. If the cell is taken, re-pick anchor and direction (same footprint) up to
   max_attempts times
5. Place the room if the last candidate is free, otherwise skip the index

The spacing term in step 3 counts a unit step plus the full footprint size,
so neighbouring rooms sit further apart than their sizes alone require.

Degraded runs are reported through GenerationResult.issues rather than
exceptions: missing geometry falls back to a zero-size footprint, exhausted
indices are skipped, and an empty palette stops the run.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from dungeon_grower.validation.core import (
    ConfigError, GenerationIssue, IssueCode, Severity, ValidationResult,
)

from ..config import DEFAULT_MAX_ATTEMPTS, GeneratorConfig
from ..palette.footprint_palette import FootprintPalette
from ..palette.geometry import GeometryProvider, FootprintSize, footprint_cells
from ..palette.room_asset import AssetRegistry
from .layout_types import (
    CellCoord, DungeonLayout, PlacedRoom, DIRECTIONS, ORIGIN, room_name_for,
)
from .occupancy import OccupancyIndex
from .random_source import RandomSource

logger = logging.getLogger(__name__)


_LOG_LEVELS = {
    Severity.INFO: logging.DEBUG,
    Severity.WARN: logging.WARNING,
    Severity.FAIL: logging.WARNING,
}


@dataclass
class GenerationResult:
    """Result of one generation run."""
    layout: DungeonLayout
    requested_count: int
    seed: Optional[int] = None
    issues: ValidationResult = field(default_factory=ValidationResult)
    skipped_indices: List[int] = field(default_factory=list)

    @property
    def room_count(self) -> int:
        return len(self.layout)

    @property
    def aborted(self) -> bool:
        """True if the run stopped because no footprints were available."""
        return IssueCode.NO_FOOTPRINTS_AVAILABLE in self.issues.codes()

    @property
    def warnings(self) -> List[GenerationIssue]:
        return self.issues.warnings


def _record(result: GenerationResult, issue: GenerationIssue) -> None:
    result.issues.add_issue(issue)
    logger.log(_LOG_LEVELS[issue.severity], issue.format())


class GrowthLayoutGenerator:
    """
    Places rooms by repeated random expansion from already-placed rooms.

    The generator keeps no state between runs; every call to generate()
    starts from an empty layout and an empty occupancy index.
    """

    def __init__(self, geometry: GeometryProvider, max_attempts: int = DEFAULT_MAX_ATTEMPTS):
        if max_attempts < 1:
            raise ConfigError(f"max_attempts must be at least 1, got {max_attempts}")
        self.geometry = geometry
        self.max_attempts = max_attempts

    def generate(
        self,
        target_count: int,
        palette: FootprintPalette,
        rng: RandomSource,
    ) -> GenerationResult:
        """
        Grow a layout of up to target_count rooms.

        Args:
            target_count: Requested number of rooms (>= 1)
            palette: Footprint slots to pick from; read-only during the run
            rng: Random source; all draws of the run come from it

        Returns:
            GenerationResult with the layout and any issues

        Raises:
            ConfigError: If target_count < 1
        """
        if target_count < 1:
            raise ConfigError(f"target room count must be at least 1, got {target_count}")

        layout = DungeonLayout()
        occupancy = OccupancyIndex()
        result = GenerationResult(
            layout=layout,
            requested_count=target_count,
            seed=getattr(rng, 'seed', None),
        )
        logger.debug(f"Growing layout: target={target_count}, palette={len(palette)} slots, "
                     f"seed={result.seed}")

        if palette.is_empty():
            self._abort_empty_palette(result, room_id=0)
            return result

        origin_footprint = palette.pick_random(rng)
        self._place(layout, occupancy, PlacedRoom(0, room_name_for(0), ORIGIN, origin_footprint))

        for room_id in range(1, target_count):
            if palette.is_empty():
                self._abort_empty_palette(result, room_id=room_id)
                break

            footprint_id = palette.pick_random(rng)
            size = self.geometry.resolve(footprint_id)
            if not size.resolved:
                _record(result, GenerationIssue(
                    severity=Severity.WARN,
                    code=IssueCode.MISSING_GEOMETRY,
                    message="Footprint has no resolvable bounds; using size (0, 0)",
                    room_id=room_id,
                    footprint_id=footprint_id,
                ))

            position = self._find_free_cell(layout, occupancy, size, rng)
            if position is None:
                result.skipped_indices.append(room_id)
                _record(result, GenerationIssue(
                    severity=Severity.INFO,
                    code=IssueCode.PLACEMENT_EXHAUSTED,
                    message=f"No free cell after {self.max_attempts} retries; room skipped",
                    room_id=room_id,
                    footprint_id=footprint_id,
                ))
                continue

            self._place(layout, occupancy,
                        PlacedRoom(room_id, room_name_for(room_id), position, footprint_id))

        logger.info(f"Generated {len(layout)}/{target_count} rooms "
                    f"({len(result.skipped_indices)} skipped, seed={result.seed})")
        return result

    def _find_free_cell(
        self,
        layout: DungeonLayout,
        occupancy: OccupancyIndex,
        size: FootprintSize,
        rng: RandomSource,
    ) -> Optional[CellCoord]:
        """Try a first candidate plus up to max_attempts re-rolls. None if all were taken."""
        cells = footprint_cells(size)
        candidate = self._candidate(layout, cells, rng)
        attempts = 0
        while occupancy.contains(candidate) and attempts < self.max_attempts:
            candidate = self._candidate(layout, cells, rng)
            attempts += 1

        if occupancy.contains(candidate):
            return None
        if attempts:
            logger.debug(f"Found free cell ({candidate.x}, {candidate.y}) after {attempts} retries")
        return candidate

    @staticmethod
    def _candidate(layout: DungeonLayout, cells, rng: RandomSource) -> CellCoord:
        anchor = layout.rooms[rng.next_index(len(layout))]
        direction = DIRECTIONS[rng.next_index(len(DIRECTIONS))].offset
        width_cells, depth_cells = cells
        return CellCoord(
            anchor.position.x + direction.x + width_cells * direction.x,
            anchor.position.y + direction.y + depth_cells * direction.y,
        )

    @staticmethod
    def _place(layout: DungeonLayout, occupancy: OccupancyIndex, room: PlacedRoom) -> None:
        # Layout and occupancy are only ever mutated together
        layout.add_room(room)
        occupancy.insert(room.position)
        logger.debug(f"Placed '{room.name}' at ({room.position.x}, {room.position.y}) "
                     f"footprint={room.footprint_id}")

    @staticmethod
    def _abort_empty_palette(result: GenerationResult, room_id: int) -> None:
        _record(result, GenerationIssue(
            severity=Severity.FAIL,
            code=IssueCode.NO_FOOTPRINTS_AVAILABLE,
            message="No room footprints assigned; generation aborted",
            room_id=room_id,
        ))


def generate_layout(
    config: GeneratorConfig,
    registry: AssetRegistry,
    rng: Optional[RandomSource] = None,
) -> GenerationResult:
    """
    Run one generation from a GeneratorConfig.

    Args:
        config: Room count, palette, seed and retry bound
        registry: Assets used to resolve footprint sizes
        rng: Random source; defaults to one seeded from config.seed

    Returns:
        GenerationResult of the run
    """
    config.validate()
    if rng is None:
        rng = RandomSource.from_seed(config.seed)
    generator = GrowthLayoutGenerator(GeometryProvider(registry), max_attempts=config.max_attempts)
    return generator.generate(config.room_count, config.build_palette(), rng)
