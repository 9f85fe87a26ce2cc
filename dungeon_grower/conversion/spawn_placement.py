"""
Spawn placement for generated layouts.

Turns a DungeonLayout into world-space instantiation requests and tracks the
scene objects created from them so a later run can tear them all down.

Grid (x, y) maps to world (x, 0, y): grid y is the world depth axis and the
floor height is fixed at 0.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol, Tuple

from dungeon_grower.generators.layout.layout_types import DungeonLayout, PlacedRoom
from dungeon_grower.generators.palette.room_asset import AssetRegistry
from dungeon_grower.validation.core import (
    GenerationIssue, IssueCode, Severity, ValidationResult,
)

logger = logging.getLogger(__name__)

Vec3 = Tuple[float, float, float]
Quat = Tuple[float, float, float, float]

# (x, y, z, w)
IDENTITY_ROTATION: Quat = (0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class SpawnRequest:
    """Request to instantiate one room asset in the scene."""
    room_id: int
    room_name: str
    footprint_id: str
    position: Vec3
    rotation: Quat = IDENTITY_ROTATION


def grid_to_world(room: PlacedRoom) -> Vec3:
    return (float(room.position.x), 0.0, float(room.position.y))


class SpawnTranslator:
    """Maps placed rooms to spawn requests, skipping rooms with no registered asset."""

    def __init__(self, registry: AssetRegistry):
        self.registry = registry

    def translate(self, layout: DungeonLayout) -> Tuple[List[SpawnRequest], ValidationResult]:
        """
        Build spawn requests for every room with a resolvable footprint.

        Returns:
            (requests in layout order, issues for skipped rooms)
        """
        requests: List[SpawnRequest] = []
        issues = ValidationResult()
        for room in layout:
            if self.registry.get(room.footprint_id) is None:
                issue = GenerationIssue(
                    severity=Severity.WARN,
                    code=IssueCode.UNRESOLVED_ROOM_ASSET,
                    message=f"Room asset is missing for room: {room.name}",
                    room_id=room.room_id,
                    footprint_id=room.footprint_id,
                )
                issues.add_issue(issue)
                logger.warning(issue.format())
                continue
            requests.append(SpawnRequest(
                room_id=room.room_id,
                room_name=room.name,
                footprint_id=room.footprint_id,
                position=grid_to_world(room),
            ))
        return requests, issues


class SceneBackend(Protocol):
    """Whatever actually creates and destroys scene objects."""

    def instantiate(self, request: SpawnRequest) -> Any:
        ...

    def destroy(self, handle: Any) -> None:
        ...


class InMemoryScene:
    """Scene backend that records spawned rooms in a dict. Handles are integers."""

    def __init__(self):
        self.objects: Dict[int, SpawnRequest] = {}
        self._next_handle = 1

    def instantiate(self, request: SpawnRequest) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self.objects[handle] = request
        return handle

    def destroy(self, handle: int) -> None:
        if self.objects.pop(handle, None) is None:
            raise KeyError(f"No scene object with handle {handle}")

    def __len__(self) -> int:
        return len(self.objects)


class DungeonSpawner:
    """
    Spawns layouts into a scene backend and tears them down again.

    Handles of everything spawned are tracked until clear() is called;
    a new spawn after clear() starts from zero tracked instances.
    """

    def __init__(self, translator: SpawnTranslator, backend: SceneBackend):
        self.translator = translator
        self.backend = backend
        self._handles: List[Any] = []
        self.teardown_issues = ValidationResult()

    @property
    def spawned_handles(self) -> Tuple[Any, ...]:
        return tuple(self._handles)

    def spawn(self, layout: DungeonLayout) -> ValidationResult:
        """Instantiate every resolvable room of the layout.

        Returns:
            Issues for rooms that could not be spawned
        """
        requests, issues = self.translator.translate(layout)
        for request in requests:
            self._handles.append(self.backend.instantiate(request))
        logger.debug(f"Spawned {len(requests)} rooms ({len(issues)} skipped)")
        return issues

    def clear(self) -> int:
        """Destroy every tracked scene object and forget the handles.

        Each handle stops being tracked as soon as its destroy is attempted.
        A backend failure is recorded in teardown_issues and the remaining
        handles are still destroyed.

        Returns:
            Number of objects destroyed
        """
        self.teardown_issues = ValidationResult()
        destroyed = 0
        while self._handles:
            handle = self._handles.pop(0)
            try:
                self.backend.destroy(handle)
            except Exception as e:
                issue = GenerationIssue(
                    severity=Severity.WARN,
                    code=IssueCode.TEARDOWN_FAILED,
                    message=f"Could not destroy scene object {handle!r}: {e}",
                )
                self.teardown_issues.add_issue(issue)
                logger.warning(issue.format())
                continue
            destroyed += 1
        if destroyed:
            logger.debug(f"Cleared {destroyed} spawned rooms")
        return destroyed
