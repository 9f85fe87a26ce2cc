"""
Core result and error types shared by the generator, the spawner and the panel.

Defines:
- Severity: Issue severity levels (INFO, WARN, FAIL)
- IssueCode: Stable codes for every non-fatal condition a run can report
- GenerationIssue: Individual finding recorded during generation or spawning
- ValidationResult: Collection of issues with pass/fail status
- DungeonGeneratorError and subclasses: raised for caller errors
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Set


class Severity(Enum):
    """Issue severity levels.

    - INFO: Informational, logged but doesn't affect pass/fail
    - WARN: Warning, generation continues with a degraded result
    - FAIL: The run was aborted
    """
    INFO = auto()
    WARN = auto()
    FAIL = auto()

    def __str__(self) -> str:
        return self.name


class IssueCode(Enum):
    """Codes for the conditions a generation or spawn pass can report."""
    NO_FOOTPRINTS_AVAILABLE = "GEN-001"
    MISSING_GEOMETRY = "GEN-002"
    PLACEMENT_EXHAUSTED = "GEN-003"
    UNRESOLVED_ROOM_ASSET = "SPAWN-001"
    TEARDOWN_FAILED = "SPAWN-002"

    def __str__(self) -> str:
        return self.value


# Display names used in formatted issue text
ISSUE_NAMES = {
    IssueCode.NO_FOOTPRINTS_AVAILABLE: "NoFootprintsAvailable",
    IssueCode.MISSING_GEOMETRY: "MissingGeometryWarning",
    IssueCode.PLACEMENT_EXHAUSTED: "PlacementExhausted",
    IssueCode.UNRESOLVED_ROOM_ASSET: "UnresolvedRoomAsset",
    IssueCode.TEARDOWN_FAILED: "TeardownFailed",
}


@dataclass
class GenerationIssue:
    """Represents a single finding.

    Attributes:
        severity: Issue severity (INFO, WARN, FAIL)
        code: Issue code
        message: Human-readable description
        room_id: Room index the issue refers to, if any
        footprint_id: Palette entry the issue refers to, if any
    """
    severity: Severity
    code: IssueCode
    message: str
    room_id: Optional[int] = None
    footprint_id: Optional[str] = None

    @property
    def name(self) -> str:
        return ISSUE_NAMES[self.code]

    def format(self) -> str:
        """Format issue for display.

        Returns:
            [SEVERITY] CODE name room=R footprint=F :: message
        """
        room = '-' if self.room_id is None else str(self.room_id)
        footprint = self.footprint_id if self.footprint_id is not None else '-'
        return (
            f"[{self.severity}] {self.code} {self.name} "
            f"room={room} footprint={footprint} :: {self.message}"
        )

    def __str__(self) -> str:
        return self.format()


@dataclass
class ValidationResult:
    """Collection of issues with pass/fail determination.

    Properties:
        passed: True if no FAIL severity issues
        failed: True if any FAIL severity issues
        warnings: List of WARN severity issues
        errors: List of FAIL severity issues
        infos: List of INFO severity issues
    """
    issues: List[GenerationIssue] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not any(i.severity == Severity.FAIL for i in self.issues)

    @property
    def failed(self) -> bool:
        return any(i.severity == Severity.FAIL for i in self.issues)

    @property
    def warnings(self) -> List[GenerationIssue]:
        return [i for i in self.issues if i.severity == Severity.WARN]

    @property
    def errors(self) -> List[GenerationIssue]:
        return [i for i in self.issues if i.severity == Severity.FAIL]

    @property
    def infos(self) -> List[GenerationIssue]:
        return [i for i in self.issues if i.severity == Severity.INFO]

    def add_issue(self, issue: GenerationIssue) -> None:
        """Add an issue to the result."""
        self.issues.append(issue)

    def merge(self, other: 'ValidationResult') -> 'ValidationResult':
        """Merge another result into this one.

        Returns:
            Self, for chaining
        """
        self.issues.extend(other.issues)
        return self

    def codes(self) -> Set[IssueCode]:
        """Distinct issue codes present in this result."""
        return {i.code for i in self.issues}

    def count(self, code: IssueCode) -> int:
        return sum(1 for i in self.issues if i.code == code)

    def __len__(self) -> int:
        return len(self.issues)


class DungeonGeneratorError(Exception):
    """Base class for errors raised by the dungeon generator."""


class ConfigError(DungeonGeneratorError, ValueError):
    """Raised when a generator configuration is invalid."""


class EmptyPaletteError(DungeonGeneratorError):
    """Raised when a random pick is requested from an empty palette."""


class LayoutError(DungeonGeneratorError):
    """Raised when a layout mutation would break the one-room-per-cell rule."""
