"""
Result and error types for dungeon generation.

Public API:
    - Severity, IssueCode: Issue classification
    - GenerationIssue, ValidationResult: Non-fatal findings of a run
    - DungeonGeneratorError, ConfigError, EmptyPaletteError, LayoutError: Raised on caller errors
"""

from .core import (
    Severity,
    IssueCode,
    GenerationIssue,
    ValidationResult,
    DungeonGeneratorError,
    ConfigError,
    EmptyPaletteError,
    LayoutError,
)

__all__ = [
    # Issue types
    'Severity',
    'IssueCode',
    'GenerationIssue',
    'ValidationResult',
    # Errors
    'DungeonGeneratorError',
    'ConfigError',
    'EmptyPaletteError',
    'LayoutError',
]
