"""
Footprint palette — the ordered list of room types a run may pick from.

Slots may be left unassigned (None), matching the editor's empty prefab
slots. Unassigned slots are still valid picks; they simply fail geometry
resolution and spawning with warnings.
"""

from typing import Iterable, Iterator, List, Optional, Tuple, TYPE_CHECKING

from dungeon_grower.validation.core import EmptyPaletteError

if TYPE_CHECKING:
    from ..layout.random_source import RandomSource


class FootprintPalette:
    """Ordered, caller-mutable collection of footprint identifiers."""

    def __init__(self, entries: Iterable[Optional[str]] = ()):
        self._entries: List[Optional[str]] = list(entries)

    def add(self, footprint_id: Optional[str] = None) -> int:
        """Append a slot and return its index."""
        self._entries.append(footprint_id)
        return len(self._entries) - 1

    def set(self, index: int, footprint_id: Optional[str]) -> None:
        self._entries[index] = footprint_id

    def remove_last(self) -> Optional[str]:
        """Drop the last slot. No-op on an empty palette."""
        if not self._entries:
            return None
        return self._entries.pop()

    def clear(self) -> None:
        self._entries.clear()

    def is_empty(self) -> bool:
        return not self._entries

    @property
    def entries(self) -> Tuple[Optional[str], ...]:
        return tuple(self._entries)

    def pick_random(self, rng: 'RandomSource') -> Optional[str]:
        """Uniformly pick one slot.

        Raises:
            EmptyPaletteError: If the palette has no slots
        """
        if not self._entries:
            raise EmptyPaletteError("Cannot pick a footprint from an empty palette")
        return self._entries[rng.next_index(len(self._entries))]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Optional[str]]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"FootprintPalette({self._entries!r})"
