"""
Dungeon Grower - procedural room-growth dungeon layouts.

Grows a connected set of non-overlapping rooms on a 2D grid by random expansion
from existing rooms, then translates the layout into spawn requests.
"""

__version__ = '1.0.0'
