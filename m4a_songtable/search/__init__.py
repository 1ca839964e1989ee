"""
Search utilities for finding the m4a song table.

This module provides:
- find_pattern: Aligned, mismatch-tolerant scan for the SelectSong routine
- resolve_table_pointer: Offset arithmetic from the routine to the pointer
- locate_song_table_pointer: Both steps with the engine's constants
"""

from .song_table import (
    SELECT_SONG_PATTERN, PATTERN_LENGTH, MATCH_TOLERANCE, ALIGNMENT,
    TABLE_POINTER_DISPLACEMENT, find_pattern, resolve_table_pointer,
    locate_song_table_pointer
)

__all__ = [
    'SELECT_SONG_PATTERN', 'PATTERN_LENGTH', 'MATCH_TOLERANCE', 'ALIGNMENT',
    'TABLE_POINTER_DISPLACEMENT', 'find_pattern', 'resolve_table_pointer',
    'locate_song_table_pointer'
]
