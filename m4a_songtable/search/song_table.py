"""
Locator for the m4a song table pointer.

Every ROM built with the m4a ("Sappy") sound engine contains the engine's
SelectSong routine. Its Thumb code loads the song table address from a
literal pool that sits a fixed distance after the start of the routine:

    push {lr}                   b500
    lsl r0, r0, #16             0400
    ldr r2, [pc, #0x1c]         4a07
    ldr r1, [pc, #0x20]         4908
    lsr r0, r0, #13             0b40
    add r0, r0, r1              1840
    ldrh r3, [r0, #4]           8883
    lsl r1, r3, #1              0059
    add r1, r1, r3              18c9
    lsl r1, r1, #2              0089
    add r1, r1, r2              1989
    ldr r2, [r1, #0]            680a
    ldr r1, [r0, #0]            6801
    add r2, r0, #0              1c10
    lsr r0, r0, #28             0f00

The routine is found with a mismatch-tolerant scan, since its encoding
differs slightly between games.
"""

from typing import Optional

from ..utils.pattern_search import hex_to_bytes, loose_search


SELECT_SONG_PATTERN = hex_to_bytes(
    "00 B5 00 04 07 4A 08 49 40 0B 40 18 83 88 59 00"
    "C9 18 89 00 89 18 0A 68 01 68 10 1C 00 F0"
)

PATTERN_LENGTH = 30

# A window matches when fewer than this many bytes differ
MATCH_TOLERANCE = 8

# SelectSong always starts on a word boundary
ALIGNMENT = 4

# Distance from the start of SelectSong to the song table pointer
TABLE_POINTER_DISPLACEMENT = 40


def find_pattern(
    buffer: bytes,
    pattern: bytes = SELECT_SONG_PATTERN,
    tolerance: int = MATCH_TOLERANCE,
    stride: int = ALIGNMENT
) -> Optional[int]:
    """
    Find the first aligned offset where the pattern loosely matches.

    Args:
        buffer: ROM contents
        pattern: Reference pattern
        tolerance: Windows with this many differing bytes or more are rejected
        stride: Alignment of candidate offsets

    Returns:
        Offset of the match, or None if no window qualifies
    """
    return loose_search(buffer, pattern, tolerance, stride)


def resolve_table_pointer(
    match_offset: int,
    buffer_length: int,
    displacement: int = TABLE_POINTER_DISPLACEMENT
) -> Optional[int]:
    """
    Turn a SelectSong match into the offset of the song table pointer.

    Returns None when the pointer would lie outside the buffer.
    """
    candidate = match_offset + displacement
    if candidate >= buffer_length:
        return None
    return candidate


def locate_song_table_pointer(
    buffer: bytes,
    tolerance: int = MATCH_TOLERANCE,
    stride: int = ALIGNMENT,
    displacement: int = TABLE_POINTER_DISPLACEMENT
) -> Optional[int]:
    """
    Locate the offset of the song table pointer in a ROM.

    Args:
        buffer: Complete ROM contents
        tolerance: Mismatch tolerance for the SelectSong scan
        stride: Alignment of candidate offsets
        displacement: Distance from SelectSong to the pointer

    Returns:
        Offset of the pointer, or None if it could not be found
    """
    match_offset = find_pattern(buffer, SELECT_SONG_PATTERN, tolerance, stride)
    if match_offset is None:
        return None
    return resolve_table_pointer(match_offset, len(buffer), displacement)
