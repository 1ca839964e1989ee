"""Helpers for building synthetic GBA ROM images."""

import struct
from typing import Optional

from m4a_songtable.io.binary_stream import to_address
from m4a_songtable.search.song_table import SELECT_SONG_PATTERN, TABLE_POINTER_DISPLACEMENT


def build_rom(
    size: int = 0x1000,
    pattern_offset: Optional[int] = 0x200,
    song_table_offset: Optional[int] = 0x800,
    title: bytes = b"POKEMON FIRE",
    code: bytes = b"BPRE",
    maker: bytes = b"01",
    fill: int = 0x00
) -> bytes:
    """
    Build a ROM with a header, a SelectSong routine and a song table pointer.

    Anything written past ``size`` is cut off, so a small size truncates
    the routine or its pointer.
    """
    buf = bytearray([fill]) * (max(size, 0xC0) + 0x100)

    buf[0xA0:0xAC] = title[:12].ljust(12, b"\x00")
    buf[0xAC:0xB0] = code[:4]
    buf[0xB0:0xB2] = maker[:2]

    if pattern_offset is not None:
        end = pattern_offset + len(SELECT_SONG_PATTERN)
        if end + 0x100 > len(buf):
            buf.extend(bytes([fill]) * (end + 0x100 - len(buf)))
        buf[pattern_offset:end] = SELECT_SONG_PATTERN

        if song_table_offset is not None:
            struct.pack_into('<I', buf, pattern_offset + TABLE_POINTER_DISPLACEMENT,
                             to_address(song_table_offset))

    return bytes(buf[:size])


def corrupt(data: bytes, offset: int, positions) -> bytes:
    """Flip every bit of the bytes at ``offset + p`` for each p in positions."""
    buf = bytearray(data)
    for p in positions:
        buf[offset + p] ^= 0xFF
    return bytes(buf)
