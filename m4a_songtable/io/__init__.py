"""
IO module for binary stream handling.
"""

from .binary_stream import BinaryStream, is_rom_address, to_address, to_offset

__all__ = ['BinaryStream', 'is_rom_address', 'to_address', 'to_offset']
