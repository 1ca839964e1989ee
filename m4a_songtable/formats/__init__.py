"""
ROM image format parsers.

Supports:
- GBA cartridge images
"""

from .gba import GbaRom, RomHeader, InputError

__all__ = ['GbaRom', 'RomHeader', 'InputError']
