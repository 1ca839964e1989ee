"""
m4a song table locator
A tool for finding the song table of the m4a sound engine in GBA ROMs.

Based on find_songtable by lost, which builds on saptapper.
"""

__version__ = "0.1.0"
__author__ = "lost"

from .config import Config
from .formats.gba import GbaRom, InputError
from .search.song_table import locate_song_table_pointer

__all__ = ['Config', 'GbaRom', 'InputError', 'locate_song_table_pointer', '__version__']
