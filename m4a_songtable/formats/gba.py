"""
GBA ROM image parser.

A GBA cartridge image starts with a 0xC0 byte header holding the game
title, game code and maker code. The m4a song table is found by scanning
the whole image, see ``search.song_table``.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..io.binary_stream import BinaryStream
from ..output.report import SongTableResult
from ..search.song_table import (
    MATCH_TOLERANCE, ALIGNMENT, TABLE_POINTER_DISPLACEMENT,
    locate_song_table_pointer
)


HEADER_SIZE = 0xC0
TITLE_OFFSET = 0xA0
TITLE_LENGTH = 12
CODE_OFFSET = 0xAC
CODE_LENGTH = 4
MAKER_OFFSET = 0xB0
MAKER_LENGTH = 2


class InputError(Exception):
    """Raised when a ROM file cannot be opened, read, or is empty."""
    pass


@dataclass
class RomHeader:
    """Identification fields from the cartridge header."""
    title: str = ""
    code: str = ""
    maker: str = ""

    @classmethod
    def read(cls, stream: BinaryStream) -> Optional['RomHeader']:
        """Read the header, or return None if the image is too short to have one."""
        if stream.length < HEADER_SIZE:
            return None

        header = cls()
        header.title = stream.read_string(TITLE_LENGTH, TITLE_OFFSET)
        header.code = stream.read_string(CODE_LENGTH, CODE_OFFSET)
        header.maker = stream.read_string(MAKER_LENGTH, MAKER_OFFSET)
        return header


class GbaRom(BinaryStream):
    """
    A GBA ROM image held in memory.

    Attributes:
        data: The complete image
        name: File name of the image, if it came from a file
    """

    def __init__(self, data: bytes, name: str = ""):
        data = bytes(data)
        # the stream and self.data share one buffer
        super().__init__(data, name)
        self.data = data
        self._header: Optional[RomHeader] = None
        self._header_read = False

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'GbaRom':
        """
        Load a ROM image from disk.

        Raises:
            InputError: If the file cannot be read or is empty
        """
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as e:
            raise InputError(f"Cannot read {path}: {e.strerror or e}") from e

        if not data:
            raise InputError(f"{path} is empty")

        return cls(data, path.name)

    @property
    def header(self) -> Optional[RomHeader]:
        """The cartridge header, or None if the image is too short."""
        if not self._header_read:
            self._header = RomHeader.read(self)
            self._header_read = True
        return self._header

    def locate(
        self,
        tolerance: int = MATCH_TOLERANCE,
        stride: int = ALIGNMENT,
        displacement: int = TABLE_POINTER_DISPLACEMENT,
        resolve_pointer: bool = True
    ) -> SongTableResult:
        """
        Locate the song table pointer and, optionally, follow it.

        Args:
            tolerance: Mismatch tolerance for the SelectSong scan
            stride: Alignment of candidate offsets
            displacement: Distance from SelectSong to the pointer
            resolve_pointer: Also read the pointer and validate its target

        Returns:
            The result for this ROM; fields that could not be determined are None
        """
        result = SongTableResult(name=self.name)

        header = self.header
        if header is not None:
            result.title = header.title
            result.code = header.code
            result.maker = header.maker

        result.table_pointer_offset = locate_song_table_pointer(
            self.data, tolerance, stride, displacement
        )

        if resolve_pointer and result.table_pointer_offset is not None:
            pointer_offset = result.table_pointer_offset
            # The pointer may be cut off by the end of the image
            if pointer_offset + 4 <= self.length:
                self.position = pointer_offset
                result.song_table_address = self.read_uint32()
                target = self.read_pointer(pointer_offset)
                # A raw value of 0 is a blank pointer, 0x08000000 is offset 0
                if result.song_table_address != 0 and target is not None and target < self.length:
                    result.song_table_offset = target

        return result
