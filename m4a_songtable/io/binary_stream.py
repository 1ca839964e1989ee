"""
Binary stream reader for GBA ROM images.

This module provides a BinaryStream class that reads little-endian
values from a ROM, plus helpers for the cartridge's address mapping.
"""

import struct
from io import BytesIO
from typing import Optional, Union


# Cartridge ROM is mapped at 0x08000000; 0x08000000..0x09FFFFFF covers 32 MB
ROM_BASE = 0x08000000
ROM_ADDRESS_END = 0x09FFFFFF
ROM_OFFSET_MASK = 0x01FFFFFF


def is_rom_address(address: int) -> bool:
    """Check whether an address points into cartridge ROM."""
    return ROM_BASE <= address <= ROM_ADDRESS_END


def to_address(offset: int) -> int:
    """Convert a file offset to a ROM address."""
    return ROM_BASE + offset


def to_offset(address: int) -> int:
    """Convert a ROM address to a file offset."""
    return address - ROM_BASE


class BinaryStream:
    """
    Little-endian binary stream reader.

    Attributes:
        name: Optional name of the underlying file, used in messages
    """

    def __init__(self, data: Union[bytes, bytearray, BytesIO], name: str = ""):
        """
        Initialize a BinaryStream.

        Args:
            data: Either raw bytes or a BytesIO stream
            name: Name of the source, if any
        """
        if isinstance(data, (bytes, bytearray)):
            self._stream = BytesIO(data)
        else:
            self._stream = data

        self.name = name

    # ========== Position and Length ==========

    @property
    def position(self) -> int:
        """Get current stream position."""
        return self._stream.tell()

    @position.setter
    def position(self, value: int) -> None:
        """Set stream position."""
        self._stream.seek(value)

    @property
    def length(self) -> int:
        """Get stream length."""
        current = self._stream.tell()
        self._stream.seek(0, 2)  # Seek to end
        length = self._stream.tell()
        self._stream.seek(current)  # Restore position
        return length

    @property
    def remaining(self) -> int:
        """Number of bytes between the current position and the end."""
        return max(0, self.length - self.position)

    # ========== Primitive Readers ==========

    def read_bytes(self, count: int) -> bytes:
        """Read raw bytes, raising EOFError if the stream ends first."""
        data = self._stream.read(count)
        if len(data) < count:
            raise EOFError(
                f"Unexpected end of stream at 0x{self.position:x}: "
                f"wanted {count} bytes, got {len(data)}"
            )
        return data

    def read_byte(self) -> int:
        """Read an unsigned byte."""
        return struct.unpack('<B', self.read_bytes(1))[0]

    def read_uint16(self) -> int:
        """Read an unsigned 16-bit integer."""
        return struct.unpack('<H', self.read_bytes(2))[0]

    def read_int32(self) -> int:
        """Read a signed 32-bit integer."""
        return struct.unpack('<i', self.read_bytes(4))[0]

    def read_uint32(self) -> int:
        """Read an unsigned 32-bit integer."""
        return struct.unpack('<I', self.read_bytes(4))[0]

    # ========== String Readers ==========

    def read_string(self, length: int, addr: Optional[int] = None) -> str:
        """
        Read a fixed-width ASCII field.

        The field ends at the first NUL byte; anything that is not ASCII
        is replaced.

        Args:
            length: Width of the field in bytes
            addr: Optional address to seek to before reading

        Returns:
            The decoded string
        """
        if addr is not None:
            self.position = addr

        raw = self.read_bytes(length)
        null_pos = raw.find(b'\x00')
        if null_pos != -1:
            raw = raw[:null_pos]
        return raw.decode('ascii', errors='replace')

    # ========== Pointer Readers ==========

    def read_pointer(self, addr: Optional[int] = None) -> Optional[int]:
        """
        Read a 32-bit ROM pointer and convert it to a file offset.

        Args:
            addr: Optional address to seek to before reading

        Returns:
            0 for a blank pointer, None if the value does not point into
            ROM, otherwise the file offset it points at
        """
        if addr is not None:
            self.position = addr

        ptr = self.read_uint32()
        if ptr == 0:
            return 0

        if not is_rom_address(ptr):
            return None

        return ptr & ROM_OFFSET_MASK
