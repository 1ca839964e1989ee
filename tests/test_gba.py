import pytest

from m4a_songtable.formats.gba import GbaRom, RomHeader, InputError

from .helpers import build_rom


def test_header(rom_bytes):
    header = GbaRom(rom_bytes).header
    assert header == RomHeader(title="POKEMON FIRE", code="BPRE", maker="01")


def test_short_title_is_trimmed_at_nul():
    header = GbaRom(build_rom(title=b"ZELDA")).header
    assert header.title == "ZELDA"


def test_header_missing_on_tiny_image():
    assert GbaRom(bytes(0xBF)).header is None


def test_locate_resolves_pointer(rom_bytes):
    result = GbaRom(rom_bytes, "firered.gba").locate()
    assert result.found
    assert result.name == "firered.gba"
    assert result.code == "BPRE"
    assert result.table_pointer_offset == 0x228
    assert result.song_table_address == 0x08000800
    assert result.song_table_offset == 0x800


def test_locate_without_resolving(rom_bytes):
    result = GbaRom(rom_bytes).locate(resolve_pointer=False)
    assert result.table_pointer_offset == 0x228
    assert result.song_table_address is None
    assert result.song_table_offset is None


def test_locate_not_found():
    result = GbaRom(build_rom(pattern_offset=None)).locate()
    assert not result.found
    assert result.title == "POKEMON FIRE"
    assert result.song_table_offset is None


def test_pointer_outside_rom_is_reported_but_not_followed():
    # the pointer targets 0x2000, past the end of a 0x1000 byte image
    result = GbaRom(build_rom(song_table_offset=0x2000)).locate()
    assert result.table_pointer_offset == 0x228
    assert result.song_table_address == 0x08002000
    assert result.song_table_offset is None


def test_non_rom_pointer_is_not_followed():
    data = bytearray(build_rom(song_table_offset=None))
    data[0x228:0x22C] = (0x03007FF0).to_bytes(4, 'little')
    result = GbaRom(bytes(data)).locate()
    assert result.song_table_address == 0x03007FF0
    assert result.song_table_offset is None


def test_pointer_to_start_of_rom_is_followed():
    result = GbaRom(build_rom(song_table_offset=0)).locate()
    assert result.song_table_address == 0x08000000
    assert result.song_table_offset == 0


def test_blank_pointer_is_not_followed():
    data = bytearray(build_rom())
    data[0x228:0x22C] = bytes(4)
    result = GbaRom(bytes(data)).locate()
    assert result.song_table_address == 0
    assert result.song_table_offset is None


def test_rom_keeps_single_copy(rom_bytes):
    rom = GbaRom(rom_bytes)
    assert rom.data is rom_bytes


def test_truncated_pointer():
    # only two bytes of the pointer fit in the image
    data = build_rom(size=0x22A)
    result = GbaRom(data).locate()
    assert result.table_pointer_offset == 0x228
    assert result.song_table_address is None


def test_locate_with_custom_displacement(rom_bytes):
    result = GbaRom(rom_bytes).locate(displacement=36, resolve_pointer=False)
    assert result.table_pointer_offset == 0x224


def test_from_file(rom_file):
    rom = GbaRom.from_file(rom_file)
    assert rom.name == "firered.gba"
    assert rom.locate().table_pointer_offset == 0x228


def test_from_file_missing(tmp_path):
    with pytest.raises(InputError):
        GbaRom.from_file(tmp_path / "missing.gba")


def test_from_file_empty(tmp_path):
    path = tmp_path / "empty.gba"
    path.write_bytes(b"")
    with pytest.raises(InputError, match="empty"):
        GbaRom.from_file(path)
