import pytest

from .helpers import build_rom


@pytest.fixture
def rom_bytes():
    return build_rom()


@pytest.fixture
def rom_file(tmp_path):
    path = tmp_path / "firered.gba"
    path.write_bytes(build_rom())
    return path
