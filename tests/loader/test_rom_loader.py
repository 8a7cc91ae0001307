# tests/loader/test_rom_loader.py
"""
retro_chip8.loader.loaderモジュールの単体テスト。
"""
import pytest

from retro_chip8.common.errors import RomTooLargeError
from retro_chip8.loader.loader import RomLoader

class TestRomLoader:
    def test_load_file(self, tmp_path):
        rom = tmp_path / "test.ch8"
        rom.write_bytes(bytes([0x6A, 0x05, 0x7A, 0x03]))
        cpu = RomLoader().load_file(str(rom))
        assert cpu.program_size == 4
        cpu.cycle()
        cpu.cycle()
        assert cpu.get_state().v[0xA] == 8

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            RomLoader().load_file(str(tmp_path / "missing.ch8"))

    def test_oversized_file(self, tmp_path):
        rom = tmp_path / "big.ch8"
        rom.write_bytes(b"\x00" * 4000)
        with pytest.raises(RomTooLargeError):
            RomLoader().load_file(str(rom))
