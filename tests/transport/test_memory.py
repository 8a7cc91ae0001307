# tests/transport/test_memory.py
"""
retro_chip8.transport.memoryモジュールの単体テスト。
"""
import pytest

from retro_chip8.common.types import FONT_START
from retro_chip8.transport.memory import Memory, FONTS

class TestMemory:
    @pytest.fixture
    def memory(self):
        return Memory()

    def test_fonts_preloaded(self, memory):
        assert len(FONTS) == 80
        assert memory.dump()[FONT_START:FONT_START + 80] == FONTS
        assert memory.get_size() == 4096

    def test_read_write(self, memory):
        memory.write(0x200, 0xAB)
        assert memory.read(0x200) == 0xAB
        memory.write(0xFFF, 0x01)
        assert memory.read(0xFFF) == 0x01

    def test_reserved_region_is_write_protected(self, memory):
        memory.write(0x000, 0x12)
        memory.write(0x1FF, 0x34)
        assert memory.read(0x000) == 0x00
        assert memory.read(0x1FF) == 0x00

    def test_addresses_wrap_at_4k(self, memory):
        memory.write(0x1300, 0x77)
        assert memory.read(0x300) == 0x77
        # 命令語の2バイト目は 0x1000 ではなく 0x000 から読まれる
        memory.write(0xFFF, 0x12)
        memory.load_data(0x000, b"\x34")
        memory.write(0x200, 0x56)
        assert memory.read_word(0xFFF) == 0x1234

    def test_write_invalid_data(self, memory):
        with pytest.raises(ValueError):
            memory.write(0x300, 0x100)

    def test_load_data_backdoor(self, memory):
        memory.load_data(0x000, b"\xAA\xBB")
        assert memory.read_word(0x000) == 0xAABB

    def test_load_data_out_of_bounds(self, memory):
        with pytest.raises(IndexError):
            memory.load_data(0xFFF, b"\x00\x00")
