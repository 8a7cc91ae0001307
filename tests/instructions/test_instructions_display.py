import unittest

from retro_chip8.common.types import FONT_START, DISPLAY_WIDTH, DISPLAY_HEIGHT
from retro_chip8.core.state import Chip8CpuState
from retro_chip8.transport.memory import Memory
from retro_chip8.instructions import decode_opcode, execute_instruction

class TestChip8DisplayInstructions(unittest.TestCase):
    def setUp(self):
        self.memory = Memory()
        self.state = Chip8CpuState()

    def _execute(self, opcode):
        op = decode_opcode(opcode)
        self.state.pc += 2
        execute_instruction(op, self.state, self.memory)

    def _lit(self):
        return {(x, y) for y in range(DISPLAY_HEIGHT) for x in range(DISPLAY_WIDTH) if self.state.pixel(x, y)}

    def _draw_full_row_sprite(self, x, y, height=1):
        # 0xFF の行を height 行並べたスプライト
        self.memory.load_data(0x300, b"\xFF" * height)
        self.state.i = 0x300
        self.state.v[0] = x
        self.state.v[1] = y
        self._execute(0xD010 | height)

    def test_cls(self):
        self.state.display[5] = True
        self._execute(0x00E0)
        self.assertEqual(self.state.display, [False] * (DISPLAY_WIDTH * DISPLAY_HEIGHT))
        self.assertTrue(self.state.display_modified)

    def test_draw_font_glyph(self):
        self.state.i = FONT_START  # "0"
        self._execute(0xD005)
        expected = {(x, 0) for x in range(4)} | {(x, 4) for x in range(4)}
        expected |= {(0, y) for y in range(1, 4)} | {(3, y) for y in range(1, 4)}
        self.assertEqual(self._lit(), expected)
        self.assertEqual(self.state.v[0xF], 0)
        self.assertTrue(self.state.display_modified)

    def test_draw_twice_restores_and_reports_collision(self):
        self._draw_full_row_sprite(10, 10, height=3)
        self.assertEqual(self.state.v[0xF], 0)
        self.assertEqual(len(self._lit()), 24)
        self._draw_full_row_sprite(10, 10, height=3)
        self.assertEqual(self.state.v[0xF], 1)
        self.assertEqual(self._lit(), set())

    def test_collision_flag_is_sticky(self):
        # 1行目だけが衝突し、2行目以降は新規点灯
        self._draw_full_row_sprite(0, 0, height=1)
        self._draw_full_row_sprite(0, 0, height=3)
        self.assertEqual(self.state.v[0xF], 1)
        self.assertEqual(self._lit(), {(x, y) for x in range(8) for y in (1, 2)})

    def test_vf_cleared_when_no_collision(self):
        self.state.v[0xF] = 1
        self._draw_full_row_sprite(20, 20)
        self.assertEqual(self.state.v[0xF], 0)

    def test_pixels_past_right_edge_are_clipped(self):
        self._draw_full_row_sprite(60, 0)
        self.assertEqual(self._lit(), {(x, 0) for x in range(60, 64)})

    def test_pixels_past_bottom_edge_are_clipped(self):
        self._draw_full_row_sprite(0, 30, height=4)
        self.assertEqual(self._lit(), {(x, y) for x in range(8) for y in (30, 31)})

    def test_origin_wraps(self):
        self._draw_full_row_sprite(64 + 3, 32 + 2)
        self.assertEqual(self._lit(), {(x, 2) for x in range(3, 11)})

    def test_vf_as_coordinate_register(self):
        # DRW VF, V1 : 座標はフラグのクリア前に読み出される
        self.memory.load_data(0x300, b"\x80")
        self.state.i = 0x300
        self.state.v[0xF] = 5
        self.state.v[1] = 0
        self._execute(0xDF11)
        self.assertEqual(self._lit(), {(5, 0)})

if __name__ == '__main__':
    unittest.main()
