import unittest

from retro_chip8.common.errors import StackUnderflowError
from retro_chip8.core.state import Chip8CpuState
from retro_chip8.transport.memory import Memory
from retro_chip8.instructions import decode_opcode, execute_instruction

class TestChip8ControlInstructions(unittest.TestCase):
    def setUp(self):
        self.memory = Memory()
        self.state = Chip8CpuState()

    def _execute(self, opcode, current_pc=0x300):
        self.state.pc = current_pc
        op = decode_opcode(opcode)
        # CPU.cycle と同様、実行前にPCを次の命令へ進める
        self.state.pc = (self.state.pc + 2) & 0xFFFF
        execute_instruction(op, self.state, self.memory)

    def test_jp(self):
        self._execute(0x1ABC)
        self.assertEqual(self.state.pc, 0xABC)

    def test_call_and_ret(self):
        self._execute(0x2400, current_pc=0x300)
        self.assertEqual(self.state.pc, 0x400)
        self.assertEqual(self.state.stack, [0x302])
        self._execute(0x00EE, current_pc=0x400)
        self.assertEqual(self.state.pc, 0x302)

    def test_nested_calls_unwind_in_order(self):
        self._execute(0x2400, current_pc=0x300)
        self._execute(0x2500, current_pc=0x400)
        self._execute(0x00EE, current_pc=0x500)
        self.assertEqual(self.state.pc, 0x402)
        self._execute(0x00EE, current_pc=0x402)
        self.assertEqual(self.state.pc, 0x302)

    def test_ret_empty_stack(self):
        with self.assertRaises(StackUnderflowError):
            self._execute(0x00EE)

    def test_se_sne_imm(self):
        self.state.v[4] = 0x12
        self._execute(0x3412)
        self.assertEqual(self.state.pc, 0x304)
        self._execute(0x3413)
        self.assertEqual(self.state.pc, 0x302)
        self._execute(0x4413)
        self.assertEqual(self.state.pc, 0x304)
        self._execute(0x4412)
        self.assertEqual(self.state.pc, 0x302)

    def test_se_sne_reg(self):
        self.state.v[1] = 7
        self.state.v[2] = 7
        self._execute(0x5120)
        self.assertEqual(self.state.pc, 0x304)
        self._execute(0x9120)
        self.assertEqual(self.state.pc, 0x302)
        self.state.v[2] = 8
        self._execute(0x9120)
        self.assertEqual(self.state.pc, 0x304)

    def test_se_reg_requires_zero_low_nibble(self):
        op = decode_opcode(0x5121)
        self.assertEqual(op.mnemonic, "UNKNOWN")
        self.assertFalse(execute_instruction(op, self.state, self.memory))

    def test_jp_v0(self):
        self.state.v[0] = 0x10
        self._execute(0xB300)
        self.assertEqual(self.state.pc, 0x310)

    def test_skp_sknp(self):
        self.state.v[1] = 0xA
        self.state.pressed_keys[0xA] = True
        self._execute(0xE19E)
        self.assertEqual(self.state.pc, 0x304)
        self._execute(0xE1A1)
        self.assertEqual(self.state.pc, 0x302)
        self.state.pressed_keys[0xA] = False
        self._execute(0xE19E)
        self.assertEqual(self.state.pc, 0x302)
        self._execute(0xE1A1)
        self.assertEqual(self.state.pc, 0x304)

    def test_skp_out_of_range_key_is_not_pressed(self):
        self.state.v[1] = 0x20
        self.state.pressed_keys = [True] * 16
        self._execute(0xE19E)
        self.assertEqual(self.state.pc, 0x302)
        self._execute(0xE1A1)
        self.assertEqual(self.state.pc, 0x304)

    def test_wait_key(self):
        self._execute(0xF30A)
        self.assertEqual(self.state.pc, 0x300)
        self.state.pressed_keys[0xE] = True
        self.state.pressed_keys[0x9] = True
        self._execute(0xF30A)
        self.assertEqual(self.state.v[3], 0x9)
        self.assertEqual(self.state.pc, 0x302)

if __name__ == '__main__':
    unittest.main()
