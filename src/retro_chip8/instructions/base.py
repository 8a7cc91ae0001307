"""
CHIP-8命令実装用の共通ユーティリティ。
"""
from typing import Dict, Iterable

from retro_chip8.core.operation import Operation
from retro_chip8.core.state import Chip8CpuState

# @intent:utility_function 命令語をニブル単位のフィールドに分解します。
def split_fields(opcode: int) -> Dict[str, int]:
    return {
        "x": (opcode >> 8) & 0xF,
        "y": (opcode >> 4) & 0xF,
        "n": opcode & 0xF,
        "nn": opcode & 0xFF,
        "nnn": opcode & 0xFFF,
    }

# @intent:utility_function 命令語・ニーモニック・オペランド表記からOperationを生成します。
def make_operation(opcode: int, mnemonic: str, operands: Iterable[str] = ()) -> Operation:
    return Operation(opcode, mnemonic, list(operands), **split_fields(opcode))

def reg(index: int) -> str:
    return f"V{index:X}"

def imm(value: int) -> str:
    return f"#{value:02X}"

def addr(value: int) -> str:
    return f"${value:03X}"

# @intent:utility_function 次の命令を読み飛ばします（PCを2進める）。
def skip_next(state: Chip8CpuState) -> None:
    state.pc = (state.pc + 2) & 0xFFFF
