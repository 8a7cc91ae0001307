"""
算術論理演算命令の実装。

フラグを定義する命令は、結果をVxに書き込んだ後にVFを無条件で上書きします。
x が 0xF の場合はフラグ値が最終的なVFの値になります。
"""
from retro_chip8.core.operation import Operation
from retro_chip8.core.state import Chip8CpuState
from retro_chip8.transport.memory import Memory
from .base import make_operation, reg, imm

# @intent:utility_function "OP Vx, Vy" 形式のデコード結果を生成します。
def _decode_xy(opcode: int, mnemonic: str) -> Operation:
    return make_operation(opcode, mnemonic, [reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF)])

# --- ADD Vx, nn ---
def decode_add_imm(opcode: int) -> Operation:
    return make_operation(opcode, "ADD", [reg((opcode >> 8) & 0xF), imm(opcode & 0xFF)])

# @intent:responsibility Vxに即値を加算します（8bitラップアラウンド、フラグ変化なし）。
def execute_add_imm(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    state.v[op.x] = (state.v[op.x] + op.nn) & 0xFF

# --- OR / AND / XOR ---
def decode_or(opcode: int) -> Operation:
    return _decode_xy(opcode, "OR")

def execute_or(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    state.v[op.x] = state.v[op.x] | state.v[op.y]

def decode_and(opcode: int) -> Operation:
    return _decode_xy(opcode, "AND")

def execute_and(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    state.v[op.x] = state.v[op.x] & state.v[op.y]

def decode_xor(opcode: int) -> Operation:
    return _decode_xy(opcode, "XOR")

def execute_xor(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    state.v[op.x] = state.v[op.x] ^ state.v[op.y]

# --- ADD Vx, Vy ---
def decode_add_reg(opcode: int) -> Operation:
    return _decode_xy(opcode, "ADD")

# @intent:responsibility Vx := Vx + Vy。符号なしオーバーフロー時にVF=1。
def execute_add_reg(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    res = state.v[op.x] + state.v[op.y]
    state.v[op.x] = res & 0xFF
    state.vf = 1 if res > 0xFF else 0

# --- SUB Vx, Vy ---
def decode_sub(opcode: int) -> Operation:
    return _decode_xy(opcode, "SUB")

# @intent:responsibility Vx := Vx - Vy。ボローが発生しなかった場合（Vx >= Vy）にVF=1。
def execute_sub(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    v1, v2 = state.v[op.x], state.v[op.y]
    state.v[op.x] = (v1 - v2) & 0xFF
    state.vf = 1 if v1 >= v2 else 0

# --- SHR Vx ---
def decode_shr(opcode: int) -> Operation:
    return _decode_xy(opcode, "SHR")

# @intent:responsibility Vxを1bit右シフトし、シフト前の最下位bitをVFに格納します。Vyは参照しません。
def execute_shr(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    v1 = state.v[op.x]
    state.v[op.x] = v1 >> 1
    state.vf = v1 & 0x01

# --- SUBN Vx, Vy ---
def decode_subn(opcode: int) -> Operation:
    return _decode_xy(opcode, "SUBN")

# @intent:responsibility Vx := Vy - Vx。ボローが発生しなかった場合（Vy >= Vx）にVF=1。
def execute_subn(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    v1, v2 = state.v[op.x], state.v[op.y]
    state.v[op.x] = (v2 - v1) & 0xFF
    state.vf = 1 if v2 >= v1 else 0

# --- SHL Vx ---
def decode_shl(opcode: int) -> Operation:
    return _decode_xy(opcode, "SHL")

# @intent:responsibility Vxを1bit左シフトし、シフト前の最上位bitをVFに格納します。
def execute_shl(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    v1 = state.v[op.x]
    state.v[op.x] = (v1 << 1) & 0xFF
    state.vf = 1 if v1 & 0x80 else 0

# --- ADD I, Vx ---
def decode_add_i(opcode: int) -> Operation:
    return make_operation(opcode, "ADD", ["I", reg((opcode >> 8) & 0xF)])

def execute_add_i(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    state.i = (state.i + state.v[op.x]) & 0xFFFF

# --- RND Vx, nn ---
def decode_rnd(opcode: int) -> Operation:
    return make_operation(opcode, "RND", [reg((opcode >> 8) & 0xF), imm(opcode & 0xFF)])

# @intent:responsibility 一様乱数の1バイトとnnの論理積をVxに格納します。
def execute_rnd(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    state.v[op.x] = state.rng.randrange(0x100) & op.nn
