"""
転送命令（レジスタ、インデックス、タイマー、メモリ）の実装。
"""
from retro_chip8.common.types import FONT_START, FONT_HEIGHT
from retro_chip8.core.operation import Operation
from retro_chip8.core.state import Chip8CpuState
from retro_chip8.transport.memory import Memory
from .base import make_operation, reg, imm, addr

# --- LD Vx, nn ---
def decode_ld_imm(opcode: int) -> Operation:
    return make_operation(opcode, "LD", [reg((opcode >> 8) & 0xF), imm(opcode & 0xFF)])

def execute_ld_imm(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    state.v[op.x] = op.nn

# --- LD Vx, Vy ---
def decode_ld_reg(opcode: int) -> Operation:
    return make_operation(opcode, "LD", [reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF)])

def execute_ld_reg(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    state.v[op.x] = state.v[op.y]

# --- LD I, nnn ---
def decode_ld_i(opcode: int) -> Operation:
    return make_operation(opcode, "LD", ["I", addr(opcode & 0xFFF)])

def execute_ld_i(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    state.i = op.nnn

# --- Timers ---
def decode_ld_vx_dt(opcode: int) -> Operation:
    return make_operation(opcode, "LD", [reg((opcode >> 8) & 0xF), "DT"])

def execute_ld_vx_dt(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    state.v[op.x] = state.delay_timer

def decode_ld_dt_vx(opcode: int) -> Operation:
    return make_operation(opcode, "LD", ["DT", reg((opcode >> 8) & 0xF)])

def execute_ld_dt_vx(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    state.delay_timer = state.v[op.x]

def decode_ld_st_vx(opcode: int) -> Operation:
    return make_operation(opcode, "LD", ["ST", reg((opcode >> 8) & 0xF)])

def execute_ld_st_vx(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    state.sound_timer = state.v[op.x]

# --- LD F, Vx ---
def decode_ld_font(opcode: int) -> Operation:
    return make_operation(opcode, "LD", ["F", reg((opcode >> 8) & 0xF)])

# @intent:responsibility Iを、Vxの下位4bitが示す16進数字グリフの先頭アドレスに設定します。
def execute_ld_font(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    state.i = FONT_START + FONT_HEIGHT * (state.v[op.x] & 0x0F)

# --- LD B, Vx ---
def decode_ld_bcd(opcode: int) -> Operation:
    return make_operation(opcode, "LD", ["B", reg((opcode >> 8) & 0xF)])

# @intent:responsibility Vxの10進表現（百の位、十の位、一の位）をI, I+1, I+2 に書き込みます。
def execute_ld_bcd(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    value = state.v[op.x]
    memory.write(state.i, value // 100 % 10)
    memory.write(state.i + 1, value // 10 % 10)
    memory.write(state.i + 2, value % 10)

# --- LD [I], Vx / LD Vx, [I] ---
def decode_store_regs(opcode: int) -> Operation:
    return make_operation(opcode, "LD", ["[I]", reg((opcode >> 8) & 0xF)])

# @intent:responsibility V0..Vx をIから順にメモリへ書き込みます。Iは変更しません。
def execute_store_regs(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    for index in range(op.x + 1):
        memory.write(state.i + index, state.v[index])

def decode_load_regs(opcode: int) -> Operation:
    return make_operation(opcode, "LD", [reg((opcode >> 8) & 0xF), "[I]"])

# @intent:responsibility Iから順にメモリを読み出して V0..Vx に格納します。Iは変更しません。
def execute_load_regs(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    for index in range(op.x + 1):
        state.v[index] = memory.read(state.i + index)
