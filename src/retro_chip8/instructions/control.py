"""
制御命令（ジャンプ、サブルーチン、条件スキップ、キー入力）の実装。
"""
from retro_chip8.common.errors import StackUnderflowError
from retro_chip8.common.types import KEY_COUNT
from retro_chip8.core.operation import Operation
from retro_chip8.core.state import Chip8CpuState
from retro_chip8.transport.memory import Memory
from .base import make_operation, reg, imm, addr, skip_next

# --- RET ---
def decode_ret(opcode: int) -> Operation:
    return make_operation(opcode, "RET")

# @intent:responsibility スタックから戻りアドレスをポップしてPCに設定します。
# @intent:pre-condition スタックが空であってはなりません。空の場合は致命的エラーです。
def execute_ret(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    if not state.stack:
        # state.pc は既に次の命令を指している
        raise StackUnderflowError((state.pc - 2) & 0xFFFF)
    state.pc = state.stack.pop()

# --- JP ---
def decode_jp(opcode: int) -> Operation:
    return make_operation(opcode, "JP", [addr(opcode & 0xFFF)])

def execute_jp(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    state.pc = op.nnn

# --- CALL ---
def decode_call(opcode: int) -> Operation:
    return make_operation(opcode, "CALL", [addr(opcode & 0xFFF)])

# @intent:responsibility 戻りアドレス（次の命令）をプッシュしてからジャンプします。
def execute_call(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    # state.pc はCPU側のフェッチで既に次の命令を指している
    state.stack.append(state.pc)
    state.pc = op.nnn

# --- SE / SNE (immediate) ---
def decode_se_imm(opcode: int) -> Operation:
    return make_operation(opcode, "SE", [reg((opcode >> 8) & 0xF), imm(opcode & 0xFF)])

def execute_se_imm(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    if state.v[op.x] == op.nn:
        skip_next(state)

def decode_sne_imm(opcode: int) -> Operation:
    return make_operation(opcode, "SNE", [reg((opcode >> 8) & 0xF), imm(opcode & 0xFF)])

def execute_sne_imm(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    if state.v[op.x] != op.nn:
        skip_next(state)

# --- SE / SNE (register) ---
def decode_se_reg(opcode: int) -> Operation:
    return make_operation(opcode, "SE", [reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF)])

def execute_se_reg(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    if state.v[op.x] == state.v[op.y]:
        skip_next(state)

def decode_sne_reg(opcode: int) -> Operation:
    return make_operation(opcode, "SNE", [reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF)])

def execute_sne_reg(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    if state.v[op.x] != state.v[op.y]:
        skip_next(state)

# --- JP V0, nnn ---
def decode_jp_v0(opcode: int) -> Operation:
    return make_operation(opcode, "JP", ["V0", addr(opcode & 0xFFF)])

def execute_jp_v0(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    state.pc = (op.nnn + state.v[0]) & 0xFFFF

# --- SKP / SKNP ---
# @intent:utility_function Vxの値に対応するキーが押下されているかを返します。範囲外の値は未押下扱いです。
def _is_pressed(state: Chip8CpuState, key: int) -> bool:
    return key < KEY_COUNT and state.pressed_keys[key]

def decode_skp(opcode: int) -> Operation:
    return make_operation(opcode, "SKP", [reg((opcode >> 8) & 0xF)])

def execute_skp(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    if _is_pressed(state, state.v[op.x]):
        skip_next(state)

def decode_sknp(opcode: int) -> Operation:
    return make_operation(opcode, "SKNP", [reg((opcode >> 8) & 0xF)])

def execute_sknp(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    if not _is_pressed(state, state.v[op.x]):
        skip_next(state)

# --- LD Vx, K ---
def decode_ld_key(opcode: int) -> Operation:
    return make_operation(opcode, "LD", [reg((opcode >> 8) & 0xF), "K"])

# @intent:responsibility キー押下を待ちます。
# @intent:rationale 実スレッドのブロックではなく、PCを2戻して同じ命令を次サイクルで再実行させます。
def execute_ld_key(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    for key, pressed in enumerate(state.pressed_keys):
        if pressed:
            state.v[op.x] = key
            return
    state.pc = (state.pc - 2) & 0xFFFF
