"""
表示命令（画面クリア、スプライト描画）の実装。
"""
from retro_chip8.common.types import DISPLAY_WIDTH, DISPLAY_HEIGHT
from retro_chip8.core.operation import Operation
from retro_chip8.core.state import Chip8CpuState
from retro_chip8.transport.memory import Memory
from .base import make_operation, reg

# --- CLS ---
def decode_cls(opcode: int) -> Operation:
    return make_operation(opcode, "CLS")

def execute_cls(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    state.display = [False] * (DISPLAY_WIDTH * DISPLAY_HEIGHT)
    state.display_modified = True

# --- DRW Vx, Vy, n ---
def decode_drw(opcode: int) -> Operation:
    return make_operation(opcode, "DRW", [reg((opcode >> 8) & 0xF), reg((opcode >> 4) & 0xF), str(opcode & 0xF)])

# @intent:responsibility Iから読み出したn行のスプライトを (Vx, Vy) にXOR描画します。
# @intent:rationale 描画開始座標のみ画面サイズで折り返し、はみ出したピクセルは折り返さずに切り捨てます。
#                  点灯中のピクセルを反転した場合にVF=1とし、描画中はクリアしません。
def execute_drw(state: Chip8CpuState, memory: Memory, op: Operation) -> None:
    origin_x = state.v[op.x] % DISPLAY_WIDTH
    origin_y = state.v[op.y] % DISPLAY_HEIGHT

    state.vf = 0
    for row in range(op.n):
        y = origin_y + row
        if y >= DISPLAY_HEIGHT:
            break
        sprite = memory.read(state.i + row)
        for col in range(8):
            x = origin_x + col
            if x >= DISPLAY_WIDTH:
                break
            if (sprite >> (7 - col)) & 1:
                index = x + DISPLAY_WIDTH * y
                if state.display[index]:
                    state.vf = 1
                state.display[index] = not state.display[index]

    state.display_modified = True
