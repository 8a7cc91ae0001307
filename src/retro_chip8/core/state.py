# retro_chip8/core/state.py
"""
Core Layer (CPU状態)

このモジュールは、CHIP-8仮想マシンのレジスタ群、タイマー、表示バッファ、
キー状態を保持するデータ構造を定義します。
"""
import random
from dataclasses import dataclass, field
from typing import List

from retro_chip8.common.types import (
    PROGRAM_START, V_COUNT, V_CARRY_FLAG, DISPLAY_WIDTH, DISPLAY_HEIGHT, KEY_COUNT
)

# @intent:responsibility CHIP-8 CPUの全状態を保持します。
# @intent:rationale VFは汎用レジスタであると同時にキャリー/ボロー/衝突フラグでもあります。
#                  実機の仕様どおり、フラグを別フィールドに分離せず v[0xF] をそのまま使います。
@dataclass
class Chip8CpuState:
    """
    CHIP-8 CPUのレジスタ状態を保持するデータクラス。
    """
    pc: int = PROGRAM_START  # Program Counter (16bit)
    i: int = 0x0000          # Index Register (16bit)
    v: List[int] = field(default_factory=lambda: [0] * V_COUNT)
    stack: List[int] = field(default_factory=list)
    delay_timer: int = 0
    sound_timer: int = 0
    display: List[bool] = field(default_factory=lambda: [False] * (DISPLAY_WIDTH * DISPLAY_HEIGHT))
    display_modified: bool = False
    pressed_keys: List[bool] = field(default_factory=lambda: [False] * KEY_COUNT)
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    @property
    def vf(self) -> int:
        return self.v[V_CARRY_FLAG]

    @vf.setter
    def vf(self, value: int) -> None:
        self.v[V_CARRY_FLAG] = value & 0xFF

    # @intent:responsibility 表示バッファ上の1ピクセルを返します。
    def pixel(self, x: int, y: int) -> bool:
        return self.display[x + DISPLAY_WIDTH * y]
