"""
共通の型定義と定数を提供するモジュール。
プロジェクト全体で使用される型エイリアスやマシン定数を定義します。
"""
from typing import AbstractSet, List, NamedTuple

# @intent:constant CHIP-8 マシンの固定パラメータ。
MEMORY_SIZE = 4096
PROGRAM_START = 0x200
FONT_START = 0x050
FONT_HEIGHT = 5
DISPLAY_WIDTH = 64
DISPLAY_HEIGHT = 32
KEY_COUNT = 16
V_COUNT = 16
V_CARRY_FLAG = 0xF
TIMER_TICKS_PER_SEC = 60.0

# @intent:data_structure 押下中キー（0x0-0xF）の集合。
KeySet = AbstractSet[int]

# @intent:data_structure 単一のレジスタの表示定義。UIが動的にフィールドを生成するために使用される。
class RegisterInfo(NamedTuple):
    name: str
    width: int  # ビット幅 (8 or 16)

# @intent:data_structure レジスタグループの表示定義。関連するレジスタ（例: "General", "Pointers"）をまとめる。
class RegisterLayoutInfo(NamedTuple):
    group_name: str
    registers: List[RegisterInfo]
