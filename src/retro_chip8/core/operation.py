# retro_chip8/core/operation.py
"""
デコード済み命令の不変データ構造。
"""
from dataclasses import dataclass, field
from typing import List

# @intent:responsibility フェッチされた命令語とそのデコード結果を記録します。
@dataclass(frozen=True)
class Operation:
    """
    命令語（16bit）から切り出したニブル/オペランドと、表示用のニーモニックを保持するデータクラス。
    """
    opcode: int                # 例: 0x6A05
    mnemonic: str              # 例: "LD"
    operands: List[str] = field(default_factory=list)  # 例: ["VA", "#05"]
    x: int = 0                 # 第2ニブル
    y: int = 0                 # 第3ニブル
    n: int = 0                 # 下位4bit
    nn: int = 0                # 下位8bit
    nnn: int = 0               # 下位12bit

    @property
    def opcode_hex(self) -> str:
        return f"{self.opcode:04X}"

    # @intent:responsibility "LD VA, #05" 形式の文字列を返します。
    def text(self) -> str:
        if self.operands:
            return f"{self.mnemonic} " + ", ".join(self.operands)
        return self.mnemonic
