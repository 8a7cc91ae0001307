# retro_chip8/transport/memory.py
"""
Transport Layer (メインメモリ)

このモジュールは、CHIP-8の4KiBアドレス空間を保持し、
フォントテーブルとプログラムイメージの初期配置、および読み書きアクセスの責務を負います。
"""
from typing import Iterable

from retro_chip8.common.types import MEMORY_SIZE, PROGRAM_START, FONT_START

# @intent:constant 16進数字グリフ 0-F のスプライトデータ（各5バイト）。
FONTS = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])

ADDRESS_MASK = MEMORY_SIZE - 1

# @intent:responsibility CHIP-8のメインメモリ（4096バイト）を提供します。
# @intent:rationale 0x000-0x1FFはインタプリタ予約領域です。実行中の書き込みはROMと同様に無視し、
#                  初期化時のみ load_data バックドア経由で書き込みます。
class Memory:
    """
    フォントテーブルを配置済みの4KiBメモリ。
    アドレスは12ビットにマスクされ、配列境界を越えることはありません。
    """
    def __init__(self):
        self._memory = bytearray(MEMORY_SIZE)
        self.load_data(FONT_START, FONTS)

    # @intent:responsibility 指定されたアドレスから8bitのデータを読み出します。
    def read(self, address: int) -> int:
        return self._memory[address & ADDRESS_MASK]

    # @intent:responsibility 指定されたアドレスに8bitのデータを書き込みます。
    # @intent:pre-condition データは8bit値である必要があります。
    def write(self, address: int, data: int) -> None:
        if not 0 <= data <= 0xFF:
            raise ValueError(f"Data {data} is not an 8-bit value.")
        address &= ADDRESS_MASK
        if address < PROGRAM_START:
            # Intentional: reserved interpreter area is read-only at run time.
            return
        self._memory[address] = data

    # @intent:responsibility メモリ内容を初期化するためのバックドアメソッドです。
    def load_data(self, address: int, data: Iterable[int]) -> None:
        """
        予約領域を含む任意の位置へバイト列を配置します。通常の命令実行経路では使用しません。
        """
        data = bytes(data)
        end = address + len(data)
        if not 0 <= address <= end <= MEMORY_SIZE:
            raise IndexError(f"Block {address:#06x}-{end:#06x} out of bounds for memory of size {MEMORY_SIZE}.")
        self._memory[address:end] = data

    # @intent:responsibility 16ビットの命令語をビッグエンディアンで読み込みます。
    def read_word(self, address: int) -> int:
        return (self.read(address) << 8) | self.read(address + 1)

    # @intent:responsibility メモリ全体のコピーを返します（インスペクタ用）。
    def dump(self) -> bytes:
        return bytes(self._memory)

    def get_size(self) -> int:
        return MEMORY_SIZE
