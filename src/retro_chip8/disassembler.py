"""
CHIP-8 Disassembler

メモリ上のバイナリデータを解析し、CHIP-8のアセンブリ表記（ニーモニック）に変換します。
Instruction Layerのデコードロジックを再利用します。デコードは状態を変更しません。
"""
from typing import List, Tuple

from retro_chip8.common.types import MEMORY_SIZE
from retro_chip8.instructions import decode_opcode
from retro_chip8.transport.memory import Memory

# @intent:responsibility 指定されたメモリ範囲を逆アセンブルし、表示用データを生成します。
def disassemble(memory: Memory, start_addr: int, length: int) -> List[Tuple[int, str, str]]:
    """
    指定された範囲のメモリを2バイト単位で逆アセンブルします。

    Returns:
        List of (address, hex_word, mnemonic) tuples.
    """
    result = []
    end_addr = min(start_addr + length, MEMORY_SIZE)
    # 末尾の1バイトだけ余る場合は命令語を構成できないので含めない
    for current_addr in range(start_addr, end_addr - 1, 2):
        operation = decode_opcode(memory.read_word(current_addr))
        result.append((current_addr, operation.opcode_hex, operation.text()))
    return result
