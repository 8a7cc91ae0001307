"""
CHIP-8命令セット実装パッケージ。
"""
from retro_chip8.core.operation import Operation
from retro_chip8.core.state import Chip8CpuState
from retro_chip8.transport.memory import Memory
from .maps import DECODE_MAP, EXECUTE_MAP

UNKNOWN_MNEMONIC = "UNKNOWN"

# @intent:responsibility 命令語からオペランド部分を取り除き、マップ検索用のパターンを返します。
# @intent:rationale 先頭ニブルで命令ファミリを選び、0/5/8/9/E/F ファミリのみ下位ニブル（またはバイト）で細分化します。
def pattern_key(opcode: int) -> int:
    family = opcode & 0xF000
    if family == 0x0000:
        return opcode
    if family in (0x5000, 0x8000, 0x9000):
        return opcode & 0xF00F
    if family in (0xE000, 0xF000):
        return opcode & 0xF0FF
    return family

# @intent:responsibility CHIP-8の命令語をデコードします。
def decode_opcode(opcode: int) -> Operation:
    """
    命令語をデコードし、Operationオブジェクトを返します。
    未知のパターンは UNKNOWN として返し、例外は送出しません。
    """
    decoder = DECODE_MAP.get(pattern_key(opcode))
    if decoder:
        return decoder(opcode)
    return Operation(opcode, UNKNOWN_MNEMONIC, [f"${opcode:04X}"])

# @intent:responsibility デコードされた命令を実行します。
# @intent:return 実行関数が見つかった場合はTrue、未知の命令の場合はFalse。
def execute_instruction(operation: Operation, state: Chip8CpuState, memory: Memory) -> bool:
    """
    デコードされた命令を実行し、CPUの状態を変更します。
    """
    executor = EXECUTE_MAP.get(pattern_key(operation.opcode))
    if executor:
        executor(state, memory, operation)
        return True
    return False
