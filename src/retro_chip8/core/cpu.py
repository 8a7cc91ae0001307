# retro_chip8/core/cpu.py
"""
Core Layer (CHIP-8 CPU)

このモジュールは、CHIP-8仮想マシンの状態管理と命令サイクルの駆動を提供します。
具体的な命令の振る舞いはInstruction Layerに移譲されます。
"""
import random
import time
from typing import BinaryIO, Callable, Dict, Iterable, List, Optional, Tuple

from retro_chip8.common.errors import RomTooLargeError
from retro_chip8.common.types import (
    MEMORY_SIZE, PROGRAM_START, DISPLAY_WIDTH, DISPLAY_HEIGHT, KEY_COUNT, V_COUNT,
    TIMER_TICKS_PER_SEC, RegisterLayoutInfo, RegisterInfo
)
from retro_chip8.core.operation import Operation
from retro_chip8.core.state import Chip8CpuState
from retro_chip8.instructions import decode_opcode, execute_instruction
from retro_chip8.transport.memory import Memory
from retro_chip8 import disassembler

TIMER_PERIOD = 1.0 / TIMER_TICKS_PER_SEC

# @intent:responsibility CHIP-8 CPUのエミュレーションロジック（タイマー、フェッチ、デコード、実行）を提供します。
class Chip8Cpu:
    """
    CHIP-8仮想マシン。プログラムイメージから一度だけ構築され、
    ホストから cycle() と set_keys() が逐次呼び出されることで状態が進みます。
    """
    # @intent:responsibility メモリにフォントとプログラムを配置し、レジスタ類を初期化します。
    # @intent:pre-condition `rom` はバイナリ読み込み可能なストリームであり、内容は 0x200-0xFFF に収まる必要があります。
    def __init__(self, rom: BinaryIO, clock: Callable[[], float] = time.monotonic,
                 rng: Optional[random.Random] = None):
        image = rom.read()
        capacity = MEMORY_SIZE - PROGRAM_START
        if len(image) > capacity:
            raise RomTooLargeError(len(image), capacity)

        self._memory = Memory()
        self._memory.load_data(PROGRAM_START, image)
        self._program_size = len(image)

        self._state = Chip8CpuState()
        if rng is not None:
            self._state.rng = rng
        self._clock = clock
        self._prev_timer_time = clock()
        self._cycle_count = 0

    # @intent:responsibility CPUを1命令分進めます。
    # @intent:flow タイマー更新(条件付き) -> フェッチ(PC+2) -> デコード -> 実行 の順序で処理を行います。
    def cycle(self) -> None:
        """
        1命令を実行し、前回のタイマー更新から1/60秒以上経過していればタイマーを1だけ減らします。
        取りこぼした周期の追い付きは行いません。
        """
        now = self._clock()
        if now - self._prev_timer_time >= TIMER_PERIOD:
            self._prev_timer_time = now
            self._process_timers()

        opcode = self._fetch()
        operation = self._decode(opcode)
        self._execute(operation)
        self._cycle_count += 1

    # @intent:responsibility 遅延タイマーとサウンドタイマーを0で飽和させながら1減らします。
    def _process_timers(self) -> None:
        s = self._state
        s.delay_timer = max(s.delay_timer - 1, 0)
        s.sound_timer = max(s.sound_timer - 1, 0)

    # @intent:responsibility PCから2バイトの命令語を読み込み、PCを次の命令へ進めます。
    def _fetch(self) -> int:
        opcode = self._memory.read_word(self._state.pc)
        self._state.pc = (self._state.pc + 2) & 0xFFFF
        return opcode

    def _decode(self, opcode: int) -> Operation:
        return decode_opcode(opcode)

    # @intent:responsibility Operationを実行します。未知の命令は診断を出力して読み飛ばします。
    def _execute(self, operation: Operation) -> None:
        if not execute_instruction(operation, self._state, self._memory):
            print(f"unsupported opcode 0x{operation.opcode:04X}")

    # @intent:responsibility 押下中キーの集合でキー状態を丸ごと置き換えます。
    def set_keys(self, keys: Iterable[int]) -> None:
        """
        前回のスナップショットは保持しません。0-15 以外の値は無視されます。
        """
        pressed = [False] * KEY_COUNT
        for key in keys:
            if 0 <= key < KEY_COUNT:
                pressed[key] = True
        self._state.pressed_keys = pressed

    # @intent:responsibility 64x32の表示バッファを行優先のコピーとして返し、更新フラグをクリアします。
    def display(self) -> List[List[bool]]:
        pixels = self._state.display
        self._state.display_modified = False
        return [pixels[row * DISPLAY_WIDTH:(row + 1) * DISPLAY_WIDTH] for row in range(DISPLAY_HEIGHT)]

    # @intent:responsibility 前回の display() 以降に表示が更新されたかを返します。
    @property
    def display_modified(self) -> bool:
        return self._state.display_modified

    # @intent:responsibility サウンドタイマーが0でない間Trueを返します。
    def beep(self) -> bool:
        return self._state.sound_timer > 0

    def get_state(self) -> Chip8CpuState:
        """
        現在のCPUの状態を返します（コピーではありません）。
        """
        return self._state

    def get_memory(self) -> Memory:
        return self._memory

    @property
    def cycle_count(self) -> int:
        return self._cycle_count

    @property
    def program_size(self) -> int:
        return self._program_size

    # @intent:responsibility UI表示用に、現在のレジスタ値を辞書形式で提供します。
    def get_register_map(self) -> Dict[str, int]:
        s = self._state
        registers = {"PC": s.pc, "I": s.i, "SP": len(s.stack), "DT": s.delay_timer, "ST": s.sound_timer}
        for index in range(V_COUNT):
            registers[f"V{index:X}"] = s.v[index]
        return registers

    # @intent:responsibility UIのレジスタ表示レイアウト（グループ化）を定義します。
    def get_register_layout(self) -> List[RegisterLayoutInfo]:
        return [
            RegisterLayoutInfo("General", [RegisterInfo(f"V{index:X}", 8) for index in range(V_COUNT)]),
            RegisterLayoutInfo("Pointers", [
                RegisterInfo("PC", 16), RegisterInfo("I", 16), RegisterInfo("SP", 8)
            ]),
            RegisterLayoutInfo("Timers", [RegisterInfo("DT", 8), RegisterInfo("ST", 8)]),
        ]

    # @intent:responsibility 指定範囲のメモリを逆アセンブルします。
    def disassemble(self, start_addr: int, length: int) -> List[Tuple[int, str, str]]:
        return disassembler.disassemble(self._memory, start_addr, length)
