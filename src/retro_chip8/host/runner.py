# retro_chip8/host/runner.py
"""
ホストループのサイクル配分。

壁時計の経過時間に比例した回数だけ cycle() を呼び出し、
CPU内部の60Hzタイマーゲートと組み合わせて実時間の進行を再現します。
"""
import math
import time
from typing import Callable

from retro_chip8.core.cpu import Chip8Cpu

# @intent:responsibility 前回呼び出しからの経過時間に応じたサイクル数を実行します。
class CycleRunner:
    def __init__(self, cpu: Chip8Cpu, cycles_per_sec: int = 600,
                 clock: Callable[[], float] = time.monotonic):
        if cycles_per_sec <= 0:
            raise ValueError("cycles_per_sec must be a positive integer.")
        self._cpu = cpu
        self._cycles_per_sec = cycles_per_sec
        self._clock = clock
        self._last_run = clock()

    # @intent:responsibility 経過時間から算出したサイクル数を計算します（0.5は切り上げ）。
    def pending_cycles(self, elapsed: float) -> int:
        if elapsed <= 0:
            return 0
        return int(math.floor(self._cycles_per_sec * elapsed + 0.5))

    # @intent:responsibility 溜まったサイクルを実行し、実行したサイクル数を返します。
    # @intent:rationale 基準時刻は実行前に取得します。実行に要した時間は次回の経過時間に含まれます。
    def run_pending(self) -> int:
        now = self._clock()
        count = self.pending_cycles(now - self._last_run)
        self._last_run = now
        for _ in range(count):
            self._cpu.cycle()
        return count
