# retro_chip8/loader/loader.py
"""
ROMローダーモジュール。
生のCHIP-8プログラムイメージ（.ch8）を読み込み、CPUを構築します。
"""
import random
import time
from typing import Callable, Optional

from retro_chip8.core.cpu import Chip8Cpu

class RomLoader:
    """
    ファイルパスからプログラムイメージを開き、Chip8Cpuを生成するローダー。
    ファイル形式の検証は行わず、サイズ超過のみCPU側で致命的エラーとなります。
    """
    def load_file(self, file_path: str, clock: Callable[[], float] = time.monotonic,
                  rng: Optional[random.Random] = None) -> Chip8Cpu:
        with open(file_path, 'rb') as f:
            return Chip8Cpu(f, clock=clock, rng=rng)
