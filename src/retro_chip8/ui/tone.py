"""
ビープ音の生成と再生。

サウンドタイマーが0でない間、正弦波のトーンをループ再生します。
"""
import math
import os
import tempfile
import wave
from array import array
from typing import Optional

from PySide6.QtCore import QUrl
from PySide6.QtMultimedia import QSoundEffect

SAMPLE_RATE = 44100

# @intent:responsibility 指定周波数の正弦波を16bitモノラルWAVとして書き出します。
# @intent:rationale ループ再生時の継ぎ目を避けるため、周期の整数倍になるサンプル数に切り詰めます。
def write_sine_wave(path: str, frequency: int, volume: float = 0.25,
                    sample_rate: int = SAMPLE_RATE, duration: float = 1.0) -> int:
    periods = max(1, int(frequency * duration))
    sample_count = int(round(periods * sample_rate / frequency))
    amplitude = int(32767 * volume)
    samples = array("h", (
        int(amplitude * math.sin(2 * math.pi * frequency * n / sample_rate))
        for n in range(sample_count)
    ))
    with wave.open(path, "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(sample_rate)
        wav.writeframes(samples.tobytes())
    return sample_count

# @intent:responsibility beep() の値に応じてトーンの再生/停止を切り替えます。
class ToneGenerator:
    """
    状態が変化したときだけ play()/stop() を呼び出します。
    """
    def __init__(self, tone_hz: int = 512, volume: float = 0.25, parent=None,
                 effect: Optional[QSoundEffect] = None):
        self._active = False
        self._wav_path: Optional[str] = None
        if effect is None:
            fd, self._wav_path = tempfile.mkstemp(prefix="retro_chip8_", suffix=".wav")
            os.close(fd)
            write_sine_wave(self._wav_path, tone_hz, volume)
            effect = QSoundEffect(parent)
            effect.setSource(QUrl.fromLocalFile(self._wav_path))
            effect.setLoopCount(QSoundEffect.Loop.Infinite.value)
        self._effect = effect

    @property
    def is_active(self) -> bool:
        return self._active

    def set_active(self, active: bool) -> None:
        if active == self._active:
            return
        self._active = active
        if active:
            self._effect.play()
        else:
            self._effect.stop()

    # @intent:responsibility 再生を止め、生成した一時WAVファイルを削除します。
    def close(self) -> None:
        self.set_active(False)
        if self._wav_path and os.path.exists(self._wav_path):
            os.remove(self._wav_path)
        self._wav_path = None
