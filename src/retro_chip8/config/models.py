from dataclasses import dataclass, field
from typing import Dict

# @intent:constant 原典のキーパッド配置 (1234/QWER/ASDF/ZXCV -> 123C/456D/789E/A0BF)。
DEFAULT_KEYMAP: Dict[str, int] = {
    "1": 0x1, "2": 0x2, "3": 0x3, "4": 0xC,
    "Q": 0x4, "W": 0x5, "E": 0x6, "R": 0xD,
    "A": 0x7, "S": 0x8, "D": 0x9, "F": 0xE,
    "Z": 0xA, "X": 0x0, "C": 0xB, "V": 0xF,
}

@dataclass
class WindowConfig:
    scale: int = 10
    foreground: str = "#FFFFFF"
    background: str = "#000000"
    title: str = "Chip-8"

@dataclass
class AudioConfig:
    enabled: bool = True
    tone_hz: int = 512
    volume: float = 0.25

@dataclass
class MachineConfig:
    cycles_per_sec: int = 600
    frames_per_sec: int = 60
    window: WindowConfig = field(default_factory=WindowConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)
    keymap: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_KEYMAP))
