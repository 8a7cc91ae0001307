import yaml
from typing import Dict, Any

from retro_chip8.common.types import KEY_COUNT
from .models import MachineConfig, WindowConfig, AudioConfig, DEFAULT_KEYMAP

KNOWN_SECTIONS = ("cycles_per_sec", "frames_per_sec", "window", "audio", "keymap")

class ConfigLoader:
    def load_from_file(self, path: str) -> MachineConfig:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        return self._parse_config(data or {})

    def load_from_string(self, text: str) -> MachineConfig:
        return self._parse_config(yaml.safe_load(text) or {})

    def _parse_config(self, data: Dict[str, Any]) -> MachineConfig:
        data = self._require_mapping(data, "config document")
        for key in data:
            if key not in KNOWN_SECTIONS:
                print(f"Warning: Unknown config key '{key}' ignored")

        cycles_per_sec = self._parse_positive(data.get("cycles_per_sec", 600), "cycles_per_sec")
        frames_per_sec = self._parse_positive(data.get("frames_per_sec", 60), "frames_per_sec")

        window_data = self._require_mapping(data.get("window"), "window")
        window = WindowConfig(
            scale=self._parse_positive(window_data.get("scale", 10), "window.scale"),
            foreground=str(window_data.get("foreground", "#FFFFFF")),
            background=str(window_data.get("background", "#000000")),
            title=str(window_data.get("title", "Chip-8")),
        )

        audio_data = self._require_mapping(data.get("audio"), "audio")
        audio = AudioConfig(
            enabled=bool(audio_data.get("enabled", True)),
            tone_hz=self._parse_positive(audio_data.get("tone_hz", 512), "audio.tone_hz"),
            volume=float(audio_data.get("volume", 0.25)),
        )
        if not 0.0 <= audio.volume <= 1.0:
            raise ValueError(f"audio.volume must be between 0.0 and 1.0: {audio.volume}")

        # Parse Keymap (指定がなければ既定の配置)
        keymap_data = data.get("keymap")
        if keymap_data is None:
            keymap = dict(DEFAULT_KEYMAP)
        else:
            keymap = {}
            for host_key, value in self._require_mapping(keymap_data, "keymap").items():
                chip8_key = self._parse_int(value)
                if not 0 <= chip8_key < KEY_COUNT:
                    raise ValueError(f"Keymap value for '{host_key}' out of range 0x0-0xF: {value}")
                keymap[str(host_key).upper()] = chip8_key

        return MachineConfig(
            cycles_per_sec=cycles_per_sec,
            frames_per_sec=frames_per_sec,
            window=window,
            audio=audio,
            keymap=keymap,
        )

    # @intent:responsibility セクションがマッピングであることを検証します。未指定(None)は空として扱います。
    def _require_mapping(self, value: Any, name: str) -> Dict[str, Any]:
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValueError(f"{name} must be a mapping: {value}")
        return value

    def _parse_positive(self, value: Any, name: str) -> int:
        result = self._parse_int(value)
        if result <= 0:
            raise ValueError(f"{name} must be a positive integer: {value}")
        return result

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.lower().startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")
