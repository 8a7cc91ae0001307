"""
ホスト側キー名からCHIP-8キー（0x0-0xF）への変換。
"""
from typing import Iterable, Mapping

from retro_chip8.common.types import KeySet

# @intent:responsibility 押下中のホストキー名の集合をCHIP-8キーの集合に変換します。
# @intent:rationale キー名は大文字小文字を区別しません。キーマップにないキーは捨てます。
def translate_keys(host_keys: Iterable[str], keymap: Mapping[str, int]) -> KeySet:
    pressed = set()
    for name in host_keys:
        key = keymap.get(name.upper())
        if key is not None:
            pressed.add(key)
    return pressed
