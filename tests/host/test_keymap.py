from retro_chip8.config.models import DEFAULT_KEYMAP
from retro_chip8.host.keymap import translate_keys

class TestKeymap:
    def test_default_layout(self):
        assert translate_keys({"1", "4", "q", "V", "X"}, DEFAULT_KEYMAP) == {0x1, 0xC, 0x4, 0xF, 0x0}

    def test_unknown_keys_dropped(self):
        assert translate_keys({"Space", "P"}, DEFAULT_KEYMAP) == set()
