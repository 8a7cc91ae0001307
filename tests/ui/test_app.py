# tests/ui/test_app.py
"""
コマンドラインエントリポイントの検証（ウィンドウを起動しない経路のみ）。
"""
import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from retro_chip8.ui.app import main

def test_disassemble_listing(tmp_path, capsys):
    rom = tmp_path / "prog.ch8"
    rom.write_bytes(bytes([0x00, 0xE0, 0xA2, 0x2A, 0x12, 0x04]))
    assert main([str(rom), "--disassemble"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "0200: 00E0  CLS",
        "0202: A22A  LD I, $22A",
        "0204: 1204  JP $204",
    ]

def test_missing_rom(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ch8")]) == 1
    assert "Error:" in capsys.readouterr().err

def test_oversized_rom(tmp_path, capsys):
    rom = tmp_path / "big.ch8"
    rom.write_bytes(b"\x00" * 4096)
    assert main([str(rom)]) == 1
    assert "exceeds available memory" in capsys.readouterr().err

def test_invalid_config(tmp_path):
    rom = tmp_path / "prog.ch8"
    rom.write_bytes(b"\x12\x00")
    config = tmp_path / "bad.yaml"
    config.write_text("keymap: {A: 99}")
    assert main([str(rom), "--config", str(config)]) == 1

def test_config_section_of_wrong_type(tmp_path, capsys):
    rom = tmp_path / "prog.ch8"
    rom.write_bytes(b"\x12\x00")
    config = tmp_path / "bad.yaml"
    config.write_text("window: 5")
    assert main([str(rom), "--config", str(config)]) == 1
    assert "window must be a mapping" in capsys.readouterr().err
