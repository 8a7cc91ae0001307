# src/retro_chip8/ui/app.py
"""
アプリケーションのエントリポイント。
ROMを読み込んでCPUを構築し、メインウィンドウを起動します。
"""
import argparse
import sys
from typing import List, Optional

import yaml
from PySide6.QtWidgets import QApplication

from retro_chip8.common.errors import RomTooLargeError
from retro_chip8.common.types import PROGRAM_START
from retro_chip8.config.loader import ConfigLoader
from retro_chip8.config.models import MachineConfig
from retro_chip8.loader.loader import RomLoader
from .main_window import Chip8Window

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="retro-chip8", description="CHIP-8 virtual machine")
    parser.add_argument("rom", help="path to a raw CHIP-8 program image")
    parser.add_argument("--config", help="YAML machine configuration")
    parser.add_argument("--disassemble", action="store_true",
                        help="print a listing of the program image and exit")
    return parser

# @intent:responsibility 引数を解釈し、逆アセンブル出力またはウィンドウを起動します。
# @intent:rationale 構築時の致命的エラー（読み込み失敗、サイズ超過、不正な設定）はここで捕捉し、終了コード1で終了します。
def main(argv: Optional[List[str]] = None) -> int:
    """
    アプリケーションのメイン関数。
    """
    args = _build_parser().parse_args(argv)

    try:
        config = ConfigLoader().load_from_file(args.config) if args.config else MachineConfig()
        cpu = RomLoader().load_file(args.rom)
    except (OSError, RomTooLargeError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.disassemble:
        for address, word, text in cpu.disassemble(PROGRAM_START, cpu.program_size):
            print(f"{address:04X}: {word}  {text}")
        return 0

    app = QApplication.instance() or QApplication(sys.argv[:1])
    window = Chip8Window(cpu, config)
    window.show()
    window.start()
    return app.exec()

if __name__ == '__main__':
    sys.exit(main())
