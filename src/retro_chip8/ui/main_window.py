# src/retro_chip8/ui/main_window.py
"""
メインウィンドウの実装。
表示ビュー、キー入力、トーン再生を保持し、タイマーでCPUを駆動します。
"""
from typing import Optional, Set

from PySide6.QtWidgets import QMainWindow, QLabel, QMessageBox
from PySide6.QtCore import Qt, QTimer, Slot
from PySide6.QtGui import QCloseEvent, QKeyEvent, QKeySequence

from retro_chip8.common.errors import StackUnderflowError
from retro_chip8.config.models import MachineConfig
from retro_chip8.core.cpu import Chip8Cpu
from retro_chip8.host.keymap import translate_keys
from retro_chip8.host.runner import CycleRunner
from .display_view import DisplayView
from .tone import ToneGenerator

# @intent:responsibility CHIP-8マシンのホストウィンドウ。フレームごとにキー入力、サイクル実行、音、表示を更新します。
class Chip8Window(QMainWindow):
    """
    アプリケーションのメインウィンドウクラス。
    """
    def __init__(self, cpu: Chip8Cpu, config: MachineConfig,
                 tone: Optional[ToneGenerator] = None, runner: Optional[CycleRunner] = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle(config.window.title)
        self._cpu = cpu
        self._config = config
        self._runner = runner or CycleRunner(cpu, config.cycles_per_sec)
        self._pressed_host_keys: Set[str] = set()

        self.display_view = DisplayView(config.window.scale, config.window.foreground, config.window.background, self)
        self.setCentralWidget(self.display_view)
        self.status_label = QLabel(self)
        self.statusBar().addWidget(self.status_label)

        if tone is None and config.audio.enabled:
            tone = ToneGenerator(config.audio.tone_hz, config.audio.volume, parent=self)
        self._tone = tone

        self._timer = QTimer(self)
        self._timer.timeout.connect(self.tick)
        self._update_status()

    # @intent:responsibility フレームタイマーを開始します。
    def start(self) -> None:
        self._timer.start(max(1, round(1000 / self._config.frames_per_sec)))

    def stop(self) -> None:
        self._timer.stop()
        if self._tone:
            self._tone.set_active(False)

    def is_running(self) -> bool:
        return self._timer.isActive()

    # @intent:responsibility 1フレーム分の処理（キー反映 -> サイクル実行 -> 音 -> 表示）を行います。
    @Slot()
    def tick(self) -> None:
        self._cpu.set_keys(translate_keys(self._pressed_host_keys, self._config.keymap))
        try:
            self._runner.run_pending()
        except StackUnderflowError as e:
            self.stop()
            QMessageBox.critical(self, "Fatal Error", str(e))
            self.close()
            return

        if self._tone:
            self._tone.set_active(self._cpu.beep())
        if self._cpu.display_modified:
            self.display_view.set_frame(self._cpu.display())
        self._update_status()

    def press_host_key(self, name: str) -> None:
        self._pressed_host_keys.add(name.upper())

    def release_host_key(self, name: str) -> None:
        self._pressed_host_keys.discard(name.upper())

    def pressed_host_keys(self) -> Set[str]:
        return set(self._pressed_host_keys)

    def _update_status(self) -> None:
        regs = self._cpu.get_register_map()
        self.status_label.setText(
            f"PC={regs['PC']:04X} I={regs['I']:04X} DT={regs['DT']:02X} ST={regs['ST']:02X}"
        )

    def keyPressEvent(self, event: QKeyEvent):
        if event.key() == Qt.Key_Escape:
            self.close()
            return
        if event.isAutoRepeat():
            return
        self.press_host_key(QKeySequence(event.key()).toString())

    def keyReleaseEvent(self, event: QKeyEvent):
        if event.isAutoRepeat():
            return
        self.release_host_key(QKeySequence(event.key()).toString())

    def closeEvent(self, event: QCloseEvent):
        self.stop()
        if self._tone:
            self._tone.close()
        super().closeEvent(event)
