"""
Display View モジュール。

CHIP-8の64x32モノクロ表示バッファをQImageに変換し、拡大して描画します。
"""
from typing import List, Optional

from PySide6.QtWidgets import QWidget
from PySide6.QtCore import Qt, QSize
from PySide6.QtGui import QColor, QImage, QPainter

from retro_chip8.common.types import DISPLAY_WIDTH, DISPLAY_HEIGHT

# @intent:responsibility 表示バッファ（行のリスト）から64x32のQImageを生成します。
def render_frame(grid: List[List[bool]], foreground: str = "#FFFFFF", background: str = "#000000") -> QImage:
    image = QImage(DISPLAY_WIDTH, DISPLAY_HEIGHT, QImage.Format_RGB32)
    image.fill(QColor(background))
    fg = QColor(foreground)
    for y, row in enumerate(grid[:DISPLAY_HEIGHT]):
        for x, lit in enumerate(row[:DISPLAY_WIDTH]):
            if lit:
                image.setPixelColor(x, y, fg)
    return image

# @intent:responsibility 最新のフレームを整数倍に拡大して表示するウィジェット。
class DisplayView(QWidget):
    def __init__(self, scale: int = 10, foreground: str = "#FFFFFF", background: str = "#000000", parent=None):
        super().__init__(parent)
        self._scale = scale
        self._foreground = foreground
        self._background = background
        self._frame: List[List[bool]] = [[False] * DISPLAY_WIDTH for _ in range(DISPLAY_HEIGHT)]
        self._image: Optional[QImage] = render_frame(self._frame, foreground, background)
        self.setMinimumSize(DISPLAY_WIDTH, DISPLAY_HEIGHT)
        self.setFocusPolicy(Qt.NoFocus)

    def sizeHint(self) -> QSize:
        return QSize(DISPLAY_WIDTH * self._scale, DISPLAY_HEIGHT * self._scale)

    # @intent:responsibility 新しいフレームを受け取り、再描画を要求します。
    def set_frame(self, grid: List[List[bool]]) -> None:
        self._frame = [list(row) for row in grid]
        self._image = render_frame(self._frame, self._foreground, self._background)
        self.update()

    def frame(self) -> List[List[bool]]:
        return [list(row) for row in self._frame]

    def image(self) -> QImage:
        return self._image

    def paintEvent(self, event):
        painter = QPainter(self)
        # 最近傍補間のままドットを拡大する
        painter.setRenderHint(QPainter.SmoothPixmapTransform, False)
        painter.drawImage(self.rect(), self._image)
        painter.end()
