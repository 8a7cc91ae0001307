import os
import sys
import unittest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QSize
from PySide6.QtGui import QColor

from retro_chip8.ui.display_view import DisplayView, render_frame

def blank_grid():
    return [[False] * 64 for _ in range(32)]

class TestDisplayView(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        if not QApplication.instance():
            cls.app = QApplication(sys.argv)
        else:
            cls.app = QApplication.instance()

    def test_render_frame(self):
        grid = blank_grid()
        grid[0][0] = True
        grid[31][63] = True
        image = render_frame(grid, "#FFFFFF", "#000000")
        self.assertEqual((image.width(), image.height()), (64, 32))
        self.assertEqual(image.pixelColor(0, 0), QColor("#FFFFFF"))
        self.assertEqual(image.pixelColor(63, 31), QColor("#FFFFFF"))
        self.assertEqual(image.pixelColor(1, 0), QColor("#000000"))

    def test_size_hint_uses_scale(self):
        view = DisplayView(scale=4)
        self.assertEqual(view.sizeHint(), QSize(256, 128))

    def test_set_frame_keeps_copy(self):
        view = DisplayView()
        grid = blank_grid()
        grid[2][3] = True
        view.set_frame(grid)
        grid[2][3] = False
        self.assertTrue(view.frame()[2][3])
        self.assertEqual(view.image().pixelColor(3, 2), QColor("#FFFFFF"))

if __name__ == '__main__':
    unittest.main()
