"""
Logo Canvas
The widget that shows the logo inside the main window.
"""
from __future__ import annotations

from PySide6.QtGui import QPaintEvent, QPalette
from PySide6.QtWidgets import QSizePolicy, QWidget

from spherelogo.view.renderer import BACKGROUND, draw_logo, painting


class LogoCanvas(QWidget):
    """Repaints the whole logo for its current size on every paint event."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setAutoFillBackground(True)
        palette = self.palette()
        palette.setColor(QPalette.Window, BACKGROUND)
        self.setPalette(palette)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

    def paintEvent(self, event: QPaintEvent, /) -> None:
        with painting(self) as painter:
            draw_logo(painter, self.width(), self.height())
