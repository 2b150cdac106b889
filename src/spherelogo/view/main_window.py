"""
Main Application Window
=======================
The single window of the application: the logo canvas fills the whole client
area and the "Save Logo" button is docked over its bottom edge.

Why is this file needed?
------------------------
1. Layout: The canvas is the central widget, so the logo is drawn for the full
   client size, including the strip behind the button.
2. Routing: It connects the save button to the SaveCoordinator, passing the
   client size so the exported image matches what is on screen.
"""
from typing import Optional

from PySide6.QtCore import QSize
from PySide6.QtWidgets import QMainWindow, QPushButton, QVBoxLayout

from spherelogo.config import (
    APP_NAME, BACKGROUND_COLOR, SAVE_BUTTON_HEIGHT, SAVE_BUTTON_STYLE,
    SAVE_BUTTON_TEXT, WINDOW_SIZE
)
from spherelogo.controller.save import SaveCoordinator
from spherelogo.view.canvas import LogoCanvas


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(APP_NAME)
        self.resize(*WINDOW_SIZE)
        self.setStyleSheet(f"QMainWindow {{ background-color: {BACKGROUND_COLOR}; }}")

        # --- 1. LOGO (whole client area) ---
        self.canvas = LogoCanvas()
        self.setCentralWidget(self.canvas)

        # --- 2. SAVE CONTROL (docked over the bottom edge of the canvas) ---
        overlay = QVBoxLayout(self.canvas)
        overlay.setContentsMargins(0, 0, 0, 0)
        overlay.setSpacing(0)
        overlay.addStretch(1)

        self.btn_save = QPushButton(SAVE_BUTTON_TEXT)
        self.btn_save.setFixedHeight(SAVE_BUTTON_HEIGHT)
        self.btn_save.setStyleSheet(SAVE_BUTTON_STYLE)
        overlay.addWidget(self.btn_save)

        self.save_coordinator = SaveCoordinator(self)

        # --- SIGNAL CONNECTIONS ---
        self.btn_save.clicked.connect(self.on_save_clicked)

    def client_size(self) -> QSize:
        """Size of the area the logo is drawn on."""
        return self.centralWidget().size()

    def on_save_clicked(self) -> Optional[str]:
        """Slot for the save button. Returns the written path, if any."""
        return self.save_coordinator.save(self.client_size())
