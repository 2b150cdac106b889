"""
Application Constants
=====================
This module serves as the central registry for the fixed settings of the
window and of the image export.

Nothing here is read from the environment or from disk: the logo and the
window are fixed by design, so every value is a plain module constant.

Exports:
    APP_NAME (str): Window title and QApplication name.
    WINDOW_SIZE (tuple[int, int]): Initial window size in pixels.
    SAVE_DIALOG_FILTERS (str): Qt name filter string for the save dialog.
"""
from typing import Tuple

APP_NAME: str = "Sphere Logo Generator"

# Window
WINDOW_SIZE: Tuple[int, int] = (800, 800)
BACKGROUND_COLOR: str = "black"

# Save control, docked at the bottom edge
SAVE_BUTTON_TEXT: str = "Save Logo"
SAVE_BUTTON_HEIGHT: int = 40
SAVE_BUTTON_STYLE: str = "background-color: lightgray;"

# Save dialog
SAVE_DIALOG_TITLE: str = "Save the Logo"
PNG_FILTER: str = "PNG Image (*.png)"
JPEG_FILTER: str = "JPEG Image (*.jpg)"
SAVE_DIALOG_FILTERS: str = f"{PNG_FILTER};;{JPEG_FILTER}"
DEFAULT_FILE_NAME: str = "logo.png"

# Messages
SUCCESS_TITLE: str = "Success"
SUCCESS_MESSAGE: str = "Logo saved successfully!"
ERROR_TITLE: str = "Save Failed"

# Encoder
JPEG_QUALITY: int = 95
