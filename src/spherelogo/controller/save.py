"""
Save Coordinator
================
Runs one "Save Logo" request from start to finish.

Steps:
    1. Render the logo into an offscreen image of the requested size.
    2. Ask the user for a destination (PNG or JPEG).
    3. Encode and write the image, then confirm.

Cancelling the dialog writes nothing and reports nothing. A failed write is
shown to the user and aborts this attempt only.
"""
import logging
from typing import Optional

from PySide6.QtCore import QSize
from PySide6.QtWidgets import QFileDialog, QMessageBox, QWidget

from spherelogo.config import (
    DEFAULT_FILE_NAME, ERROR_TITLE, SAVE_DIALOG_FILTERS, SAVE_DIALOG_TITLE,
    SUCCESS_MESSAGE, SUCCESS_TITLE
)
from spherelogo.model.io import ExportError, ImageExporter, ensure_extension
from spherelogo.view.renderer import rendered_logo

logger = logging.getLogger(__name__)


class SaveCoordinator:
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        self.parent = parent

    def ask_destination(self) -> Optional[str]:
        """Shows the save dialog. Returns None when the user cancels."""
        fname, selected_filter = QFileDialog.getSaveFileName(
            self.parent, SAVE_DIALOG_TITLE, DEFAULT_FILE_NAME, SAVE_DIALOG_FILTERS
        )
        if not fname:
            return None
        return ensure_extension(fname, selected_filter)

    def save(self, size: QSize) -> Optional[str]:
        """
        Exports the logo at `size`.

        Returns the written path, or None if the user cancelled or the write failed.
        """
        logger.info(f"Save requested at {size.width()}x{size.height()}")
        with rendered_logo(size.width(), size.height()) as image:
            filepath = self.ask_destination()
            if filepath is None:
                logger.info("Save cancelled by user.")
                return None

            try:
                ImageExporter.save_image(image, filepath)
            except ExportError as e:
                logger.exception("Failed to save logo")
                QMessageBox.critical(self.parent, ERROR_TITLE, f"Could not save the logo:\n{e}")
                return None

        QMessageBox.information(self.parent, SUCCESS_TITLE, SUCCESS_MESSAGE)
        return filepath
