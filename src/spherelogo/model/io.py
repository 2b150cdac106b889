"""
Image Export
Encodes a rendered logo and writes it to disk as PNG or JPEG.
"""
import logging
import os
from enum import Enum
from typing import Optional

from PySide6.QtGui import QImage

from spherelogo.config import JPEG_FILTER, JPEG_QUALITY, PNG_FILTER

# Get module logger
logger = logging.getLogger(__name__)


class ExportError(OSError):
    """Raised when a logo image could not be encoded or written."""


class ExportFormat(Enum):
    PNG = "PNG"
    JPEG = "JPEG"

    @property
    def extension(self) -> str:
        return ".png" if self is ExportFormat.PNG else ".jpg"


def format_for_path(path: str) -> ExportFormat:
    """PNG for paths ending in '.png', JPEG for anything else."""
    if path.lower().endswith(".png"):
        return ExportFormat.PNG
    return ExportFormat.JPEG


def ensure_extension(path: str, selected_filter: Optional[str] = None) -> str:
    """
    Appends the extension of the chosen dialog filter when the file name has none.

    A name that already carries a suffix is returned untouched, whatever the filter.
    """
    if not path or os.path.splitext(path)[1]:
        return path
    if selected_filter == JPEG_FILTER:
        return path + ExportFormat.JPEG.extension
    if selected_filter == PNG_FILTER:
        return path + ExportFormat.PNG.extension
    return path


class ImageExporter:

    @staticmethod
    def save_image(image: QImage, filepath: str) -> ExportFormat:
        """
        Writes `image` to `filepath` in the format implied by its extension.

        Raises:
            ExportError: The image is empty, or Qt failed to encode or write it.
        """
        fmt = format_for_path(filepath)
        logger.info(f"Saving logo as {fmt.value} to: {filepath}")

        if image.isNull():
            raise ExportError(f"Nothing to save: the rendered image is empty ({filepath})")

        directory = os.path.dirname(os.path.abspath(filepath))
        if not os.path.isdir(directory):
            raise ExportError(f"Directory does not exist: {directory}")

        quality = JPEG_QUALITY if fmt is ExportFormat.JPEG else -1
        if not image.save(filepath, fmt.value, quality):
            logger.error(f"Qt could not write {fmt.value} image to: {filepath}")
            raise ExportError(f"Could not write image file: {filepath}")

        logger.info(f"Logo saved to: {filepath}")
        return fmt
