"""
Logo Renderer
=============
Draws the complete sphere logo onto any QPainter.

The same routine serves the window (painter opened on the widget inside
paintEvent) and the export (painter opened on an offscreen QImage), so both
always show identical pixels for the same canvas size.

Drawing order matters: later steps occlude earlier ones.
    1. black background
    2. gradient sphere
    3. orbiting nodes
    4. connection ring
    5. latitude / longitude grid
    6. keyhole
    7. title
    8. captions
"""
from __future__ import annotations

from contextlib import contextmanager
import logging
from typing import Iterator

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import (
    QBrush, QColor, QFont, QFontMetricsF, QImage, QLinearGradient, QPaintDevice,
    QPainter, QPen, QPolygonF, QTextOption
)

from spherelogo.model.geometry import LogoLayout, Point, Rect, TITLE_TEXT

logger = logging.getLogger(__name__)

# Colors
BACKGROUND = QColor(0, 0, 0)
SPHERE_LIGHT = QColor(30, 144, 255)
SPHERE_DARK = QColor(0, 0, 139)
NODE_COLOR = QColor(255, 165, 0)
CONNECTION_COLOR = QColor(173, 216, 230)
GRID_COLOR = QColor(0, 0, 0)
KEYHOLE_COLOR = QColor(0, 0, 0)
TEXT_COLOR = QColor(255, 255, 255)

# Strokes
CONNECTION_WIDTH = 2
GRID_WIDTH = 2

# Fonts
FONT_FAMILY = "Arial"
TITLE_POINT_SIZE = 24
CAPTION_POINT_SIZE = 12


def _rectf(rect: Rect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.width, rect.height)


def _pointf(point: Point) -> QPointF:
    return QPointF(point.x, point.y)


def _bold_font(point_size: int) -> QFont:
    font = QFont(FONT_FAMILY, point_size)
    font.setBold(True)
    return font


@contextmanager
def painting(device: QPaintDevice) -> Iterator[QPainter]:
    """Opens a QPainter on `device` and always ends it on exit."""
    painter = QPainter()
    if not painter.begin(device):
        raise RuntimeError("Could not start painting on the target device.")
    try:
        yield painter
    finally:
        painter.end()


def draw_logo(painter: QPainter, width: int, height: int) -> None:
    """
    Renders the logo onto `painter` for a canvas of `width` x `height` pixels.

    A canvas smaller than 1x1 draws nothing.
    """
    layout = LogoLayout.for_canvas(width, height)
    if layout.is_degenerate:
        logger.debug(f"Skipping render for degenerate canvas {width}x{height}")
        return

    painter.save()
    try:
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.setRenderHint(QPainter.TextAntialiasing, True)

        _draw_background(painter, layout)
        _draw_sphere(painter, layout)
        _draw_nodes(painter, layout)
        _draw_connections(painter, layout)
        _draw_grid(painter, layout)
        _draw_keyhole(painter, layout)
        _draw_title(painter, layout)
        _draw_captions(painter, layout)
    finally:
        painter.restore()


def render_image(width: int, height: int) -> QImage:
    """Renders the logo into a new offscreen image of the given size (at least 1x1)."""
    width = max(1, int(width))
    height = max(1, int(height))

    image = QImage(width, height, QImage.Format_ARGB32)
    image.fill(BACKGROUND)
    with painting(image) as painter:
        draw_logo(painter, width, height)
    return image


@contextmanager
def rendered_logo(width: int, height: int) -> Iterator[QImage]:
    """
    Scoped offscreen render: the image's pixel buffer is dropped on exit,
    including when the body raises.
    """
    image = render_image(width, height)
    try:
        yield image
    finally:
        image.swap(QImage())


# --- pipeline steps ---

def _draw_background(painter: QPainter, layout: LogoLayout) -> None:
    painter.fillRect(QRectF(0, 0, layout.width, layout.height), BACKGROUND)


def _draw_sphere(painter: QPainter, layout: LogoLayout) -> None:
    bounds = layout.sphere
    # Corner to corner across the bounding box
    gradient = QLinearGradient(_pointf(bounds.top_left), _pointf(bounds.bottom_right))
    gradient.setColorAt(0.0, SPHERE_LIGHT)
    gradient.setColorAt(1.0, SPHERE_DARK)

    painter.setPen(Qt.NoPen)
    painter.setBrush(QBrush(gradient))
    painter.drawEllipse(_rectf(bounds))


def _draw_nodes(painter: QPainter, layout: LogoLayout) -> None:
    painter.setPen(Qt.NoPen)
    painter.setBrush(QBrush(NODE_COLOR))
    for node in layout.nodes:
        painter.drawEllipse(_rectf(node))


def _draw_connections(painter: QPainter, layout: LogoLayout) -> None:
    painter.setPen(QPen(CONNECTION_COLOR, CONNECTION_WIDTH))
    painter.setBrush(Qt.NoBrush)
    for start, end in layout.connections:
        painter.drawLine(_pointf(start), _pointf(end))


def _draw_grid(painter: QPainter, layout: LogoLayout) -> None:
    painter.setPen(QPen(GRID_COLOR, GRID_WIDTH))
    painter.setBrush(Qt.NoBrush)
    for ellipse in (*layout.latitudes, *layout.longitudes):
        if ellipse.bounds.is_empty:
            continue
        painter.drawEllipse(_rectf(ellipse.bounds))


def _draw_keyhole(painter: QPainter, layout: LogoLayout) -> None:
    painter.setPen(Qt.NoPen)
    painter.setBrush(QBrush(KEYHOLE_COLOR))
    painter.drawEllipse(_rectf(layout.keyhole_circle))
    painter.drawPolygon(QPolygonF([_pointf(p) for p in layout.keyhole_stem]))


def _draw_title(painter: QPainter, layout: LogoLayout) -> None:
    font = _bold_font(TITLE_POINT_SIZE)
    metrics = QFontMetricsF(font, painter.device())
    text_width = metrics.horizontalAdvance(TITLE_TEXT)
    origin = layout.title_origin(text_width)

    painter.setFont(font)
    painter.setPen(TEXT_COLOR)
    # origin is the top of the text; drawText at a point expects the baseline
    painter.drawText(QPointF(origin.x, origin.y + metrics.ascent()), TITLE_TEXT)


def _draw_captions(painter: QPainter, layout: LogoLayout) -> None:
    painter.setFont(_bold_font(CAPTION_POINT_SIZE))
    painter.setPen(TEXT_COLOR)
    option = QTextOption(Qt.AlignLeft | Qt.AlignTop)
    option.setWrapMode(QTextOption.WordWrap)
    for text, box in layout.captions:
        painter.drawText(_rectf(box), text, option)
