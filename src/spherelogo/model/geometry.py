"""
Logo Geometry
=============
Pure layout math for the sphere logo. Nothing in here touches Qt: every
function takes the canvas center (or size) and returns plain coordinates,
so the same numbers drive the on-screen paint and the offscreen export.

All shapes are described in the canvas coordinate system (x right, y down).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple
import math

import numpy as np

# Sphere
SPHERE_RADIUS = 200

# Orbiting nodes
ORBIT_RADIUS = 300
NODE_RADIUS = 20
NODE_COUNT = 8

# Latitude / longitude grid
GRID_STEPS = 4  # ellipses at -4..+4 steps -> 9 per axis
GRID_DIVISOR = 5.0

# Keyhole
KEYHOLE_CIRCLE_RADIUS = 30
KEYHOLE_CIRCLE_OFFSET = 60  # circle top above the center
KEYHOLE_WIDTH_TOP = 28
KEYHOLE_WIDTH_BOTTOM = 55
KEYHOLE_HEIGHT = 60
KEYHOLE_TOP_OFFSET = 30  # trapezoid top above the center

# Text
TITLE_TEXT = "S.P.H.E.R.E"
TITLE_OFFSET = 55  # below the top of the sphere
CAPTION_BOX_SIZE = (400, 100)

# (text, x offset from center, y offset from the bottom of the sphere)
# The offsets are hand-tuned so the lines look centered in the bold 12pt font.
CAPTIONS: Tuple[Tuple[str, int, int], ...] = (
    ("Secure Peer-to-Peer", -121, -125),
    ("Hosted Encryption Record", -156, -95),
    ("Exchange", -60, -65),
)


@dataclass(frozen=True)
class Point:
    """A point on the canvas."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box given by its top-left corner and size."""
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def top_left(self) -> Point:
        return Point(self.x, self.y)

    @property
    def bottom_right(self) -> Point:
        return Point(self.x + self.width, self.y + self.height)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0.0 or self.height <= 0.0


@dataclass(frozen=True)
class Ellipse:
    """
    One grid ellipse.

    offset is the signed distance of the ellipse center from the sphere center
    along the axis the grid is stacked on; bounds is the ellipse bounding box.
    """
    offset: float
    bounds: Rect

    @property
    def extent(self) -> float:
        """Size of the shrinking (minor) axis."""
        return min(self.bounds.width, self.bounds.height)


def canvas_center(width: int, height: int) -> Point:
    """Integer center of a canvas of the given pixel size."""
    return Point(int(width) // 2, int(height) // 2)


def sphere_rect(center: Point, radius: float = SPHERE_RADIUS) -> Rect:
    return Rect(center.x - radius, center.y - radius, radius * 2, radius * 2)


def ring_point(center: Point, index: int, radius: float = ORBIT_RADIUS, count: int = NODE_COUNT) -> Point:
    """
    Position of ring slot `index`, truncated to whole pixels.

    Truncation is toward zero on the offset, so slots mirrored around an axis
    stay mirrored.
    """
    angle = (index % count) * (2.0 * math.pi / count)
    dx = int(radius * math.cos(angle))
    dy = int(radius * math.sin(angle))
    return Point(center.x + dx, center.y + dy)


def ring_points(center: Point, radius: float = ORBIT_RADIUS, count: int = NODE_COUNT) -> List[Point]:
    return [ring_point(center, i, radius, count) for i in range(count)]


def node_rects(center: Point) -> List[Rect]:
    """Bounding boxes of the orbiting nodes."""
    size = NODE_RADIUS * 2
    return [
        Rect(p.x - NODE_RADIUS, p.y - NODE_RADIUS, size, size)
        for p in ring_points(center)
    ]


def connection_segments(center: Point) -> List[Tuple[Point, Point]]:
    """Segments joining each ring slot to the next one, closing the loop."""
    points = ring_points(center)
    return [(points[i], points[(i + 1) % len(points)]) for i in range(len(points))]


def grid_offsets(radius: float = SPHERE_RADIUS) -> np.ndarray:
    """Signed offsets of the grid ellipses from the sphere center."""
    steps = np.arange(-GRID_STEPS, GRID_STEPS + 1)
    return steps * (radius / GRID_DIVISOR)


def grid_extent(offset: float, radius: float = SPHERE_RADIUS) -> float:
    """Minor-axis size of the grid ellipse at `offset`."""
    return radius * 2 - abs(offset) * 2


def latitude_ellipses(center: Point, radius: float = SPHERE_RADIUS) -> List[Ellipse]:
    """Horizontal ellipses stacked along y. Degenerate ones are left out."""
    ellipses = []
    for offset in grid_offsets(radius):
        extent = grid_extent(offset, radius)
        if extent <= 0.0:
            continue
        bounds = Rect(center.x - radius, center.y + offset - extent / 2, radius * 2, extent)
        ellipses.append(Ellipse(float(offset), bounds))
    return ellipses


def longitude_ellipses(center: Point, radius: float = SPHERE_RADIUS) -> List[Ellipse]:
    """Vertical ellipses stacked along x. Degenerate ones are left out."""
    ellipses = []
    for offset in grid_offsets(radius):
        extent = grid_extent(offset, radius)
        if extent <= 0.0:
            continue
        bounds = Rect(center.x + offset - extent / 2, center.y - radius, extent, radius * 2)
        ellipses.append(Ellipse(float(offset), bounds))
    return ellipses


def keyhole_circle(center: Point) -> Rect:
    size = KEYHOLE_CIRCLE_RADIUS * 2
    return Rect(center.x - KEYHOLE_CIRCLE_RADIUS, center.y - KEYHOLE_CIRCLE_OFFSET, size, size)


def keyhole_trapezoid(center: Point) -> List[Point]:
    """Corners of the keyhole stem: top-left, top-right, bottom-right, bottom-left."""
    top = center.y - KEYHOLE_TOP_OFFSET
    bottom = center.y + KEYHOLE_HEIGHT
    # Integer half widths, as the stem was always laid out on whole pixels
    half_top = KEYHOLE_WIDTH_TOP // 2
    half_bottom = KEYHOLE_WIDTH_BOTTOM // 2
    return [
        Point(center.x - half_top, top),
        Point(center.x + half_top, top),
        Point(center.x + half_bottom, bottom),
        Point(center.x - half_bottom, bottom),
    ]


def title_origin(center: Point, text_width: float, radius: float = SPHERE_RADIUS) -> Point:
    """Top-left corner of the title, centered horizontally on its measured width."""
    return Point(center.x - text_width / 2, center.y - radius + TITLE_OFFSET)


def caption_boxes(center: Point, radius: float = SPHERE_RADIUS) -> List[Tuple[str, Rect]]:
    """Layout boxes of the caption lines, left-anchored at fixed offsets."""
    box_w, box_h = CAPTION_BOX_SIZE
    bottom = center.y + radius
    return [
        (text, Rect(center.x + dx, bottom + dy, box_w, box_h))
        for text, dx, dy in CAPTIONS
    ]


@dataclass(frozen=True)
class LogoLayout:
    """Every shape of the logo for one canvas size."""
    width: int
    height: int
    center: Point
    sphere: Rect
    nodes: List[Rect] = field(default_factory=list)
    connections: List[Tuple[Point, Point]] = field(default_factory=list)
    latitudes: List[Ellipse] = field(default_factory=list)
    longitudes: List[Ellipse] = field(default_factory=list)
    keyhole_circle: Rect = Rect(0, 0, 0, 0)
    keyhole_stem: List[Point] = field(default_factory=list)
    captions: List[Tuple[str, Rect]] = field(default_factory=list)

    @classmethod
    def for_canvas(cls, width: int, height: int) -> LogoLayout:
        center = canvas_center(width, height)
        return cls(
            width=int(width),
            height=int(height),
            center=center,
            sphere=sphere_rect(center),
            nodes=node_rects(center),
            connections=connection_segments(center),
            latitudes=latitude_ellipses(center),
            longitudes=longitude_ellipses(center),
            keyhole_circle=keyhole_circle(center),
            keyhole_stem=keyhole_trapezoid(center),
            captions=caption_boxes(center),
        )

    @property
    def is_degenerate(self) -> bool:
        return self.width < 1 or self.height < 1

    def title_origin(self, text_width: float) -> Point:
        return title_origin(self.center, text_width)
