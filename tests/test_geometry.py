import math

import pytest

from spherelogo.model.geometry import (
    CAPTIONS, LogoLayout, ORBIT_RADIUS, Point, Rect, canvas_center, connection_segments,
    grid_extent, grid_offsets, keyhole_circle, keyhole_trapezoid, latitude_ellipses,
    longitude_ellipses, node_rects, ring_point, ring_points, sphere_rect, title_origin
)

CENTER = Point(400, 400)


def test_canvas_center_is_integer_half():
    assert canvas_center(800, 800) == Point(400, 400)
    assert canvas_center(801, 763) == Point(400, 381)
    assert canvas_center(0, 0) == Point(0, 0)


def test_sphere_bounding_box_for_800():
    rect = sphere_rect(canvas_center(800, 800))
    assert rect.top_left == Point(200, 200)
    assert rect.bottom_right == Point(600, 600)


def test_ring_points_lie_on_orbit():
    points = ring_points(CENTER)
    assert len(points) == 8
    for i, p in enumerate(points):
        angle = i * math.pi / 4
        # Truncation to whole pixels moves a point by less than one pixel per axis
        assert abs(p.x - (CENTER.x + ORBIT_RADIUS * math.cos(angle))) < 1.0
        assert abs(p.y - (CENTER.y + ORBIT_RADIUS * math.sin(angle))) < 1.0
        assert p.distance_to(CENTER) == pytest.approx(ORBIT_RADIUS, abs=1.5)


def test_ring_slot_index_wraps_around():
    assert ring_point(CENTER, 8) == ring_point(CENTER, 0)
    assert ring_point(CENTER, 11) == ring_points(CENTER)[3]


def test_cardinal_ring_points_are_exact():
    points = ring_points(CENTER)
    assert points[0] == Point(700, 400)
    assert points[2] == Point(400, 700)
    assert points[4] == Point(100, 400)
    assert points[6] == Point(400, 100)


def test_diagonal_ring_points_truncate_toward_zero():
    points = ring_points(CENTER)
    assert points[1] == Point(612, 612)
    assert points[3] == Point(188, 612)
    assert points[5] == Point(188, 188)
    assert points[7] == Point(612, 188)


def test_node_boxes_for_800():
    nodes = node_rects(CENTER)
    assert nodes[0] == Rect(680, 380, 40, 40)
    assert nodes[2] == Rect(380, 680, 40, 40)
    for node, point in zip(nodes, ring_points(CENTER)):
        assert node.center == point


def test_connections_close_the_ring():
    segments = connection_segments(CENTER)
    points = ring_points(CENTER)
    assert len(segments) == 8
    for i, (start, end) in enumerate(segments):
        assert start == points[i]
        assert end == points[(i + 1) % 8]


def test_grid_offsets():
    assert list(grid_offsets()) == [-160, -120, -80, -40, 0, 40, 80, 120, 160]


@pytest.mark.parametrize("factory", [latitude_ellipses, longitude_ellipses])
def test_grid_ellipses_are_symmetric(factory):
    ellipses = factory(CENTER)
    assert len(ellipses) == 9
    by_offset = {e.offset: e.extent for e in ellipses}
    for offset, extent in by_offset.items():
        assert by_offset[-offset] == pytest.approx(extent)
    assert by_offset[0.0] == pytest.approx(400)
    assert by_offset[160.0] == pytest.approx(80)


def test_latitude_ellipse_bounds():
    top = latitude_ellipses(CENTER)[0]
    assert top.offset == -160
    assert top.bounds == Rect(200, 200, 400, 80)


def test_longitude_ellipse_bounds():
    right = longitude_ellipses(CENTER)[-1]
    assert right.offset == 160
    assert right.bounds == Rect(520, 200, 80, 400)


def test_degenerate_grid_ellipses_are_skipped():
    assert grid_extent(200) == 0
    assert grid_extent(-250) < 0
    # A zero radius collapses every ellipse
    assert latitude_ellipses(CENTER, radius=0) == []


def test_keyhole_shapes():
    assert keyhole_circle(CENTER) == Rect(370, 340, 60, 60)
    assert keyhole_trapezoid(CENTER) == [
        Point(386, 370), Point(414, 370), Point(427, 460), Point(373, 460)
    ]


def test_title_is_centered_on_measured_width():
    assert title_origin(CENTER, 180) == Point(310, 255)
    assert title_origin(CENTER, 0) == Point(400, 255)


def test_captions_keep_literal_offsets():
    layout = LogoLayout.for_canvas(800, 800)
    assert [text for text, _ in layout.captions] == [c[0] for c in CAPTIONS]
    boxes = [box for _, box in layout.captions]
    assert boxes[0] == Rect(279, 475, 400, 100)
    assert boxes[1] == Rect(244, 505, 400, 100)
    assert boxes[2] == Rect(340, 535, 400, 100)


def test_layout_is_deterministic():
    assert LogoLayout.for_canvas(640, 480) == LogoLayout.for_canvas(640, 480)


@pytest.mark.parametrize("size, degenerate", [((0, 0), True), ((0, 10), True), ((1, 1), False)])
def test_layout_degenerate_flag(size, degenerate):
    assert LogoLayout.for_canvas(*size).is_degenerate is degenerate
