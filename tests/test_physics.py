import math

import pytest

from physics import body_rects, distances_from, get_forward_vector, rect_polygon, vec2


def test_distances_from_matches_scalar_distance():
    origin = vec2(1, 2)
    points = [vec2(4, 6), vec2(1, 2), vec2(-2, -2)]

    result = distances_from(origin, points)

    assert list(result) == [(p - origin).length() for p in points]
    assert list(result) == [5.0, 0.0, 5.0]


def test_distances_from_empty():
    assert distances_from(vec2(0, 0), []).shape == (0,)


@pytest.mark.parametrize("heading, expected", [(0, (0, -1)), (90, (1, 0)), (180, (0, 1)), (-90, (-1, 0))])
def test_forward_vector_screen_convention(heading, expected):
    forward = get_forward_vector(heading)

    assert forward.x == pytest.approx(expected[0], abs=1e-12)
    assert forward.y == pytest.approx(expected[1], abs=1e-12)


def test_body_rects_centre_body_and_offset_window():
    body, window = body_rects(50, 100, (10, 20), (30, 20))

    assert body == (-25, -50, 50, 100)
    assert window == (-15, -30, 30, 20)


def test_rect_polygon_rotates_clockwise_on_screen():
    poly = rect_polygon(vec2(100, 100), (-5, -10, 10, 20), math.pi / 2)

    # The top edge (local -y) ends up on the right.
    top_mid = (poly[0] + poly[1]) / 2
    assert top_mid.x == pytest.approx(110)
    assert top_mid.y == pytest.approx(100)
