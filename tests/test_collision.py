import math

import pytest

from car import ThiefCar
from collision import collision_radius, find_collisions, half_diagonal
from physics import vec2
from police import PoliceCar


def _thief(width=30, height=40):
    return ThiefCar(position=(0.0, 0.0), width=width, height=height)


def _police(x, y, width=30, height=40):
    return PoliceCar(position=vec2(x, y), width=width, height=height)


def test_half_diagonal():
    assert half_diagonal(30, 40) == 25.0
    assert half_diagonal(50, 100) == pytest.approx(math.hypot(50, 100) / 2)


def test_collision_radius_sums_half_diagonals():
    assert collision_radius(_thief(), _police(0, 0)) == 50.0
    assert collision_radius(_thief(width=60, height=80), _police(0, 0)) == 75.0


def test_exact_boundary_does_not_collide():
    # 25 + 25 == distance of 50.
    assert find_collisions(_thief(), [_police(30, 40)]) == []


def test_just_inside_boundary_collides():
    assert len(find_collisions(_thief(), [_police(30, 39.999)])) == 1
    assert len(find_collisions(_thief(), [_police(-30, -39.999)])) == 1


def test_mixed_sizes_use_both_half_diagonals():
    thief = _thief(width=60, height=80)  # 50
    inside = _police(0, 74.9)            # 25
    outside = _police(0, 75.1)

    assert find_collisions(thief, [inside, outside]) == [inside]


def test_find_collisions_returns_every_hit_in_order():
    near_a = _police(10, 0)
    far = _police(500, 0)
    near_b = _police(0, -20)

    hits = find_collisions(_thief(), [near_a, far, near_b])

    assert hits == [near_a, near_b]
    assert hits[0] is near_a


def test_find_collisions_empty():
    assert find_collisions(_thief(), []) == []
