import random

import pytest

from physics import vec2
from police import PoliceCar
from spawner import SPAWN_POLICE_EVENT, Spawner


def _spawner(fake_timer, **kwargs):
    return Spawner(rng=random.Random(3), set_timer=fake_timer, **kwargs)


def test_start_and_stop_drive_the_timer(fake_timer):
    spawner = _spawner(fake_timer, interval_ms=2000)

    spawner.start()
    spawner.start()
    spawner.stop()
    spawner.stop()

    assert fake_timer.calls == [(SPAWN_POLICE_EVENT, 2000), (SPAWN_POLICE_EVENT, 0)]
    assert not spawner.active


def test_spawn_refused_until_started_and_after_stop(fake_timer):
    spawner = _spawner(fake_timer)
    target = vec2(0, 0)

    assert spawner.spawn(target) is None

    spawner.start()
    assert isinstance(spawner.spawn(target), PoliceCar)

    spawner.stop()
    assert spawner.spawn(target) is None


def test_spawn_uses_configured_distance_and_speed(fake_timer):
    spawner = _spawner(fake_timer, spawn_distance=800, police_speed=7)
    spawner.start()

    car = spawner.spawn(vec2(100, 100), angle=0.0)

    assert car.position == vec2(900, 100)
    assert car.speed == 7


def test_cull_keeps_cars_at_or_inside_threshold(fake_timer):
    spawner = _spawner(fake_timer, cull_distance=1000)
    eps = 1e-6
    inside = PoliceCar(position=vec2(1000 - eps, 0))
    on_edge = PoliceCar(position=vec2(0, -1000))
    outside = PoliceCar(position=vec2(1000 + eps, 0))
    pursuers = [inside, outside, on_edge]

    kept = spawner.cull(pursuers, vec2(0, 0))

    assert kept == [inside, on_edge]
    assert pursuers == [inside, outside, on_edge]


def test_cull_removes_adjacent_far_cars(fake_timer):
    spawner = _spawner(fake_timer, cull_distance=100)
    far = [PoliceCar(position=vec2(500 + i, 0)) for i in range(3)]
    near = PoliceCar(position=vec2(10, 0))

    assert spawner.cull(far + [near], vec2(0, 0)) == [near]


def test_cull_empty(fake_timer):
    assert _spawner(fake_timer).cull([], vec2(0, 0)) == []


def test_rejects_non_positive_interval(fake_timer):
    with pytest.raises(ValueError):
        _spawner(fake_timer, interval_ms=0)
