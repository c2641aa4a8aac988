import pytest

from settings import CAMERA_SMOOTH_FACTOR, ChaseConfig


def test_defaults_come_from_module_constants():
    config = ChaseConfig()

    assert config.camera_smooth_factor == CAMERA_SMOOTH_FACTOR
    assert config.viewport == (1280, 720)


@pytest.mark.parametrize("factor", [0.0, 1.0, -0.5, 2.0])
def test_rejects_bad_smooth_factor(factor):
    with pytest.raises(ValueError, match="camera_smooth_factor"):
        ChaseConfig(camera_smooth_factor=factor)


@pytest.mark.parametrize(
    "field", ["thief_speed", "police_speed", "spawn_distance", "cull_distance", "spawn_interval_ms", "car_width"]
)
def test_rejects_non_positive_values(field):
    with pytest.raises(ValueError, match=field):
        ChaseConfig(**{field: 0})


def test_rejects_negative_turn_rate():
    with pytest.raises(ValueError):
        ChaseConfig(thief_turn_rate=-1)
