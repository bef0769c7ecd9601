import pytest

from src.neon_snake.config import CFG, Config


def test_defaults():
    assert CFG.grid_size == 24
    assert CFG.start_length == 3
    assert CFG.base_speed == 6.0
    assert CFG.speed_step == 0.45
    assert CFG.max_speed == 16.0
    assert CFG.cells == 576


@pytest.mark.parametrize("field", ["grid_size", "start_length", "base_speed", "speed_step", "max_speed"])
def test_non_positive_values_rejected(field):
    with pytest.raises(ValueError):
        Config(**{field: 0})


def test_start_length_must_fit():
    Config(grid_size=4, start_length=3)
    with pytest.raises(ValueError):
        Config(grid_size=4, start_length=4)


def test_base_speed_above_max_rejected():
    with pytest.raises(ValueError):
        Config(base_speed=20.0, max_speed=16.0)
