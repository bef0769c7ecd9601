import numpy as np  # type: ignore
import pytest

from src.neon_snake.config import Config, RIGHT
from src.neon_snake.game import GameState, Phase
from src.neon_snake.session import Session


class FakeFrames:
    """Synthetic request_frame/cancel_frame pair; tests fire frames by hand."""

    def __init__(self):
        self.pending = None
        self.requests = 0

    def request_frame(self, callback):
        self.requests += 1
        self.pending = callback
        return self.requests

    def cancel_frame(self, handle):
        if handle == self.requests:
            self.pending = None

    def fire(self, now):
        callback, self.pending = self.pending, None
        assert callback is not None, "no frame was requested"
        callback(now)


@pytest.fixture
def cfg():
    return Config(seed=1234)


@pytest.fixture
def session(cfg):
    return Session(cfg, rng=np.random.default_rng(cfg.seed))


@pytest.fixture
def frames():
    return FakeFrames()


def running_state(snake, direction=RIGHT, food=(0, 0), speed=6.0):
    return GameState(
        snake=list(snake),
        direction=direction,
        pending=direction,
        food=food,
        speed=speed,
        phase=Phase.RUNNING,
    )
