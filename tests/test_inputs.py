import pytest

from src.neon_snake.config import UP, LEFT
from src.neon_snake.game import Phase
from src.neon_snake.inputs import InputQueue


def test_commands_apply_in_order(session):
    queue = InputQueue()
    queue.push_start()
    queue.push_pause()
    queue.push_direction(UP)
    assert queue.drain_into(session) == 3
    assert session.phase is Phase.RUNNING
    assert session.state.pending == UP
    assert queue.pop() is None


def test_full_queue_drops_oldest(session):
    queue = InputQueue(capacity=2)
    queue.push_pause()
    queue.push_direction(UP)
    queue.push_direction(LEFT)
    assert len(queue) == 2
    assert queue.pop() == ("direction", UP)


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        InputQueue(capacity=0)


def test_queued_start_does_not_reset_a_running_game(session):
    queue = InputQueue()
    queue.push_direction(UP)   # starts the game
    queue.push_start()         # overlay press from the same frame
    queue.drain_into(session)
    assert session.phase is Phase.RUNNING
    assert session.state.pending == UP
    assert session.state.snake == [(12, 12), (11, 12), (10, 12)]


def test_queued_start_restarts_after_game_over(session):
    session.start()
    session.state.snake = [(23, 12), (22, 12), (21, 12)]
    session.tick()
    assert session.phase is Phase.GAME_OVER
    queue = InputQueue()
    queue.push_start()
    queue.drain_into(session)
    assert session.phase is Phase.NOT_STARTED
    assert session.state.snake == [(12, 12), (11, 12), (10, 12)]
