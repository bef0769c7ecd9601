# game.py
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Optional
import logging

import numpy as np  # type: ignore

from .config import Config, RIGHT, POINTS_PER_FOOD
from .grid import Cell, Direction, add, center, in_bounds

logger = logging.getLogger(__name__)


class Phase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class StepResult(Enum):
    MOVED = "moved"
    ATE = "ate"
    HIT_WALL = "hit_wall"
    HIT_SELF = "hit_self"
    BOARD_FULL = "board_full"


# ---------- Helpers ----------
def spawn_food(snake: List[Cell], grid_size: int, rng: np.random.Generator) -> Optional[Cell]:
    """
    Pick a uniformly random cell that is not covered by the snake.

    Rejection sampling while the board is mostly empty; once the snake
    covers half the grid, sample straight from the free cells instead.
    Returns None when the snake fills the whole board.
    """
    occupied = set(snake)
    total = grid_size * grid_size
    if len(occupied) >= total:
        return None

    if 2 * len(occupied) < total:
        while True:
            fx, fy = (int(v) for v in rng.integers(0, grid_size, size=2))
            if (fx, fy) not in occupied:
                return (fx, fy)

    free = np.ones((grid_size, grid_size), dtype=bool)
    xs, ys = zip(*occupied)
    free[list(xs), list(ys)] = False
    candidates = np.argwhere(free)  # rows of (x, y)
    fx, fy = candidates[rng.integers(len(candidates))]
    return (int(fx), int(fy))


def initial_snake(cfg: Config) -> List[Cell]:
    """Straight snake of cfg.start_length cells, head on the grid center, facing right."""
    cx, cy = center(cfg.grid_size)
    return [(cx - i, cy) for i in range(cfg.start_length)]


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    direction: Direction           # committed heading
    pending: Direction             # applied at the next step
    food: Optional[Cell]
    speed: float                   # steps per second
    score: int = 0
    phase: Phase = Phase.NOT_STARTED

    @property
    def head(self) -> Cell:
        return self.snake[0]


@dataclass(frozen=True)
class GameStateSnapshot:
    """Read-only view handed to renderers and other observers."""
    snake: Tuple[Cell, ...]
    food: Optional[Cell]
    score: int
    high_score: int
    phase: Phase
    speed: float
    direction: Direction
    grid_size: int


def new_game_state(cfg: Config, rng: np.random.Generator) -> GameState:
    snake = initial_snake(cfg)
    return GameState(
        snake=snake,
        direction=RIGHT,
        pending=RIGHT,
        food=spawn_food(snake, cfg.grid_size, rng),
        speed=cfg.base_speed,
    )


# ---------- Update ----------
def step_game(state: GameState, cfg: Config, rng: np.random.Generator) -> Optional[StepResult]:
    """
    Advance the snake by exactly one cell.

    Does nothing (returns None) unless the game is running. On a wall or
    self collision the phase becomes GAME_OVER and the body is left as it
    was before the step.
    """
    if state.phase is not Phase.RUNNING:
        return None

    # Commit direction once per tick
    state.direction = state.pending
    new_head = add(state.head, state.direction)

    if not in_bounds(new_head, cfg.grid_size):
        state.phase = Phase.GAME_OVER
        return StepResult.HIT_WALL

    # The tail has not moved yet, so stepping into it counts as a hit
    if new_head in state.snake:
        state.phase = Phase.GAME_OVER
        return StepResult.HIT_SELF

    state.snake.insert(0, new_head)

    if new_head != state.food:
        state.snake.pop()
        return StepResult.MOVED

    state.score += POINTS_PER_FOOD
    state.speed = min(cfg.max_speed, state.speed + cfg.speed_step)
    state.food = spawn_food(state.snake, cfg.grid_size, rng)
    if state.food is None:
        logger.info("board filled at length %d", len(state.snake))
        state.phase = Phase.GAME_OVER
        return StepResult.BOARD_FULL
    return StepResult.ATE
