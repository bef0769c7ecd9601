# session.py
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

import numpy as np  # type: ignore

from .config import Config, CFG
from .game import (
    GameState,
    GameStateSnapshot,
    Phase,
    StepResult,
    new_game_state,
    step_game,
)
from .grid import Direction, is_opposite

logger = logging.getLogger(__name__)

TICK = "tick"
ATE = "ate"
SCORE_CHANGE = "score_change"
HIGH_SCORE_CANDIDATE = "high_score_candidate"
PHASE_CHANGE = "phase_change"

EVENT_NAMES = (TICK, ATE, SCORE_CHANGE, HIGH_SCORE_CANDIDATE, PHASE_CHANGE)


class Events:
    """Named listener lists. A failing listener is logged and skipped."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Callable]] = {name: [] for name in EVENT_NAMES}

    def subscribe(self, name: str, fn: Callable) -> None:
        if name not in self._listeners:
            raise ValueError(f"Unknown event: {name!r}")
        self._listeners[name].append(fn)

    def unsubscribe(self, name: str, fn: Callable) -> None:
        if fn in self._listeners.get(name, []):
            self._listeners[name].remove(fn)

    def emit(self, name: str, *args) -> None:
        for fn in list(self._listeners[name]):
            try:
                fn(*args)
            except Exception:
                logger.exception("%s listener %r failed", name, fn)


class Session:
    """
    One play session: owns the GameState and the RNG, and is the only
    place lifecycle transitions happen.

    Inputs: request_direction(), toggle_pause(), start_or_restart().
    Outputs: the events in `self.events`.
    """

    def __init__(self, cfg: Config = CFG, high_score: int = 0, rng: Optional[np.random.Generator] = None):
        self.cfg = cfg
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)
        self.high_score = max(0, int(high_score))
        self.events = Events()
        self.state: GameState = new_game_state(cfg, self.rng)

    # ---------- Read side ----------
    @property
    def phase(self) -> Phase:
        return self.state.phase

    def snapshot(self) -> GameStateSnapshot:
        s = self.state
        return GameStateSnapshot(
            snake=tuple(s.snake),
            food=s.food,
            score=s.score,
            high_score=self.high_score,
            phase=s.phase,
            speed=s.speed,
            direction=s.direction,
            grid_size=self.cfg.grid_size,
        )

    # ---------- Lifecycle ----------
    def _set_phase(self, phase: Phase) -> None:
        old = self.state.phase
        if old is phase:
            return
        self.state.phase = phase
        logger.debug("phase %s -> %s", old.value, phase.value)
        self.events.emit(PHASE_CHANGE, old, phase)

    def reset(self) -> None:
        """Throw the current state away and start a fresh, not-yet-started game."""
        old = self.state.phase
        self.state = new_game_state(self.cfg, self.rng)
        logger.info("session reset")
        if old is not Phase.NOT_STARTED:
            self.events.emit(PHASE_CHANGE, old, Phase.NOT_STARTED)
        self.events.emit(SCORE_CHANGE, 0)

    def start(self) -> None:
        if self.state.phase is Phase.NOT_STARTED:
            self._set_phase(Phase.RUNNING)

    # ---------- Input surface ----------
    def request_direction(self, direction: Direction) -> None:
        """Queue a heading for the next tick (no 180° turns)."""
        phase = self.state.phase
        if phase is Phase.GAME_OVER:
            return
        if phase is Phase.PAUSED:
            self._set_phase(Phase.RUNNING)
        elif phase is Phase.NOT_STARTED:
            self.start()

        if is_opposite(direction, self.state.direction):
            return
        self.state.pending = direction

    def toggle_pause(self) -> None:
        phase = self.state.phase
        if phase is Phase.RUNNING:
            self._set_phase(Phase.PAUSED)
        elif phase is Phase.PAUSED:
            self._set_phase(Phase.RUNNING)

    def start_or_restart(self) -> None:
        """The overlay button: start, resume, or reset depending on phase."""
        phase = self.state.phase
        if phase is Phase.PAUSED:
            self._set_phase(Phase.RUNNING)
        elif phase is Phase.NOT_STARTED:
            self.start()
        else:
            self.reset()

    # ---------- Simulation ----------
    def tick(self) -> Optional[StepResult]:
        """Run one simulation step if the game is running."""
        if self.state.phase is not Phase.RUNNING:
            return None

        result = step_game(self.state, self.cfg, self.rng)

        if result in (StepResult.HIT_WALL, StepResult.HIT_SELF, StepResult.BOARD_FULL):
            logger.info("game over (%s), score=%d", result.value, self.state.score)
            self.events.emit(PHASE_CHANGE, Phase.RUNNING, Phase.GAME_OVER)

        if result in (StepResult.ATE, StepResult.BOARD_FULL):
            score = self.state.score
            self.events.emit(ATE, self.snapshot())
            self.events.emit(SCORE_CHANGE, score)
            if score > self.high_score:
                self.high_score = score
                self.events.emit(HIGH_SCORE_CANDIDATE, score)
        return result

    def publish_frame(self) -> None:
        self.events.emit(TICK, self.snapshot())
