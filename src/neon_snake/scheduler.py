# scheduler.py
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from .game import Phase
from .inputs import InputQueue
from .session import PHASE_CHANGE, Session

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]
RequestFrame = Callable[[FrameCallback], Any]
CancelFrame = Callable[[Any], None]

# Absorbs float drift when the accumulator holds an exact multiple of the step
EPSILON = 1e-9


class FixedStepScheduler:
    """
    Turns a variable-rate frame clock into fixed-size simulation steps.

    Each frame: drain inputs, add the elapsed time to the accumulator,
    run one tick per 1/speed seconds held in it, then publish a snapshot.
    The frame source is injected (`request_frame` / `cancel_frame`) so
    tests can feed synthetic timestamps.
    """

    def __init__(
        self,
        session: Session,
        request_frame: RequestFrame,
        cancel_frame: Optional[CancelFrame] = None,
        inputs: Optional[InputQueue] = None,
    ):
        self.session = session
        self.inputs = inputs
        self._request_frame = request_frame
        self._cancel_frame = cancel_frame

        self.accumulator = 0.0
        self.last_time: Optional[float] = None
        self.ticks = 0                 # total steps run, for diagnostics
        self._handle: Any = None
        self._active = False

    # ---------- Lifecycle ----------
    def start(self) -> None:
        if self._active:
            return
        self._active = True
        self.session.events.subscribe(PHASE_CHANGE, self._on_phase_change)
        self._handle = self._request_frame(self._on_frame)

    def stop(self) -> None:
        """Deregister the frame callback; nothing touches the session afterwards."""
        if not self._active:
            return
        self._active = False
        self.session.events.unsubscribe(PHASE_CHANGE, self._on_phase_change)
        if self._cancel_frame is not None and self._handle is not None:
            self._cancel_frame(self._handle)
        self._handle = None

    @property
    def active(self) -> bool:
        return self._active

    def _on_phase_change(self, old: Phase, new: Phase) -> None:
        if Phase.RUNNING in (old, new):
            self.accumulator = 0.0
            self.last_time = None

    def _on_frame(self, now: float) -> None:
        if not self._active:
            return
        self.advance(now)
        if self._active:
            self._handle = self._request_frame(self._on_frame)

    # ---------- Per-frame work ----------
    def advance(self, now: float) -> int:
        """Process one frame at time `now` (seconds). Returns the number of ticks run."""
        if self.inputs is not None:
            self.inputs.drain_into(self.session)

        delta = 0.0 if self.last_time is None else max(0.0, now - self.last_time)
        self.last_time = now

        steps = 0
        if self.session.phase is Phase.RUNNING:
            self.accumulator += delta
            step_duration = 1.0 / self.session.state.speed
            while self.accumulator + EPSILON >= step_duration and self.session.phase is Phase.RUNNING:
                self.session.tick()
                steps += 1
                if self.session.phase is not Phase.RUNNING:
                    break
                self.accumulator = max(0.0, self.accumulator - step_duration)
                step_duration = 1.0 / self.session.state.speed

        self.ticks += steps
        self.session.publish_frame()
        return steps
