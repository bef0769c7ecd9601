# inputs.py
from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Deque, Optional, Tuple, Union

from .game import Phase
from .grid import Direction

if TYPE_CHECKING:
    from .session import Session

DIRECTION = "direction"
PAUSE = "pause"
START = "start"

Command = Union[Tuple[str], Tuple[str, Direction]]


class InputQueue:
    """
    Bounded channel between input adapters (producer) and the scheduler
    (consumer). When full, the oldest command is dropped.
    """

    def __init__(self, capacity: int = 16):
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self._commands: Deque[Command] = deque(maxlen=capacity)

    def __len__(self) -> int:
        return len(self._commands)

    # Producer side -----------------------------------------------------------
    def push_direction(self, direction: Direction) -> None:
        self._commands.append((DIRECTION, direction))

    def push_pause(self) -> None:
        self._commands.append((PAUSE,))

    def push_start(self) -> None:
        self._commands.append((START,))

    # Consumer side -----------------------------------------------------------
    def pop(self) -> Optional[Command]:
        try:
            return self._commands.popleft()
        except IndexError:
            return None

    def drain_into(self, session: "Session") -> int:
        """Apply every queued command to the session, oldest first. Returns how many ran."""
        count = 0
        while True:
            cmd = self.pop()
            if cmd is None:
                return count
            kind = cmd[0]
            if kind == DIRECTION:
                session.request_direction(cmd[1])  # type: ignore[misc]
            elif kind == PAUSE:
                session.toggle_pause()
            elif kind == START:
                # overlay button; a press queued before the game started must not reset it
                if session.phase is not Phase.RUNNING:
                    session.start_or_restart()
            else:
                raise ValueError(f"Unknown command: {cmd!r}")
            count += 1
