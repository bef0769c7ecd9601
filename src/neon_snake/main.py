# main.py
import argparse
import logging
from typing import Optional

import pygame # type: ignore

from .config import CFG, CELL_PX, FPS, HIGH_SCORE_FILE, Config, UP, DOWN, LEFT, RIGHT
from .audio import EatCue
from .game import GameStateSnapshot
from .inputs import InputQueue
from .render import button_rect, direction_at, draw_frame, overlay_for, window_size
from .scheduler import FixedStepScheduler, FrameCallback
from .session import ATE, HIGH_SCORE_CANDIDATE, TICK, Session
from .storage import HighScoreStore

logger = logging.getLogger(__name__)

KEY_TO_DIRECTION = {
    pygame.K_UP: UP, pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}


class FrameLoop:
    """
    pygame stand-in for requestAnimationFrame: holds at most one pending
    frame callback and calls it once per display frame.
    """

    def __init__(self, queue: InputQueue, grid_size: int, cell_px: int, fps: int = FPS):
        self.queue = queue
        self.grid_size = grid_size
        self.cell_px = cell_px
        self.fps = fps
        self.clock = pygame.time.Clock()
        self._pending: Optional[FrameCallback] = None
        self._next_handle = 0
        self._handle = 0
        self.running = True
        self.snapshot: Optional[GameStateSnapshot] = None

    # request_frame / cancel_frame capability ---------------------------------
    def request_frame(self, callback: FrameCallback) -> int:
        self._next_handle += 1
        self._handle = self._next_handle
        self._pending = callback
        return self._handle

    def cancel_frame(self, handle: int) -> None:
        if handle == self._handle:
            self._pending = None

    # Input adapter -------------------------------------------------------------
    def observe(self, snap: GameStateSnapshot) -> None:
        """Remember what is on screen; the start/restart button only exists while an overlay does."""
        self.snapshot = snap

    def overlay_shown(self) -> bool:
        return self.snapshot is not None and overlay_for(self.snapshot) is not None

    def handle_events(self) -> None:
        """Translate pygame events into queued commands."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.queue.push_pause()
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    if self.overlay_shown():
                        self.queue.push_start()
                elif event.key in KEY_TO_DIRECTION:
                    self.queue.push_direction(KEY_TO_DIRECTION[event.key])
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                direction = direction_at(event.pos, self.grid_size, self.cell_px)
                if direction is not None:
                    self.queue.push_direction(direction)
                elif self.overlay_shown() and button_rect(self.grid_size, self.cell_px).collidepoint(event.pos):
                    self.queue.push_start()

    def run(self) -> None:
        while self.running and self._pending is not None:
            self.handle_events()
            if not self.running:
                break
            callback, self._pending = self._pending, None
            callback(pygame.time.get_ticks() / 1000.0)
            pygame.display.flip()
            self.clock.tick(self.fps)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Neon Snake")
    parser.add_argument("--grid-size", type=int, default=CFG.grid_size)
    parser.add_argument("--start-length", type=int, default=CFG.start_length)
    parser.add_argument("--base-speed", type=float, default=CFG.base_speed, help="steps per second")
    parser.add_argument("--speed-step", type=float, default=CFG.speed_step, help="speed gained per food")
    parser.add_argument("--max-speed", type=float, default=CFG.max_speed)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--cell-px", type=int, default=CELL_PX, help="pixels per grid cell")
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--high-score-file", type=str, default=str(HIGH_SCORE_FILE))
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        cfg = Config(
            grid_size=args.grid_size,
            start_length=args.start_length,
            base_speed=args.base_speed,
            speed_step=args.speed_step,
            max_speed=args.max_speed,
            seed=args.seed,
        )
    except ValueError as exc:
        raise SystemExit(f"invalid configuration: {exc}")

    store = HighScoreStore(args.high_score_file)
    session = Session(cfg, high_score=store.load())
    logger.info("starting session %s, high score %d", cfg, session.high_score)

    pygame.init()
    font = pygame.font.SysFont(None, 26)
    screen = pygame.display.set_mode(window_size(cfg.grid_size, args.cell_px))
    pygame.display.set_caption("Neon Snake")

    cue = EatCue()
    queue = InputQueue()
    loop = FrameLoop(queue, cfg.grid_size, args.cell_px, fps=args.fps)
    scheduler = FixedStepScheduler(session, loop.request_frame, loop.cancel_frame, inputs=queue)

    def persist(score: int) -> None:
        if store.save(score):
            logger.info("new high score %d saved to %s", score, store.path)

    loop.observe(session.snapshot())
    session.events.subscribe(TICK, loop.observe)
    session.events.subscribe(TICK, lambda snap: draw_frame(screen, font, snap, args.cell_px))
    session.events.subscribe(HIGH_SCORE_CANDIDATE, persist)
    if cue.enabled:
        session.events.subscribe(ATE, cue.play)
    else:
        logger.info("playing without sound")

    scheduler.start()
    try:
        loop.run()
    finally:
        scheduler.stop()
        pygame.quit()

    print(f"Score: {session.state.score}  High score: {session.high_score}  Steps: {scheduler.ticks}")


if __name__ == "__main__":
    main()
