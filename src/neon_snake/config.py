from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# ----- Window & grid -----
GRID_SIZE = 24
CELL_PX = 26
HUD_HEIGHT = 40
PAD_BUTTON = 44              # on-screen direction buttons under the board
PAD_GAP = 8
PAD_HEIGHT = 2 * PAD_BUTTON + PAD_GAP + 24
FPS = 60

# ----- Colors -----
BG_TOP    = (7, 13, 26)
BG_BOTTOM = (9, 7, 18)
GRID_LINE = (22, 26, 38)
FOOD      = (255, 77, 201)
FOOD_GLOW = (255, 46, 166)
HEAD      = (139, 255, 184)
HEAD_GLOW = (87, 255, 154)
BODY      = (54, 250, 255)
BODY_GLOW = (0, 246, 255)
TEXT      = (220, 220, 230)
ACCENT    = (54, 250, 255)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Scoring -----
POINTS_PER_FOOD = 10

# ----- Persistence -----
HIGH_SCORE_FILE = Path.home() / ".neon_snake" / "high_score.txt"


# ----- Tunables (fixed for a whole session) -----
@dataclass(frozen=True)
class Config:
    grid_size: int = GRID_SIZE
    start_length: int = 3
    base_speed: float = 6.0       # steps per second
    speed_step: float = 0.45      # added per food
    max_speed: float = 16.0
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("grid_size", "start_length", "base_speed", "speed_step", "max_speed"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be > 0, got {getattr(self, name)!r}")
        if self.start_length > self.grid_size // 2 + 1:
            raise ValueError(
                f"start_length {self.start_length} does not fit on a {self.grid_size}x{self.grid_size} grid"
            )
        if self.base_speed > self.max_speed:
            raise ValueError("base_speed must not exceed max_speed")

    @property
    def cells(self) -> int:
        return self.grid_size * self.grid_size


CFG = Config()
