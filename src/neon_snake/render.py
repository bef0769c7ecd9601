# render.py
from functools import lru_cache
from typing import Dict, Optional, Tuple

import pygame  # type: ignore

from .config import (
    HUD_HEIGHT, PAD_BUTTON, PAD_GAP, PAD_HEIGHT,
    BG_TOP, BG_BOTTOM, GRID_LINE,
    FOOD, FOOD_GLOW, HEAD, HEAD_GLOW, BODY, BODY_GLOW,
    TEXT, ACCENT,
    UP, DOWN, LEFT, RIGHT,
)
from .game import GameStateSnapshot, Phase
from .grid import Direction

Overlay = Tuple[str, str, str]  # (title, text, button label)


# ---------- Layout ----------
def board_rect(grid_size: int, cell_px: int) -> pygame.Rect:
    size = grid_size * cell_px
    return pygame.Rect(0, HUD_HEIGHT, size, size)


def window_size(grid_size: int, cell_px: int) -> Tuple[int, int]:
    board = board_rect(grid_size, cell_px)
    return board.width, board.bottom + PAD_HEIGHT


def button_rect(grid_size: int, cell_px: int) -> pygame.Rect:
    """Where the overlay button sits; main.py hit-tests clicks against it."""
    board = board_rect(grid_size, cell_px)
    rect = pygame.Rect(0, 0, 140, 40)
    rect.center = (board.centerx, board.centery + 50)
    return rect


def pad_buttons(grid_size: int, cell_px: int) -> Dict[Direction, pygame.Rect]:
    """Up on the first row, left/down/right on the second, centred under the board."""
    board = board_rect(grid_size, cell_px)
    step = PAD_BUTTON + PAD_GAP
    top = board.bottom + (PAD_HEIGHT - PAD_BUTTON - step) // 2
    left = board.centerx - PAD_BUTTON // 2
    return {
        UP: pygame.Rect(left, top, PAD_BUTTON, PAD_BUTTON),
        LEFT: pygame.Rect(left - step, top + step, PAD_BUTTON, PAD_BUTTON),
        DOWN: pygame.Rect(left, top + step, PAD_BUTTON, PAD_BUTTON),
        RIGHT: pygame.Rect(left + step, top + step, PAD_BUTTON, PAD_BUTTON),
    }


def direction_at(pos: Tuple[int, int], grid_size: int, cell_px: int) -> Optional[Direction]:
    for direction, rect in pad_buttons(grid_size, cell_px).items():
        if rect.collidepoint(pos):
            return direction
    return None


def overlay_for(snap: GameStateSnapshot) -> Optional[Overlay]:
    """Overlay contents for the current phase, or None while playing."""
    if snap.phase is Phase.NOT_STARTED:
        return ("Neon Snake", "Press an arrow key to start.", "Start")
    if snap.phase is Phase.PAUSED:
        return ("Pause", "Press SPACE to resume.", "Resume")
    if snap.phase is Phase.GAME_OVER:
        return ("Game Over", f"Score: {snap.score}", "Restart")
    return None


# ---------- Draw ----------
@lru_cache(maxsize=4)
def _background(size: int) -> pygame.Surface:
    surf = pygame.Surface((size, size))
    for y in range(size):
        t = y / max(size - 1, 1)
        color = tuple(int(a + (b - a) * t) for a, b in zip(BG_TOP, BG_BOTTOM))
        pygame.draw.line(surf, color, (0, y), (size, y))
    return surf


def _glow(screen: pygame.Surface, center: Tuple[int, int], radius: int, color) -> None:
    glow = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
    for r, alpha in ((radius, 30), (int(radius * 0.75), 50)):
        pygame.draw.circle(glow, (*color, alpha), (radius, radius), r)
    screen.blit(glow, (center[0] - radius, center[1] - radius))


def draw_board(screen: pygame.Surface, snap: GameStateSnapshot, cell_px: int) -> None:
    size = snap.grid_size * cell_px
    screen.blit(_background(size), (0, HUD_HEIGHT))

    for i in range(1, snap.grid_size):
        p = i * cell_px
        pygame.draw.line(screen, GRID_LINE, (p, HUD_HEIGHT), (p, HUD_HEIGHT + size))
        pygame.draw.line(screen, GRID_LINE, (0, HUD_HEIGHT + p), (size, HUD_HEIGHT + p))

    # food
    if snap.food is not None:
        fx, fy = snap.food
        c = (fx * cell_px + cell_px // 2, HUD_HEIGHT + fy * cell_px + cell_px // 2)
        _glow(screen, c, cell_px, FOOD_GLOW)
        pygame.draw.circle(screen, FOOD, c, max(2, int(cell_px * 0.33)))

    # snake, tail first so the head ends up on top
    inset = max(1, int(cell_px * 0.08))
    radius = max(1, int(cell_px * 0.2))
    for index in range(len(snap.snake) - 1, -1, -1):
        x, y = snap.snake[index]
        is_head = index == 0
        rect = pygame.Rect(x * cell_px + inset, HUD_HEIGHT + y * cell_px + inset,
                           cell_px - inset * 2, cell_px - inset * 2)
        _glow(screen, rect.center, int(cell_px * (0.95 if is_head else 0.65)),
              HEAD_GLOW if is_head else BODY_GLOW)
        pygame.draw.rect(screen, HEAD if is_head else BODY, rect, border_radius=radius)


def draw_hud(screen: pygame.Surface, font: pygame.font.Font, snap: GameStateSnapshot) -> None:
    width = screen.get_width()
    pygame.draw.rect(screen, (0, 0, 0), pygame.Rect(0, 0, width, HUD_HEIGHT))
    score = font.render(f"Score {snap.score}", True, TEXT)
    high = font.render(f"High Score {snap.high_score}", True, TEXT)
    screen.blit(score, (10, (HUD_HEIGHT - score.get_height()) // 2))
    screen.blit(high, (width - high.get_width() - 10, (HUD_HEIGHT - high.get_height()) // 2))


def draw_pad(screen: pygame.Surface, grid_size: int, cell_px: int) -> None:
    board = board_rect(grid_size, cell_px)
    pygame.draw.rect(screen, (0, 0, 0), pygame.Rect(0, board.bottom, screen.get_width(), PAD_HEIGHT))
    arm = PAD_BUTTON // 4
    for (dx, dy), rect in pad_buttons(grid_size, cell_px).items():
        pygame.draw.rect(screen, ACCENT, rect, width=2, border_radius=8)
        cx, cy = rect.center
        # arrow head: tip along the direction, base across it
        tip = (cx + dx * arm, cy + dy * arm)
        base_a = (cx - dx * arm - dy * arm, cy - dy * arm + dx * arm)
        base_b = (cx - dx * arm + dy * arm, cy - dy * arm - dx * arm)
        pygame.draw.polygon(screen, ACCENT, (tip, base_a, base_b))


def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, snap: GameStateSnapshot, cell_px: int) -> None:
    content = overlay_for(snap)
    if content is None:
        return
    title, text, label = content
    board = board_rect(snap.grid_size, cell_px)

    # Dim the board with a translucent overlay
    shade = pygame.Surface(board.size, pygame.SRCALPHA)
    shade.fill((0, 0, 0, 150))
    screen.blit(shade, board.topleft)

    t = font.render(title, True, ACCENT)
    s = font.render(text, True, TEXT)
    screen.blit(t, t.get_rect(center=(board.centerx, board.centery - 40)))
    screen.blit(s, s.get_rect(center=(board.centerx, board.centery - 8)))

    btn = button_rect(snap.grid_size, cell_px)
    pygame.draw.rect(screen, ACCENT, btn, width=2, border_radius=8)
    b = font.render(label, True, ACCENT)
    screen.blit(b, b.get_rect(center=btn.center))


def draw_frame(screen: pygame.Surface, font: pygame.font.Font, snap: GameStateSnapshot, cell_px: int) -> None:
    draw_board(screen, snap, cell_px)
    draw_hud(screen, font, snap)
    draw_pad(screen, snap.grid_size, cell_px)
    draw_overlay(screen, font, snap, cell_px)
