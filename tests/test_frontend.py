import numpy as np  # type: ignore
import pygame  # type: ignore

from src.neon_snake.audio import EatCue, make_chirp
from src.neon_snake.config import HUD_HEIGHT, PAD_HEIGHT, UP, DOWN, LEFT, RIGHT
from src.neon_snake.game import GameStateSnapshot, Phase
from src.neon_snake.main import parse_args
from src.neon_snake.render import (
    board_rect,
    button_rect,
    direction_at,
    overlay_for,
    pad_buttons,
    window_size,
)


def snap(phase, score=0):
    return GameStateSnapshot(
        snake=((12, 12), (11, 12), (10, 12)),
        food=(3, 3),
        score=score,
        high_score=0,
        phase=phase,
        speed=6.0,
        direction=(1, 0),
        grid_size=24,
    )


def test_overlay_follows_phase():
    assert overlay_for(snap(Phase.NOT_STARTED))[2] == "Start"
    assert overlay_for(snap(Phase.PAUSED))[0] == "Pause"
    assert overlay_for(snap(Phase.GAME_OVER, score=70)) == ("Game Over", "Score: 70", "Restart")
    assert overlay_for(snap(Phase.RUNNING)) is None


def test_button_inside_board():
    width, height = window_size(24, 20)
    assert (width, height) == (480, HUD_HEIGHT + 480 + PAD_HEIGHT)
    assert board_rect(24, 20).contains(button_rect(24, 20))


def test_direction_pad_sits_under_the_board():
    width, height = window_size(24, 20)
    board = board_rect(24, 20)
    buttons = pad_buttons(24, 20)
    assert set(buttons) == {UP, DOWN, LEFT, RIGHT}
    for rect in buttons.values():
        assert rect.top >= board.bottom and rect.bottom <= height
        assert 0 <= rect.left and rect.right <= width
    assert buttons[UP].centerx == buttons[DOWN].centerx
    assert buttons[UP].bottom < buttons[DOWN].top
    assert buttons[LEFT].right < buttons[DOWN].left < buttons[DOWN].right < buttons[RIGHT].left


def test_direction_at_maps_clicks_to_buttons():
    for direction, rect in pad_buttons(24, 26).items():
        assert direction_at(rect.center, 24, 26) == direction
    assert direction_at(board_rect(24, 26).center, 24, 26) is None
    assert direction_at(button_rect(24, 26).center, 24, 26) is None


def test_chirp_shape_and_level():
    samples = make_chirp(sample_rate=44100)
    assert samples.dtype == np.int16
    assert samples.shape == (int(44100 * 0.11), 2)
    assert np.abs(samples).max() <= int(0.08 * 32767) + 1
    assert abs(int(samples[0, 0])) < 10


def test_cli_defaults():
    args = parse_args([])
    assert args.grid_size == 24
    assert args.base_speed == 6.0
    assert args.seed is None
    args = parse_args(["--grid-size", "16", "--seed", "4"])
    assert (args.grid_size, args.seed) == (16, 4)


def test_eat_cue_disabled_when_mixer_unavailable(monkeypatch, caplog):
    def no_device(*_args, **_kwargs):
        raise pygame.error("no audio device")

    monkeypatch.setattr(pygame.mixer, "get_init", lambda: None)
    monkeypatch.setattr(pygame.mixer, "init", no_device)
    cue = EatCue()
    assert cue.enabled is False
    assert "audio disabled" in caplog.text
    cue.play()  # silently does nothing
