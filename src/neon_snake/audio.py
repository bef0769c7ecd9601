# audio.py
import logging
from typing import Optional

import numpy as np  # type: ignore
import pygame       # type: ignore

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100


def make_chirp(
    start_hz: float = 440.0,
    end_hz: float = 880.0,
    sweep: float = 0.08,
    duration: float = 0.11,
    peak: float = 0.08,
    sample_rate: int = SAMPLE_RATE,
) -> np.ndarray:
    """
    Square-wave chirp as int16 stereo samples, shape (n, 2).

    Frequency rises exponentially from start_hz to end_hz over `sweep`
    seconds and then holds; the envelope ramps up over 10 ms and decays
    exponentially to silence at duration - 10 ms.
    """
    n = int(sample_rate * duration)
    t = np.arange(n) / sample_rate

    freq = start_hz * (end_hz / start_hz) ** np.clip(t / sweep, 0.0, 1.0)
    phase = 2 * np.pi * np.cumsum(freq) / sample_rate
    wave = np.sign(np.sin(phase))

    floor = 1e-4
    attack = 0.01
    release = duration - attack
    env = np.where(
        t < attack,
        floor * (peak / floor) ** (t / attack),
        peak * (floor / peak) ** np.clip((t - attack) / (release - attack), 0.0, 1.0),
    )

    mono = (wave * env * (2**15 - 1)).astype(np.int16)
    return np.column_stack([mono, mono])


class EatCue:
    """Plays the eat chirp. Any mixer problem just disables sound."""

    def __init__(self) -> None:
        self._sound: Optional["pygame.mixer.Sound"] = None
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2)
            freq, _, channels = pygame.mixer.get_init()
            samples = make_chirp(sample_rate=freq)
            if channels == 1:
                samples = np.ascontiguousarray(samples[:, 0])
            self._sound = pygame.sndarray.make_sound(samples)
        except (pygame.error, ValueError, TypeError) as exc:
            logger.warning("audio disabled: %s", exc)

    @property
    def enabled(self) -> bool:
        return self._sound is not None

    def play(self, *_args) -> None:
        if self._sound is None:
            return
        try:
            self._sound.play()
        except pygame.error as exc:
            logger.warning("could not play eat cue: %s", exc)
