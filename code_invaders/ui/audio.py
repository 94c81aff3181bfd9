"""
Audio - synthesized tones for match and miss cues.
This is a THIN ADAPTER - no game logic here.

Audio is best effort: a missing mixer or a failing playback is
logged and otherwise ignored, the game keeps running.
"""
import logging
import random
from typing import Iterable, Optional, Protocol

import numpy as np
import pygame

from code_invaders.gameplay.session import GameEvent, AlienMatchedEvent, AlienMissedEvent

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
VOLUME = 0.3
FADE_FLOOR = 0.0001   # gain reached at the end of every tone

# Cues
MATCH_BASE_FREQUENCY = 440.0
MATCH_FREQUENCY_SPREAD = 200.0
MATCH_DURATION_MS = 200
MATCH_WAVE = "square"

MISS_FREQUENCY = 120.0
MISS_DURATION_MS = 400
MISS_WAVE = "sine"

AUDIO_ERRORS = (pygame.error, ValueError, OSError)


class AudioSink(Protocol):
    """What the game loop needs from an audio backend."""

    def play_tone(self, frequency: float, duration_ms: float, wave_shape: str) -> None: ...

    def on_events(self, events: Iterable[GameEvent]) -> None: ...


def synthesize(frequency: float, duration_ms: float, wave_shape: str, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """
    Mono tone as floats in [-1, 1] with an exponential fade-out.
    Supported wave shapes: sine, square.
    """
    length = max(1, int(sample_rate * duration_ms / 1000.0))
    t = np.arange(length) / sample_rate
    phase = np.sin(2 * np.pi * frequency * t)

    if wave_shape == "sine":
        wave = phase
    elif wave_shape == "square":
        wave = np.where(phase >= 0, 1.0, -1.0)
    else:
        raise ValueError(f"Unknown wave shape: {wave_shape}")

    envelope = np.exp(np.log(FADE_FLOOR) * t / (duration_ms / 1000.0))
    return wave * envelope


def to_pcm(samples: np.ndarray, channels: int) -> np.ndarray:
    """Convert float samples to 16-bit PCM shaped for the mixer."""
    data = (samples * VOLUME * (2**15 - 1)).astype(np.int16)
    if channels == 1:
        return data
    return np.column_stack([data] * channels)


class SilentAudio:
    """Audio sink that plays nothing."""

    def play_tone(self, frequency: float, duration_ms: float, wave_shape: str) -> None:
        pass

    def on_events(self, events: Iterable[GameEvent]) -> None:
        pass


class ToneAudio:
    """
    Plays generated tones through pygame.mixer.

    play_tone() is fire-and-forget and never raises.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.enabled = False
        self.sample_rate = SAMPLE_RATE
        self.channels = 2

    def init_mixer(self) -> bool:
        """Start the mixer. Returns False (and stays silent) when unavailable."""
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(SAMPLE_RATE, -16, 2, 512)
            self.sample_rate, _, self.channels = pygame.mixer.get_init()
        except AUDIO_ERRORS as e:
            logger.warning(f"Audio unavailable, continuing without sound: {e}")
            self.enabled = False
            return False

        self.enabled = True
        logger.info(f"Mixer ready ({self.sample_rate} Hz, {self.channels} channels)")
        return True

    def play_tone(self, frequency: float, duration_ms: float, wave_shape: str) -> None:
        if not self.enabled:
            return
        try:
            samples = synthesize(frequency, duration_ms, wave_shape, self.sample_rate)
            sound = pygame.sndarray.make_sound(to_pcm(samples, self.channels))
            sound.play()
        except Exception as e:
            logger.warning(f"Failed to play {wave_shape} tone at {frequency:.0f} Hz: {e}")

    def play_match(self) -> None:
        frequency = MATCH_BASE_FREQUENCY + self.rng.random() * MATCH_FREQUENCY_SPREAD
        self.play_tone(frequency, MATCH_DURATION_MS, MATCH_WAVE)

    def play_miss(self) -> None:
        self.play_tone(MISS_FREQUENCY, MISS_DURATION_MS, MISS_WAVE)

    def on_events(self, events: Iterable[GameEvent]) -> None:
        """One cue per event; simultaneous misses each get their own."""
        for event in events:
            if isinstance(event, AlienMatchedEvent):
                self.play_match()
            elif isinstance(event, AlienMissedEvent):
                self.play_miss()
