"""Completion chime played once when the pillars are sorted."""

import os
import numpy as np
import pygame
from typing import Optional

SAMPLE_RATE = 44100


def synthesize_chime(sample_rate: int = SAMPLE_RATE, duration: float = 1.2,
                     frequencies=(523.25, 659.25, 783.99), volume: float = 0.4) -> np.ndarray:
    """
    Build a stereo int16 arpeggio with an exponential decay.

    Args:
        sample_rate: Samples per second
        duration: Length in seconds
        frequencies: Notes started one after another
        volume: Peak amplitude (0-1)

    Returns:
        Array of shape (samples, 2), dtype int16
    """
    n_samples = int(sample_rate * duration)
    t = np.arange(n_samples) / sample_rate
    wave = np.zeros(n_samples)
    offset = duration / (2 * len(frequencies))
    for i, freq in enumerate(frequencies):
        start = i * offset
        local_t = np.clip(t - start, 0.0, None)
        envelope = np.where(t >= start, np.exp(-4.0 * local_t), 0.0)
        wave += envelope * np.sin(2 * np.pi * freq * local_t)

    peak = np.max(np.abs(wave))
    if peak > 0:
        wave = wave / peak
    mono = (wave * volume * 32767).astype(np.int16)
    return np.column_stack([mono, mono])


class CompletionChime:
    """
    One-shot audio cue.

    Loads `sound_path` when it exists, otherwise plays a synthesized chime.
    """

    def __init__(self, sound_path: Optional[str] = None):
        self.sound_path = sound_path
        self.sound = None
        self.enabled = False
        self.played = False

    def start(self):
        """Initialize the mixer and load the sound."""
        try:
            pygame.mixer.pre_init(SAMPLE_RATE, -16, 2, 512)
            pygame.mixer.init()
        except pygame.error as e:
            print(f"Warning: audio unavailable, completion chime disabled ({e})")
            return

        self.sound = None
        if self.sound_path and os.path.exists(self.sound_path):
            try:
                self.sound = pygame.mixer.Sound(self.sound_path)
            except pygame.error as e:
                print(f"Warning: could not load {self.sound_path}, using synthesized chime ({e})")
        if self.sound is None:
            self.sound = pygame.mixer.Sound(buffer=synthesize_chime().tobytes())
        self.enabled = True

    def play(self):
        """Play the chime; later calls in the same run are ignored."""
        if self.played:
            return
        self.played = True
        if self.enabled:
            self.sound.play()

    def reset(self):
        self.played = False

    def finish(self):
        if self.enabled:
            pygame.mixer.quit()
            self.enabled = False
