"""Configuration parameters for the PillarSort scene."""

from dataclasses import dataclass
from typing import List, Optional, Tuple
import numpy as np
from environment.errors import ConfigurationError


@dataclass
class PillarSortConfig:
    """Configuration for the PillarSort scene."""

    # Pillars
    number_of_pillars: int = 1000  # Number of pillars to sort (>= 2)
    minimum_pillar_height: float = 1.0  # Lower bound for random heights
    maximum_pillar_height: float = 1000.0  # Upper bound for random heights (drawn up to max + 1)
    pillar_width: float = 1.0  # Width of each pillar (world units)
    distance_between_pillars: float = 2.0  # Spacing factor between pillar origins
    initial_heights: Optional[List[float]] = None  # Explicit heights, overrides number_of_pillars
    seed: Optional[int] = None  # Seed for random heights

    # Frequencies
    frame_rate: float = 60.0  # Rendered frames (sort steps) per second
    logging_frequency: float = 1.0  # Logging frequency in Hz (0.01-100)
    plotting_frequency: float = 10.0  # Plot sampling frequency in Hz (0.01-100)
    linger_frames: int = 120  # Frames kept on screen after completion

    # Scene
    day_length: float = 64.0  # Seconds per radian of sun travel
    ambient_brightness: float = 0.7  # Minimum brightness of the scene (0-1)
    completion_sound: Optional[str] = "sort_complete.ogg"  # Played once when sorted
    window_size: Tuple[int, int] = (1200, 700)

    # Palette (RGB, 0-1)
    ground_color: Tuple[float, float, float] = (0.3, 0.5, 0.3)
    unmarked_color: Tuple[float, float, float] = (0.8, 0.7, 0.6)
    current_color: Tuple[float, float, float] = (0.0, 1.0, 0.0)
    compare_color: Tuple[float, float, float] = (1.0, 0.0, 0.0)
    shortest_color: Tuple[float, float, float] = (0.0, 0.0, 1.0)

    def __post_init__(self):
        """Validate and adjust configuration."""
        if self.initial_heights is not None:
            self.initial_heights = [float(h) for h in self.initial_heights]
            if not np.all(np.isfinite(self.initial_heights)):
                raise ConfigurationError(f"Non-finite initial heights: {self.initial_heights}")
            self.number_of_pillars = len(self.initial_heights)

        if self.number_of_pillars < 2:
            raise ConfigurationError(
                f"Selection sort needs at least 2 pillars, got {self.number_of_pillars}"
            )
        if self.frame_rate <= 0:
            raise ConfigurationError(f"Frame rate must be positive, got {self.frame_rate}")

        # Keep the height range ordered and positive
        if self.minimum_pillar_height > self.maximum_pillar_height:
            self.minimum_pillar_height, self.maximum_pillar_height = (
                self.maximum_pillar_height, self.minimum_pillar_height
            )
        self.minimum_pillar_height = max(0.0, self.minimum_pillar_height)

        self.pillar_width = max(0.01, self.pillar_width)
        self.distance_between_pillars = max(1.0, self.distance_between_pillars)
        self.logging_frequency = max(0.01, min(100.0, self.logging_frequency))
        self.plotting_frequency = max(0.01, min(100.0, self.plotting_frequency))
        self.linger_frames = max(0, int(self.linger_frames))
        self.day_length = max(1.0, self.day_length)
        self.ambient_brightness = max(0.0, min(1.0, self.ambient_brightness))

    @property
    def dt(self) -> float:
        """Simulated time covered by one frame."""
        return 1.0 / self.frame_rate


def create_default_config(**overrides) -> PillarSortConfig:
    """
    Create default configuration for demos and experiments.

    Args:
        **overrides: Field values replacing the defaults

    Returns:
        PillarSortConfig
    """
    params = dict(
        number_of_pillars=1000,
        minimum_pillar_height=1.0,
        maximum_pillar_height=1000.0,
        pillar_width=1.0,
        distance_between_pillars=2.0,
        frame_rate=60.0,
        logging_frequency=1.0,
        day_length=64.0,
        ambient_brightness=0.7,
    )
    params.update(overrides)
    return PillarSortConfig(**params)
