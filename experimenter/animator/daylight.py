"""Day/night cycle for the scene background."""

import math
from typing import Tuple

NIGHT_SKY = (12, 16, 40)
DAY_SKY = (135, 190, 235)
MAX_ILLUMINANCE = 100000.0


def sun_position(elapsed: float, day_length: float = 64.0) -> Tuple[float, float]:
    """
    Sun direction (y, z) after `elapsed` seconds.

    The sun travels one radian every `day_length` seconds.
    """
    t = elapsed / day_length
    return math.sin(t), math.cos(t)


def sun_illuminance(elapsed: float, day_length: float = 64.0) -> float:
    """Directional light strength; zero while the sun is below the horizon."""
    t = elapsed / day_length
    return max(math.sin(t), 0.0) ** 2 * MAX_ILLUMINANCE


def sky_color(elapsed: float, day_length: float = 64.0) -> Tuple[int, int, int]:
    """Blend from night to day sky by sun elevation."""
    elevation, _ = sun_position(elapsed, day_length)
    blend = (elevation + 1.0) / 2.0
    return tuple(int(round(n + (d - n) * blend)) for n, d in zip(NIGHT_SKY, DAY_SKY))


def light_level(elapsed: float, day_length: float = 64.0, ambient: float = 0.7) -> float:
    """Scene brightness in [ambient, 1]."""
    return ambient + (1.0 - ambient) * sun_illuminance(elapsed, day_length) / MAX_ILLUMINANCE


def shade(color: Tuple[float, float, float], level: float) -> Tuple[int, int, int]:
    """Convert a 0-1 RGB color to 0-255 and dim it by `level`."""
    return tuple(max(0, min(255, int(round(c * level * 255)))) for c in color)
