"""PillarSort - selection sort animated over a scene of pillars."""

__version__ = "0.1.0"

from .pillarsort import PillarSort

__all__ = [
    'PillarSort',
]
