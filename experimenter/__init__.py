"""Experimenter package for running PillarSort scenes."""

from .config import PillarSortConfig, create_default_config
from .logger import Logger

__all__ = ['PillarSortConfig', 'create_default_config', 'Logger']
