"""Animator package for the PillarSort scene."""

from .pygame_framer import PygameFramer
from .animator import Animator
from .chime import CompletionChime

__all__ = ['PygameFramer', 'Animator', 'CompletionChime']
