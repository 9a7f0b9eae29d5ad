"""Environment package for the PillarSort scene."""

from .errors import ConfigurationError
from .elements import Element, ElementStore
from .automaton import Role, SortState, SwapInstruction, StepResult, SortAutomaton
from .environment import Environment, State

__all__ = [
    'ConfigurationError',
    'Element',
    'ElementStore',
    'Role',
    'SortState',
    'SwapInstruction',
    'StepResult',
    'SortAutomaton',
    'Environment',
    'State',
]
