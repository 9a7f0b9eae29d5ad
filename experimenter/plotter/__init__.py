"""Plotter module for recording sort progress."""

from .plotter import Plotter, MatplotlibPlotter, NullPlotter, create_plotter

__all__ = ['Plotter', 'MatplotlibPlotter', 'NullPlotter', 'create_plotter']
