"""Abstract plotter interface and implementations for sort progress."""

from abc import ABC, abstractmethod
from typing import Optional
import os

import numpy as np
from matplotlib.figure import Figure


class Plotter(ABC):
    """
    Abstract base class for plotters.

    Defines the interface that all plotter implementations must follow.
    """

    def __init__(self, config):
        """
        Initialize plotter.

        Args:
            config: Configuration object
        """
        self.config = config

    @abstractmethod
    def start(self):
        """Start plotting."""
        pass

    @abstractmethod
    def step(self, step_count: int, sorted_prefix: int, swap_count: int, comparison_count: int):
        """
        Record one data point.

        Args:
            step_count: Sort steps performed so far
            sorted_prefix: Length of the non-decreasing run starting at pillar 0
            swap_count: Swaps applied so far
            comparison_count: Comparisons performed so far
        """
        pass

    @abstractmethod
    def finish(self):
        """Finish plotting."""
        pass


class NullPlotter(Plotter):
    """Plotter that records nothing."""

    def start(self):
        pass

    def step(self, step_count: int, sorted_prefix: int, swap_count: int, comparison_count: int):
        pass

    def finish(self):
        pass


class MatplotlibPlotter(Plotter):
    """
    Matplotlib plotter that writes a progress figure when the run finishes.

    Uses the object-oriented Figure API so no GUI backend is required.
    """

    def __init__(self, config, output_path: str = "plots/sort_progress.png"):
        super().__init__(config)
        self.output_path = output_path
        self._steps = []
        self._sorted_prefix = []
        self._swaps = []
        self._comparisons = []
        self.figure: Optional[Figure] = None

    def start(self):
        self._steps.clear()
        self._sorted_prefix.clear()
        self._swaps.clear()
        self._comparisons.clear()

    def step(self, step_count: int, sorted_prefix: int, swap_count: int, comparison_count: int):
        self._steps.append(step_count)
        self._sorted_prefix.append(sorted_prefix)
        self._swaps.append(swap_count)
        self._comparisons.append(comparison_count)

    @property
    def data(self):
        """Recorded series as numpy arrays."""
        return {
            'steps': np.array(self._steps),
            'sorted_prefix': np.array(self._sorted_prefix),
            'swaps': np.array(self._swaps),
            'comparisons': np.array(self._comparisons),
        }

    def _build_figure(self) -> Figure:
        data = self.data
        fig = Figure(figsize=(10, 6))
        ax_prefix, ax_counts = fig.subplots(2, 1, sharex=True)

        ax_prefix.plot(data['steps'], data['sorted_prefix'], color='#2ca02c')
        ax_prefix.set_ylabel('Sorted prefix')
        ax_prefix.set_ylim(0, self.config.number_of_pillars * 1.05)
        ax_prefix.grid(True, alpha=0.3)

        ax_counts.plot(data['steps'], data['comparisons'], label='Comparisons', color='#d62728')
        ax_counts.plot(data['steps'], data['swaps'], label='Swaps', color='#1f77b4')
        ax_counts.set_xlabel('Step')
        ax_counts.set_ylabel('Count')
        ax_counts.legend(loc='best')
        ax_counts.grid(True, alpha=0.3)

        fig.suptitle(f"Selection sort of {self.config.number_of_pillars} pillars")
        return fig

    def finish(self):
        """Save the progress figure."""
        if not self._steps:
            return
        self.figure = self._build_figure()
        directory = os.path.dirname(self.output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self.figure.savefig(self.output_path)
        print(f"Progress plot saved to {self.output_path}")


def create_plotter(plotter_type: str, config, output_path: Optional[str] = None):
    """
    Factory function to create the appropriate plotter.

    Args:
        plotter_type: 'matplotlib' or 'none'
        config: Configuration object
        output_path: Where the matplotlib plotter saves its figure

    Returns:
        Plotter instance
    """
    if plotter_type == 'matplotlib':
        if output_path is None:
            return MatplotlibPlotter(config)
        return MatplotlibPlotter(config, output_path=output_path)
    elif plotter_type == 'none':
        return NullPlotter(config)
    else:
        raise ValueError(f"Unknown plotter type: {plotter_type}")
