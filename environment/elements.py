"""Element store - the pillars and their heights."""

import numpy as np
from typing import Iterator, NamedTuple, Optional, Sequence


class Element(NamedTuple):
    """A pillar: stable identity (its position) and current height."""
    id: int
    height: float


class ElementStore:
    """
    Owns the heights of N pillars.

    Ids are positions and never move; sorting only exchanges heights,
    so a pillar's place in the scene is fixed for the whole run.
    """

    def __init__(self, heights: Sequence[float]):
        """
        Initialize store.

        Args:
            heights: Initial height for each id, in id order
        """
        heights = np.asarray(heights, dtype=float)
        if heights.ndim != 1:
            raise ValueError(f"Heights must be one-dimensional, got shape {heights.shape}")
        if not np.all(np.isfinite(heights)):
            raise ValueError(f"Non-finite heights: {heights}")
        self._heights = heights.copy()

    @classmethod
    def from_random(cls, n: int, min_height: float, max_height: float,
                    rng: Optional[np.random.Generator] = None) -> "ElementStore":
        """Draw n heights uniformly from [min_height, max_height + 1)."""
        if rng is None:
            rng = np.random.default_rng()
        return cls(rng.uniform(min_height, max_height + 1.0, size=n))

    def __len__(self) -> int:
        return len(self._heights)

    def __iter__(self) -> Iterator[Element]:
        return self.iter()

    def _check_id(self, element_id: int):
        if not 0 <= element_id < len(self._heights):
            raise IndexError(f"Unknown element id {element_id} (store holds {len(self._heights)})")

    def get(self, element_id: int) -> float:
        """Height of the element with the given id."""
        self._check_id(element_id)
        return float(self._heights[element_id])

    def set_height(self, element_id: int, value: float):
        """Replace the height of one element."""
        self._check_id(element_id)
        if not np.isfinite(value):
            raise ValueError(f"Non-finite height {value} for element {element_id}")
        self._heights[element_id] = value

    def iter(self) -> Iterator[Element]:
        """Elements in id order."""
        for element_id, height in enumerate(self._heights):
            yield Element(element_id, float(height))

    def apply(self, swap):
        """
        Apply a swap instruction by writing its two new heights.

        Args:
            swap: SwapInstruction from the sort automaton
        """
        self.set_height(swap.a_id, swap.a_new_height)
        self.set_height(swap.b_id, swap.b_new_height)

    @property
    def heights(self) -> np.ndarray:
        """Copy of all heights in id order."""
        return self._heights.copy()

    def is_sorted(self) -> bool:
        """True if heights are non-decreasing in id order."""
        return bool(np.all(np.diff(self._heights) >= 0))

    def sorted_prefix_length(self) -> int:
        """Length of the longest non-decreasing run starting at id 0."""
        descents = np.flatnonzero(np.diff(self._heights) < 0)
        if len(descents) == 0:
            return len(self._heights)
        return int(descents[0]) + 1
