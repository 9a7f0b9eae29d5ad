"""Selection sort slowed down to one visible inner-loop step per frame."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple
from .errors import ConfigurationError


class Role(Enum):
    """How a pillar is highlighted for one frame."""
    OUTER = "outer"  # Start of the current pass
    INNER = "inner"  # Element being compared
    SHORTEST = "shortest"  # Smallest element found so far in the pass
    UNMARKED = "unmarked"


@dataclass
class SortState:
    """Progress of the selection sort."""
    outer: int = 0
    inner: int = 1
    shortest_id: int = 1
    shortest_height: float = 0.0
    outer_height: float = 0.0


@dataclass(frozen=True)
class SwapInstruction:
    """Exchange of two heights; ids never move."""
    a_id: int
    b_id: int
    a_new_height: float
    b_new_height: float

    @property
    def is_noop(self) -> bool:
        """True when the outer element already held the pass minimum."""
        return self.a_id == self.b_id


@dataclass
class StepResult:
    """Output of one automaton step."""
    roles: Dict[int, Role] = field(default_factory=dict)
    swap: Optional[SwapInstruction] = None
    completed: bool = False

    def ids_with(self, role: Role) -> Tuple[int, ...]:
        """Ids carrying the given role this frame, in id order."""
        return tuple(element_id for element_id, r in self.roles.items() if r is role)


class SortAutomaton:
    """
    Resumable selection sort.

    Each call to advance() performs one comparison of the inner loop (or
    the swap that ends a pass) and reports the role of every element, so
    a host can draw the algorithm one frame at a time. The automaton
    never writes heights itself; swaps are returned for the host to apply.
    """

    def __init__(self, elements: Iterable):
        """
        Initialize automaton for a fresh run.

        Args:
            elements: (id, height) pairs in id order, at least two
        """
        heights = [height for _, height in elements]
        if len(heights) < 2:
            raise ConfigurationError(f"Selection sort needs at least 2 elements, got {len(heights)}")

        self.n = len(heights)
        self.state = SortState(
            outer=0,
            inner=1,
            shortest_id=1,
            shortest_height=heights[1],
            outer_height=heights[0],
        )

    @property
    def is_complete(self) -> bool:
        """True once the last pass has been swapped."""
        return self.state.outer >= self.n - 1

    def _classify(self, elements: Iterable) -> Dict[int, Role]:
        """Assign roles in id order, updating the running shortest candidate."""
        state = self.state
        roles = {}
        for element_id, height in elements:
            if element_id == state.outer:
                state.outer_height = height
                roles[element_id] = Role.OUTER
            elif element_id == state.inner:
                if height < state.shortest_height or state.inner == state.outer + 1:
                    state.shortest_id = element_id
                    state.shortest_height = height
                roles[element_id] = Role.INNER
            elif element_id == state.shortest_id:
                roles[element_id] = Role.SHORTEST
            else:
                roles[element_id] = Role.UNMARKED
        return roles

    def advance(self, elements: Iterable) -> StepResult:
        """
        Perform one visible step.

        Args:
            elements: (id, height) pairs in id order; not modified

        Returns:
            StepResult with the roles for this frame, the swap to apply when a
            pass ends, and completed=True on the frame the sort finishes
        """
        if self.is_complete:
            return StepResult(roles=self._classify(elements))

        roles = self._classify(elements)
        state = self.state

        if state.inner < self.n:
            state.inner += 1
            return StepResult(roles=roles)

        # Pass exhausted: the outer element competes for the minimum too
        if state.outer_height <= state.shortest_height:
            state.shortest_id = state.outer
            state.shortest_height = state.outer_height

        swap = SwapInstruction(
            a_id=state.outer,
            b_id=state.shortest_id,
            a_new_height=state.shortest_height,
            b_new_height=state.outer_height,
        )
        state.outer += 1
        state.inner = state.outer + 1
        return StepResult(roles=roles, swap=swap, completed=self.is_complete)

    @staticmethod
    def expected_steps(n: int) -> int:
        """Number of advance() calls needed to sort n elements."""
        return sum(n - k for k in range(1, n)) + (n - 1)
