"""Environment interface - owns the pillars and drives the sort one frame at a time."""

import numpy as np
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field
from .elements import ElementStore
from .automaton import Role, SortAutomaton, SortState, StepResult, SwapInstruction


@dataclass
class State:
    """Complete state of the environment after the last step."""
    sort_state: SortState
    roles: Dict[int, Role] = field(default_factory=dict)
    last_swap: Optional[SwapInstruction] = None
    completed: bool = False  # True only on the frame the sort finished
    done: bool = False
    step_count: int = 0
    swap_count: int = 0
    comparison_count: int = 0
    info: Dict[str, Any] = None


class Environment:
    """
    Environment interface.

    Holds a single Element Store and Sort Automaton and provides methods to:
    - Advance the sort by one visible step
    - Query current state and render data
    - Reset to a fresh run
    """

    def __init__(self, config):
        """
        Initialize.

        Args:
            config: Configuration object
        """
        self.config = config
        self.rng = np.random.default_rng(config.seed)
        self.reset()

    def _create_store(self) -> ElementStore:
        if self.config.initial_heights is not None:
            return ElementStore(self.config.initial_heights)
        return ElementStore.from_random(
            self.config.number_of_pillars,
            self.config.minimum_pillar_height,
            self.config.maximum_pillar_height,
            rng=self.rng,
        )

    def reset(self):
        """Start a new run: rebuild both the store and the automaton."""
        self.store = self._create_store()
        self.automaton = SortAutomaton(self.store)

        self.last_result: Optional[StepResult] = None
        self.step_count = 0
        self.swap_count = 0
        self.comparison_count = 0
        self.completed_at_step: Optional[int] = None

    @property
    def done(self) -> bool:
        return self.automaton.is_complete

    def step(self) -> StepResult:
        """
        Advance the sort by one frame and apply any swap it produced.

        Returns:
            StepResult of the automaton
        """
        was_done = self.done
        # The first inner step of a pass adopts its candidate without comparing
        seeding = self.automaton.state.inner == self.automaton.state.outer + 1
        result = self.automaton.advance(self.store)

        if result.swap is not None:
            self.store.apply(result.swap)
            if not result.swap.is_noop:
                self.swap_count += 1
        elif not was_done and not seeding and result.ids_with(Role.INNER):
            self.comparison_count += 1

        if result.completed:
            self.completed_at_step = self.step_count + 1
        if not was_done:
            self.step_count += 1

        self.last_result = result
        return result

    def get_state(self) -> State:
        """
        Get current environment state.

        Returns:
            Current environment state
        """
        result = self.last_result
        state = self.automaton.state
        return State(
            sort_state=SortState(
                outer=state.outer,
                inner=state.inner,
                shortest_id=state.shortest_id,
                shortest_height=state.shortest_height,
                outer_height=state.outer_height,
            ),
            roles=dict(result.roles) if result else {},
            last_swap=result.swap if result else None,
            completed=result.completed if result else False,
            done=self.done,
            step_count=self.step_count,
            swap_count=self.swap_count,
            comparison_count=self.comparison_count,
            info={
                'number_of_pillars': len(self.store),
                'sorted_prefix': self.store.sorted_prefix_length(),
                'expected_steps': SortAutomaton.expected_steps(len(self.store)),
                'completed_at_step': self.completed_at_step,
            }
        )

    def _role_array(self) -> List[Role]:
        if self.last_result is None:
            return [Role.UNMARKED] * len(self.store)
        return [self.last_result.roles.get(i, Role.UNMARKED) for i in range(len(self.store))]

    def get_render_data(self) -> Dict[str, Any]:
        """
        Get data for rendering.

        Returns:
            Dictionary with render data
        """
        swap = self.last_result.swap if self.last_result else None
        dirty_ids = [] if swap is None else sorted({swap.a_id, swap.b_id})
        return {
            'heights': self.store.heights,
            'roles': self._role_array(),
            'dirty_ids': dirty_ids,
            'outer': self.automaton.state.outer,
            'inner': self.automaton.state.inner,
            'step_count': self.step_count,
            'swap_count': self.swap_count,
            'done': self.done,
        }
