from environment import State
from experimenter.config import PillarSortConfig


class Logger:
    """
    Interface for logging.
    """

    def __init__(self):
        pass

    def log_config(self, config: PillarSortConfig):
        print("\nConfiguration:")
        print(f"  Pillars: {config.number_of_pillars}")
        print(f"  Height range: {config.minimum_pillar_height} - {config.maximum_pillar_height}")
        print(f"  Frame rate: {config.frame_rate} Hz")
        if config.seed is not None:
            print(f"  Seed: {config.seed}")

    def log_step(self, state: State):
        """Log the state."""
        sort_state = state.sort_state
        print(f"Step {state.step_count}: pass={sort_state.outer} compare={sort_state.inner} "
              f"shortest={sort_state.shortest_id} ({sort_state.shortest_height:.2f}) "
              f"swaps={state.swap_count} sorted_prefix={state.info['sorted_prefix']}")

    def log_complete(self, state: State):
        print(f"\nSorted {state.info['number_of_pillars']} pillars after {state.step_count} steps.")

    def log_final(self, pillarsort):
        state = pillarsort.environment.get_state()
        print("\n" + "=" * 60)
        print("Final Statistics:")
        print(f"  Simulation time: {pillarsort.simulation_time:.2f}s")
        print(f"  Frames: {pillarsort.frame_count}")
        print(f"  Sort steps: {state.step_count} (expected {state.info['expected_steps']})")
        print(f"  Comparisons: {state.comparison_count}")
        print(f"  Swaps: {state.swap_count}")
        print(f"  Sorted: {state.done}")
        print("=" * 60)
