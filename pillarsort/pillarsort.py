"""PillarSort interface - orchestrates the sorting scene frame by frame."""

from typing import Optional
from environment import Environment
from experimenter.animator import Animator, CompletionChime
from experimenter.logger import Logger
from experimenter.plotter import Plotter


class PillarSort:
    """
    Runner interface for orchestrating the PillarSort scene.

    Coordinates:
    - Environment (pillars and the sort automaton)
    - Logger (console reports, optional)
    - Animator (pygame window, optional)
    - Plotter (progress figure, optional)
    - Chime (completion audio, optional)

    Every call to step() is one rendered frame and at most one sort step.
    Logging and plotting run at their own frequencies in simulated time,
    where each frame covers 1 / frame_rate seconds.
    """

    def __init__(self, config, environment: Environment, logger: Optional[Logger] = None,
                 animator: Optional[Animator] = None, plotter: Optional[Plotter] = None,
                 chime: Optional[CompletionChime] = None) -> None:
        """
        Initialize runner.

        Args:
            config: Configuration object
            environment: Environment instance
            logger: Console logger
            animator: Animator drawing each frame
            plotter: Plotter recording progress
            chime: Audio cue played when the sort completes
        """
        self.config = config
        self.environment = environment
        self.logger = logger
        self.animator = animator
        self.plotter = plotter
        self.chime = chime

        if self.logger:
            self.logging_period = 1.0 / config.logging_frequency
        if self.plotter:
            self.plotting_period = 1.0 / config.plotting_frequency

        self.simulation_time = 0.0
        self.frame_count = 0
        self.frames_since_done = 0
        self.completion_count = 0

    def start(self):
        if self.logger:
            self.logger.log_config(self.config)

        # Mixer settings must be in place before pygame.init() in the framer
        if self.chime:
            self.chime.start()

        if self.animator:
            self.animator.start()

        if self.plotter:
            self.plotter.start()
            self._record_plot()

        self.time_since_last_log = 0.0
        self.time_since_last_plot = 0.0

    @property
    def paused(self) -> bool:
        return self.animator is not None and self.animator.paused

    def _record_plot(self):
        state = self.environment.get_state()
        self.plotter.step(state.step_count, state.info['sorted_prefix'],
                          state.swap_count, state.comparison_count)

    def _on_complete(self):
        self.completion_count += 1
        if self.chime:
            self.chime.play()
        if self.logger:
            self.logger.log_complete(self.environment.get_state())
        if self.plotter:
            self._record_plot()
            self.time_since_last_plot = 0.0

    def step(self) -> bool:
        """
        Advance one frame.

        Returns:
            False if the animator asked to quit, True otherwise
        """
        if self.environment.done:
            # Terminal step: no sort progress, clears the last swap outline
            self.environment.step()
            self.frames_since_done += 1
        elif not self.paused:
            result = self.environment.step()
            if result.completed:
                self._on_complete()

        if self.logger:
            self.time_since_last_log += self.config.dt

            if self.time_since_last_log >= self.logging_period:
                self.logger.log_step(self.environment.get_state())
                self.time_since_last_log = 0.0

        if self.plotter and not self.environment.done and not self.paused:
            self.time_since_last_plot += self.config.dt

            if self.time_since_last_plot >= self.plotting_period:
                self._record_plot()
                self.time_since_last_plot = 0.0

        self.simulation_time += self.config.dt
        self.frame_count += 1

        if self.animator:
            return self.animator.step(self.environment)
        return True

    def forward(self, n_steps: int):
        """
        Step forward by N frames, then refresh logging and animation once.

        Args:
            n_steps: Number of frames to advance
        """
        for _ in range(n_steps):
            self.step()

        # Force refresh of logging and animation after all steps
        # (regardless of timing periods)
        if self.logger:
            self.logger.log_step(self.environment.get_state())
            self.time_since_last_log = 0.0

        if self.animator:
            self.animator.step(self.environment)

    def run(self, max_steps: Optional[int] = None) -> bool:
        """
        Step until the pillars are sorted, the user quits or max_steps frames pass.

        When animated, the sorted scene stays on screen for linger_frames frames.

        Args:
            max_steps: Optional frame limit

        Returns:
            True if the sort completed
        """
        linger = self.config.linger_frames if self.animator else 0
        while max_steps is None or self.frame_count < max_steps:
            if not self.step():
                break
            if self.environment.done and self.frames_since_done >= linger:
                break
        return self.environment.done

    def reset(self):
        """Start a new run from freshly generated pillars."""
        self.environment.reset()
        if self.chime:
            self.chime.reset()
        if self.plotter:
            self.plotter.start()
            self._record_plot()
        self.simulation_time = 0.0
        self.frame_count = 0
        self.frames_since_done = 0
        self.time_since_last_log = 0.0
        self.time_since_last_plot = 0.0

    def finish(self):
        if self.animator:
            self.animator.finish()

        if self.plotter:
            self.plotter.finish()

        if self.chime:
            self.chime.finish()

        if self.logger:
            self.logger.log_final(self)
