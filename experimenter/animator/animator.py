"""Animator interface - handles visualization."""

from .pygame_framer import PygameFramer


class Animator:
    """
    Animator interface for visualization.

    Decoupled from the sort logic: draws whatever the environment reports
    and tells the caller whether the user paused or quit.
    """

    def __init__(self, config):
        """
        Initialize animator.

        Args:
            config: Configuration object
        """
        self.framer = PygameFramer(config, window_size=tuple(config.window_size))

    @property
    def paused(self) -> bool:
        return self.framer.paused

    def start(self):
        self.framer.start()

    def step(self, environment) -> bool:
        """Animation step. Returns False if the user asked to quit."""
        render_data = environment.get_render_data()
        return self.framer.render_frame(render_data)

    def finish(self):
        self.framer.finish()
