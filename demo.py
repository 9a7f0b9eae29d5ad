"""Demo script for the PillarSort scene with optional animation."""

import argparse
from environment import Environment
from experimenter import create_default_config, Logger
from experimenter.animator import Animator, CompletionChime
from experimenter.plotter import create_plotter
from pillarsort import PillarSort


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Selection sort over a scene of pillars")
    parser.add_argument('--headless', action='store_true', help='Run without window or audio')
    parser.add_argument('--pillars', type=int, default=None, help='Number of pillars')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for pillar heights')
    parser.add_argument('--heights', nargs='+', type=float, help='Explicit pillar heights')
    parser.add_argument('--fps', type=float, default=60.0, help='Frames (sort steps) per second')
    parser.add_argument('--max-steps', type=int, default=None, help='Stop after this many frames')
    parser.add_argument('--plot', action='store_true', help='Save a progress plot when finished')
    return parser.parse_args(argv)


def main(argv=None):
    """Run demo with optional animation."""
    args = parse_args(argv)

    print("=" * 60)
    print("PillarSort - Selection Sort Visualization")
    print("=" * 60)

    if args.headless:
        print("\nRunning in headless mode (no animation, faster execution)...")
    else:
        print("\nRunning with animation...")
        print("Controls:")
        print("  SPACE: Pause/Resume")
        print("  LEFT/RIGHT: Pan, UP/DOWN: Zoom, HOME: Reset view")
        print("  ESC or Q: Quit")

    print("=" * 60)

    overrides = dict(seed=args.seed, frame_rate=args.fps, initial_heights=args.heights)
    if args.pillars is not None:
        overrides['number_of_pillars'] = args.pillars
    if args.headless:
        # Simulated seconds pass quickly without a window; log less often
        overrides['logging_frequency'] = 0.01
    config = create_default_config(**overrides)

    environment = Environment(config)
    logger = Logger()
    animator = None if args.headless else Animator(config)
    chime = None if args.headless else CompletionChime(config.completion_sound)
    plotter = create_plotter('matplotlib' if args.plot else 'none', config)

    pillarsort = PillarSort(config, environment, logger=logger, animator=animator,
                            plotter=plotter, chime=chime)
    pillarsort.start()
    try:
        pillarsort.run(max_steps=args.max_steps)
    except KeyboardInterrupt:
        print("\nSort interrupted by user.")
    finally:
        pillarsort.finish()


if __name__ == "__main__":
    main()
