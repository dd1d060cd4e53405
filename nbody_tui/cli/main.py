"""CLI main entry point."""

import argparse
from dataclasses import replace
from typing import List, Optional
from nbody_tui.render.terminal import install_hooks, terminal
from nbody_tui.simulations.nbody import NBody
from nbody_tui.utils.config import Config, load_config, save_config
from nbody_tui.utils.reproducibility import set_all_seeds

# argparse dest -> Config field for options that override the config file
OVERRIDES = {
    'bodies': 'bodies',
    'seed': 'seed',
    'speed': 'speed',
    'gravity': 'gravity',
    'drag': 'drag',
    'softening': 'softening',
    'trail_length': 'trail_length',
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="N-body TUI - interactive gravity simulation in the terminal")

    parser.add_argument('--config', type=str, default=None,
                       help='Load settings from a .json or .yaml file')
    parser.add_argument('--bodies', type=int, default=None,
                       help='Number of bodies in a fresh scenario (default: 3)')
    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed for reproducibility')

    # Initial values of the live settings
    parser.add_argument('--speed', type=int, default=None,
                       help='Initial step length (default: 3)')
    parser.add_argument('--gravity', type=float, default=None,
                       help='Initial gravitational constant G (default: 100)')
    parser.add_argument('--drag', type=float, default=None,
                       help='Initial velocity drag factor (default: 0.99)')

    parser.add_argument('--softening', type=float, default=None,
                       help='Softening length added to r^2 (default: 0, bare 1/r^2)')
    parser.add_argument('--trail-length', type=int, default=None,
                       help='Maximum number of trail markers kept (default: 500)')
    parser.add_argument('--running', action='store_true',
                       help='Start unpaused')
    parser.add_argument('--save-config', type=str, default=None,
                       help='Write the resulting config to a file and exit')
    return parser


def build_config(args: argparse.Namespace) -> Config:
    """Merge the config file (if any) with command line overrides."""
    config = load_config(args.config) if args.config else Config()
    changes = {
        field: getattr(args, dest)
        for dest, field in OVERRIDES.items()
        if getattr(args, dest) is not None
    }
    if args.running:
        changes['paused'] = False
    return replace(config, **changes).validate()


def run_simulation(config: Config):
    """Run the interactive simulation until the user quits."""
    rng = set_all_seeds(config.seed)
    simulation = NBody.init(config, rng)

    install_hooks()
    with terminal() as renderer:
        simulation.run(renderer)


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = build_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    if args.save_config:
        save_config(config, args.save_config)
        print(f"Config written to {args.save_config}")
        return

    run_simulation(config)


if __name__ == '__main__':
    main()
