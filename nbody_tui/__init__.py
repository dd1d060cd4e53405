"""N-body TUI - an interactive gravitational simulator for the terminal.

Features:
- Naive O(n^2) pairwise gravity with clamped constant-acceleration steps
- RANSAC-style recentering around the largest cluster
- Live-tunable speed, gravity and drag settings
- Pluggable Simulatable scenarios driven by a fixed-cadence engine
- curses front end with entity info, settings and log panels
"""

__version__ = "0.1.0"

from nbody_tui.simulations.engine import Simulation
from nbody_tui.simulations.nbody import NBody
from nbody_tui.utils.config import Config

__all__ = [
    "Simulation",
    "NBody",
    "Config",
]
