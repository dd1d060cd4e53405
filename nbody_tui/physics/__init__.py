"""Physics core: bodies, pairwise forces, integration and centroid stabilization."""

from nbody_tui.physics.body import Body, Marker
from nbody_tui.physics.integrators import Integrator, KinematicIntegrator
from nbody_tui.physics.forces import compute_forces, advance
from nbody_tui.physics.centroid import ransac_centroid, recenter

__all__ = [
    "Body", "Marker", "Integrator", "KinematicIntegrator",
    "compute_forces", "advance", "ransac_centroid", "recenter",
]
