"""Numerical integrators for the body collection."""

from nbody_tui.physics.integrators.base import Integrator
from nbody_tui.physics.integrators.kinematic import KinematicIntegrator

__all__ = ["Integrator", "KinematicIntegrator"]
