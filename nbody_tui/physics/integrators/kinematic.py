"""Constant-acceleration integrator with clamping and drag."""

from typing import Tuple
import numpy as np
from nbody_tui.physics.body import MAX_ACCELERATION
from nbody_tui.physics.integrators.base import Integrator


class KinematicIntegrator(Integrator):
    """Array form of Body.step.

    a = clip(F / m, +/- max_acceleration) per axis, then
    r_new = r + (v*t + a*t^2/2), v_new = (v + a*t) * drag.
    """

    def __init__(self, max_acceleration: float = MAX_ACCELERATION):
        self.max_acceleration = max_acceleration

    @property
    def name(self) -> str:
        return "kinematic"

    @property
    def order(self) -> int:
        return 2

    def step(self, positions, velocities, masses, forces, dt: float, drag: float = 1.0) -> Tuple:
        positions = np.asarray(positions, dtype=float)
        velocities = np.asarray(velocities, dtype=float)
        masses = np.asarray(masses, dtype=float).reshape(-1, 1)
        forces = np.asarray(forces, dtype=float)

        accelerations = np.clip(forces / masses, -self.max_acceleration, self.max_acceleration)

        # Same operation order as Body.step so both forms agree bit for bit
        new_positions = positions + (velocities * dt + 0.5 * accelerations * dt ** 2)
        new_velocities = (velocities + accelerations * dt) * drag

        return new_positions, new_velocities
