"""Pairwise gravitational forces and the per-step kinematic update.

Direct O(n^2) summation over unordered pairs. No softening is applied by
default, so coincident bodies yield infinite or NaN forces which propagate
into the state silently; the per-axis acceleration clamp applied by the
integrator bounds everything short of an exact overlap.
"""

import logging
from typing import Optional, Sequence
import numpy as np
from nbody_tui.physics.body import Body
from nbody_tui.physics.integrators import Integrator, KinematicIntegrator

logger = logging.getLogger(__name__)


def compute_forces(bodies: Sequence[Body], gravity: float, softening: float = 0.0) -> np.ndarray:
    """Compute the net gravitational force on every body.

    Every unordered pair (i, j) with i < j is visited exactly once; the
    pair contributes -F to body i and +F to body j along the unit vector
    from j to i, so the interaction is attractive and equal-and-opposite.

    Args:
        bodies: Ordered body collection
        gravity: Gravitational constant G (live setting)
        softening: Plummer-style softening length (0 keeps the bare 1/r^2 law)

    Returns:
        Array of shape (n, 2) with the force on each body
    """
    n = len(bodies)
    forces = np.zeros((n, 2))
    if n < 2:
        return forces

    positions = np.array([[b.x, b.y] for b in bodies], dtype=float)
    masses = np.array([b.mass for b in bodies], dtype=float)

    i_idx, j_idx = np.triu_indices(n, k=1)
    # Trail markers and other massless entries never take part
    active = (masses[i_idx] > 0) & (masses[j_idx] > 0)
    i_idx, j_idx = i_idx[active], j_idx[active]
    if i_idx.size == 0:
        return forces

    with np.errstate(divide="ignore", invalid="ignore"):
        r_diff = positions[i_idx] - positions[j_idx]
        r = np.sqrt(np.sum(r_diff ** 2, axis=1))
        magnitude = gravity * masses[i_idx] * masses[j_idx] / (r ** 2 + softening ** 2)
        r_hat = r_diff / r[:, np.newaxis]
        contribution = r_hat * magnitude[:, np.newaxis]

    np.add.at(forces, i_idx, -contribution)
    np.add.at(forces, j_idx, contribution)

    if logger.isEnabledFor(logging.DEBUG):
        for i, j, dist in zip(i_idx, j_idx, r):
            logger.debug("[%d,%d] r: %r", i, j, float(dist))

    return forces


def advance(bodies: Sequence[Body], forces: np.ndarray, dt: float, drag: float,
            integrator: Optional[Integrator] = None):
    """Step every massive body with its accumulated force.

    Args:
        bodies: Ordered body collection (mutated in place)
        forces: Array of shape (n, 2) from compute_forces
        dt: Step length
        drag: Velocity decay factor
        integrator: Array integrator (KinematicIntegrator if None)
    """
    integrator = integrator or KinematicIntegrator()
    # Massless trail markers are never stepped
    indices = [i for i, body in enumerate(bodies) if body.mass > 0]
    if not indices:
        return

    moving = [bodies[i] for i in indices]
    positions = np.array([[b.x, b.y] for b in moving], dtype=float)
    velocities = np.array([[b.dx, b.dy] for b in moving], dtype=float)
    masses = np.array([b.mass for b in moving], dtype=float)
    applied = np.asarray(forces, dtype=float)[indices]

    with np.errstate(invalid="ignore"):
        new_positions, new_velocities = integrator.step(positions, velocities, masses, applied, dt, drag)

    for k, (i, body) in enumerate(zip(indices, moving)):
        body.x, body.y = float(new_positions[k, 0]), float(new_positions[k, 1])
        body.dx, body.dy = float(new_velocities[k, 0]), float(new_velocities[k, 1])
        logger.debug("[%d] force: (%r, %r)", i, float(applied[k, 0]), float(applied[k, 1]))
