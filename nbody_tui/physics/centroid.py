"""Robust recentering around the largest cluster of bodies.

A single-iteration RANSAC vote: every body position is tried as a
candidate centre and the candidate with the most bodies inside
``radius`` wins. A naive mean would be dragged off-screen by one ejected
body; the vote ignores it.
"""

from typing import Iterable, Sequence, Tuple
import numpy as np
from nbody_tui.physics.body import Body

INLIER_RADIUS = 150.0
RECENTER_FACTOR = 0.1


def ransac_centroid(bodies: Sequence[Body], radius: float = INLIER_RADIUS) -> Tuple[float, float]:
    """Estimate the centre of the largest cluster.

    The inlier positions of the best candidate are summed and divided by
    the total number of bodies, not the inlier count. With every body
    inside the radius this is the plain arithmetic mean.

    Args:
        bodies: Body collection
        radius: Inlier distance threshold (strict)

    Returns:
        Centroid (cx, cy); (0, 0) for an empty collection
    """
    n = len(bodies)
    if n == 0:
        return 0.0, 0.0

    positions = np.array([[b.x, b.y] for b in bodies], dtype=float)
    # distances[c, k]: distance from candidate c to body k
    distances = np.sqrt(np.sum((positions[:, np.newaxis, :] - positions[np.newaxis, :, :]) ** 2, axis=2))
    inliers = distances < radius
    counts = np.sum(inliers, axis=1)

    best = int(np.argmax(counts))  # first candidate with the highest count
    if counts[best] == 0:
        return 0.0, 0.0
    center = np.sum(positions[inliers[best]], axis=0) / n
    return float(center[0]), float(center[1])


def recenter(bodies: Iterable[Body], trail: Iterable[Body], centroid: Tuple[float, float],
             factor: float = RECENTER_FACTOR):
    """Shift bodies and trail markers by a fraction of the centroid.

    Args:
        bodies: Live bodies (mutated in place)
        trail: Trail markers (mutated in place)
        centroid: Cluster centre from ransac_centroid
        factor: Fraction of the centroid removed per step
    """
    shift_x = factor * centroid[0]
    shift_y = factor * centroid[1]
    for collection in (bodies, trail):
        for body in collection:
            body.x -= shift_x
            body.y -= shift_y
