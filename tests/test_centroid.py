"""Tests for the RANSAC centroid stabilizer."""

import numpy as np
from nbody_tui.physics.body import Body, Marker
from nbody_tui.physics.centroid import ransac_centroid, recenter


def make_body(x, y):
    return Body(mass=1.0, x=x, y=y, dx=0.0, dy=0.0, marker=Marker("☼", "blue"))


def test_centroid_of_tight_cluster_is_mean():
    """Test all-inlier input gives the arithmetic mean."""
    bodies = [make_body(0.0, 0.0), make_body(20.0, -10.0), make_body(-5.0, 40.0), make_body(9.0, 3.0)]
    cx, cy = ransac_centroid(bodies)

    assert np.isclose(cx, np.mean([0.0, 20.0, -5.0, 9.0]))
    assert np.isclose(cy, np.mean([0.0, -10.0, 40.0, 3.0]))


def test_outlier_is_ignored_but_total_count_divides():
    """Test the ejected body is excluded and the sum is divided by n."""
    bodies = [make_body(0.0, 0.0), make_body(10.0, 0.0), make_body(0.0, 10.0), make_body(1000.0, 1000.0)]
    cx, cy = ransac_centroid(bodies)

    assert np.isclose(cx, 10.0 / 4)
    assert np.isclose(cy, 10.0 / 4)


def test_radius_is_strict():
    """Test a body exactly at the radius is not an inlier."""
    bodies = [make_body(0.0, 0.0), make_body(150.0, 0.0)]
    cx, cy = ransac_centroid(bodies, radius=150.0)

    # Both candidates tie at one inlier; the first wins
    assert (cx, cy) == (0.0, 0.0)


def test_empty_collection():
    """Test an empty collection has a zero centroid."""
    assert ransac_centroid([]) == (0.0, 0.0)


def test_recenter_moves_bodies_and_trail():
    """Test 10% of the centroid is removed from bodies and trail on both axes."""
    bodies = [make_body(10.0, 20.0)]
    trail = [make_body(-4.0, 6.0).trail()]
    recenter(bodies, trail, (10.0, 20.0))

    assert np.allclose(bodies[0].position, (9.0, 18.0))
    assert np.allclose(trail[0].position, (-5.0, 4.0))
