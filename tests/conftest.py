import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from boids.core.boid import Boid2D, Boid3D
from boids.core.flock import Flock


@pytest.fixture
def make_boid():
    """Build a boid at `position`, dimension picked from the number of components."""
    def _make(position, velocity=None, **kwargs):
        cls = Boid2D if len(position) == 2 else Boid3D
        if velocity is None:
            velocity = [0.0] * len(position)
        return cls(position=position, velocity=velocity, **kwargs)
    return _make


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def random_flock(rng):
    """Thirty planar boids packed densely enough to have plenty of neighbors."""
    return Flock.scatter(30, [0, 60, 0, 60], dim=2, rng=rng, goal_separation=10.0, goal_alignment=20.0, goal_cohesion=20.0)


@pytest.fixture
def random_flock_3d(rng):
    return Flock.scatter(30, [0, 40, 0, 40, 0, 40], dim=3, rng=rng, goal_separation=10.0, goal_alignment=20.0, goal_cohesion=20.0)
