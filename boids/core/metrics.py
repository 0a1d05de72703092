import numpy as np

from .flock import Flock


def centroid(flock: Flock) -> np.ndarray:
    if len(flock) == 0:
        raise ValueError("centroid of an empty flock is undefined")
    return flock.positions().mean(axis=0)


def coverage_extent(flock: Flock) -> float:
    """
    Rough coverage proxy: area (volume in 3D) of the bounding box around all boids.
    """
    positions = flock.positions()
    if len(positions) == 0:
        return 0.0
    mins = positions.min(axis=0)
    maxs = positions.max(axis=0)
    return float(np.prod(maxs - mins))


def mean_pairwise_distance(flock: Flock) -> float:
    """
    Cohesion proxy: average pairwise distance between boids.
    """
    positions = flock.positions()
    if len(positions) < 2:
        return 0.0
    dists = np.linalg.norm(positions[:, None, :] - positions[None, :, :], axis=-1)
    # exclude self distances (zero diagonal)
    n = len(positions)
    return float(dists.sum() / (n * (n - 1)))


def collision_count(flock: Flock, threshold: float = 1.0) -> int:
    """
    Count number of boid pairs closer than threshold.
    """
    positions = flock.positions()
    if len(positions) < 2:
        return 0
    dists = np.linalg.norm(positions[:, None, :] - positions[None, :, :], axis=-1)
    collisions = (dists < threshold).astype(int)
    # zero diagonal and double counted pairs
    collisions = np.triu(collisions, k=1)
    return int(collisions.sum())


def mean_speed(flock: Flock) -> float:
    velocities = flock.velocities()
    if len(velocities) == 0:
        return 0.0
    return float(np.linalg.norm(velocities, axis=1).mean())


def polarization(flock: Flock) -> float:
    """
    Order parameter: length of the mean unit heading.
    1.0 when every moving boid points the same way, near 0.0 when headings cancel.
    """
    velocities = flock.velocities()
    speeds = np.linalg.norm(velocities, axis=1)
    moving = speeds > 0
    if not moving.any():
        return 0.0
    headings = velocities[moving] / speeds[moving, None]
    return float(np.linalg.norm(headings.mean(axis=0)))


def summarize(flock: Flock, collision_threshold: float = 1.0) -> dict:
    return {
        "coverage_extent": coverage_extent(flock),
        "mean_pairwise_distance": mean_pairwise_distance(flock),
        "collisions": collision_count(flock, collision_threshold),
        "mean_speed": mean_speed(flock),
        "polarization": polarization(flock),
        "centroid": centroid(flock).tolist() if len(flock) else None,
    }
