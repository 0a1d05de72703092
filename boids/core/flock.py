import logging
from dataclasses import dataclass, replace
from typing import Iterator, Sequence

import numpy as np

from .boid import BOID_TYPES, Boid
from .vector import as_vector

log = logging.getLogger(__name__)


DEFAULT_GOAL_SEPARATION = 25.0
DEFAULT_GOAL_ALIGNMENT = 50.0
DEFAULT_GOAL_COHESION = 50.0


@dataclass(frozen=True, eq=False)
class Flock:
    """
    All boids plus the neighbor radii and optional target for one tick.

    A Flock is a snapshot: `update` builds the next one and leaves this one
    untouched, so every boid in a tick steers against the same neighbors.
    """
    boids: Sequence[Boid] = ()
    goal_separation: float = DEFAULT_GOAL_SEPARATION
    goal_alignment: float = DEFAULT_GOAL_ALIGNMENT
    goal_cohesion: float = DEFAULT_GOAL_COHESION
    target: np.ndarray | None = None

    def __post_init__(self):
        boids = tuple(self.boids)
        object.__setattr__(self, "boids", boids)
        for name in ("goal_separation", "goal_alignment", "goal_cohesion"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")

        dims = {b.dim for b in boids}
        if len(dims) > 1:
            raise ValueError(f"flock mixes boid dimensions {sorted(dims)}")

        if self.target is not None:
            target = as_vector(self.target)
            if boids and target.shape != (boids[0].dim,):
                raise ValueError(f"target needs {boids[0].dim} components, got {target.shape[0]}")
            if not np.all(np.isfinite(target)):
                raise ValueError(f"target must be finite, got {target}")
            object.__setattr__(self, "target", target)

    @classmethod
    def scatter(
        cls,
        count: int,
        bounds,
        dim: int = 2,
        rng: np.random.Generator | None = None,
        boid_kwargs: dict | None = None,
        **flock_kwargs,
    ) -> "Flock":
        """
        Random positions inside axis-aligned bounds, random headings.

        bounds: [xmin, xmax, ymin, ymax] (+ [zmin, zmax] when dim == 3)
        """
        if dim not in BOID_TYPES:
            raise ValueError(f"dim must be one of {sorted(BOID_TYPES)}, got {dim}")
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if len(bounds) != 2 * dim:
            raise ValueError(f"{dim}D bounds need {2 * dim} values, got {len(bounds)}")
        rng = rng or np.random.default_rng()
        boid_cls = BOID_TYPES[dim]
        lo = np.asarray(bounds[0::2], dtype=float)
        hi = np.asarray(bounds[1::2], dtype=float)
        boids = [
            boid_cls.new(rng.uniform(lo, hi), rng=rng, **(boid_kwargs or {}))
            for _ in range(count)
        ]
        log.debug("scattered %d %dD boids in %s", count, dim, list(bounds))
        return cls(boids=boids, **flock_kwargs)

    @property
    def dim(self) -> int | None:
        if self.boids:
            return self.boids[0].dim
        if self.target is not None:
            return len(self.target)
        return None

    def __len__(self) -> int:
        return len(self.boids)

    def __iter__(self) -> Iterator[Boid]:
        return iter(self.boids)

    def positions(self) -> np.ndarray:
        if not self.boids:
            return np.zeros((0, self.dim or 0))
        return np.array([b.position for b in self.boids])

    def velocities(self) -> np.ndarray:
        if not self.boids:
            return np.zeros((0, self.dim or 0))
        return np.array([b.velocity for b in self.boids])

    def update(self) -> "Flock":
        """Advance every boid one tick against this snapshot."""
        return self.with_boids(boid.update(self) for boid in self.boids)

    def with_boids(self, boids) -> "Flock":
        return replace(self, boids=tuple(boids))

    def with_boid(self, boid: Boid) -> "Flock":
        return self.with_boids(self.boids + (boid,))

    def without_boid(self, index: int) -> "Flock":
        boids = list(self.boids)
        del boids[index]
        return self.with_boids(boids)

    def with_target(self, target) -> "Flock":
        return replace(self, target=target)
