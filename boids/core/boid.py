"""
Reynolds flocking agents.

A boid steers by four behaviors computed against a read-only Flock snapshot:
separation, alignment, cohesion and targeting. `update` blends them by the
boid's weights and returns a new boid; the receiver is never modified.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, ClassVar

import numpy as np

from .vector import as_vector, distance, frozen, limit_magnitude, magnitude, normalize, zeros
from .weights import BoidWeights

if TYPE_CHECKING:
    from .flock import Flock


DEFAULT_MAX_SPEED = 2.0
DEFAULT_MAX_FORCE = 0.03
DEFAULT_TURN_RATE_LIMIT = 2.0


@dataclass(eq=False)
class Boid(ABC):
    position: np.ndarray
    velocity: np.ndarray
    acceleration: np.ndarray | None = None
    max_speed: float = DEFAULT_MAX_SPEED
    max_force: float = DEFAULT_MAX_FORCE
    turn_rate_limit: float = DEFAULT_TURN_RATE_LIMIT
    weights: BoidWeights = field(default_factory=BoidWeights)

    dim: ClassVar[int] = 0

    def __post_init__(self):
        self.position = as_vector(self.position)
        dtype = self.position.dtype
        self.velocity = as_vector(self.velocity, dtype)
        if self.acceleration is None:
            self.acceleration = zeros(self.dim, dtype)
        else:
            self.acceleration = as_vector(self.acceleration, dtype)
        for name in ("position", "velocity", "acceleration"):
            v = getattr(self, name)
            self._check_dim(v, name)
            if not np.all(np.isfinite(v)):
                raise ValueError(f"{name} must be finite, got {v}")
        for name in ("max_speed", "max_force", "turn_rate_limit"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")

    @staticmethod
    @abstractmethod
    def heading(angle: float) -> list:
        """Unit velocity components for a heading angle in radians."""
        ...

    @classmethod
    def new_with_angle(cls, position, angle: float, **overrides) -> "Boid":
        position = as_vector(position)
        return cls(
            position=position,
            velocity=as_vector(cls.heading(angle), position.dtype),
            **overrides,
        )

    @classmethod
    def new(cls, position, rng: np.random.Generator | None = None, **overrides) -> "Boid":
        rng = rng or np.random.default_rng()
        angle = rng.random() * 2.0 * math.pi
        return cls.new_with_angle(position, angle, **overrides)

    def _check_dim(self, v: np.ndarray, name: str):
        if v.shape != (self.dim,):
            raise ValueError(f"{type(self).__name__}.{name} needs {self.dim} components, got {v.shape[0]}")

    def _zeros(self) -> np.ndarray:
        return zeros(self.dim, self.position.dtype)

    def _steer(self, desired: np.ndarray) -> np.ndarray:
        # Reynolds: steering = desired velocity - current velocity, capped at max_force
        return limit_magnitude(normalize(desired) * self.max_speed - self.velocity, self.max_force)

    def separate(self, flock: "Flock") -> np.ndarray:
        steer = self._zeros()
        count = 0
        for boid in flock.boids:
            d = distance(self.position, boid.position)
            if 0 < d < flock.goal_separation:
                # closer neighbors push harder
                steer = steer + normalize(self.position - boid.position) / d
                count += 1

        if count > 0:
            steer = steer / count

        # skipped entirely when the pushes cancel out, unlike align/cohesion
        if magnitude(steer) > 0:
            steer = self._steer(steer)
        return frozen(steer)

    def align(self, flock: "Flock") -> np.ndarray:
        heading = self._zeros()
        count = 0
        for boid in flock.boids:
            d = distance(self.position, boid.position)
            if 0 < d < flock.goal_alignment:
                heading = heading + boid.velocity
                count += 1

        if count == 0:
            return self._zeros()
        return frozen(self._steer(heading / count))

    def cohesion(self, flock: "Flock") -> np.ndarray:
        center = self._zeros()
        count = 0
        for boid in flock.boids:
            d = distance(self.position, boid.position)
            if 0 < d < flock.goal_cohesion:
                center = center + boid.position
                count += 1

        if count == 0:
            return self._zeros()
        return frozen(self._steer(center / count - self.position))

    def targeting(self, flock: "Flock") -> np.ndarray:
        if flock.target is None:
            return self._zeros()
        return frozen(flock.target - self.position)

    def get_weights(self) -> BoidWeights:
        return self.weights

    def set_weights(self, weights: BoidWeights):
        self.weights = weights

    def with_weights(self, weights: BoidWeights) -> "Boid":
        return replace(self, weights=weights)

    def with_force(self, force) -> "Boid":
        """Apply one steering force: velocity, speed cap, position, acceleration reset."""
        force = as_vector(force, self.position.dtype)
        self._check_dim(force, "force")
        velocity = limit_magnitude(self.velocity + force, self.max_speed)
        return replace(
            self,
            position=self.position + velocity,
            velocity=velocity,
            acceleration=self.acceleration * 0,
        )

    def update(self, flock: "Flock") -> "Boid":
        weights = self.get_weights()
        separation = self.separate(flock) * weights.separation
        alignment = self.align(flock) * weights.alignment
        cohesion = self.cohesion(flock) * weights.cohesion
        targeting = self.targeting(flock) * weights.targeting
        # each application caps speed, so the order is part of the behavior
        return (
            self.with_force(separation)
            .with_force(alignment)
            .with_force(cohesion)
            .with_force(targeting)
        )

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (
            np.array_equal(self.position, other.position)
            and np.array_equal(self.velocity, other.velocity)
            and np.array_equal(self.acceleration, other.acceleration)
            and self.max_speed == other.max_speed
            and self.max_force == other.max_force
            and self.turn_rate_limit == other.turn_rate_limit
            and self.weights == other.weights
        )

    __hash__ = None


@dataclass(eq=False)
class Boid2D(Boid):
    """A boid in the plane."""
    dim: ClassVar[int] = 2

    @staticmethod
    def heading(angle: float) -> list:
        return [math.cos(angle), math.sin(angle)]


@dataclass(eq=False)
class Boid3D(Boid):
    """A boid in space. Starts with a planar heading; z velocity comes from steering."""
    dim: ClassVar[int] = 3

    @staticmethod
    def heading(angle: float) -> list:
        return [math.cos(angle), math.sin(angle), 0.0]


BOID_TYPES = {2: Boid2D, 3: Boid3D}
