import logging
from typing import Callable

from .flock import Flock
from .metrics import summarize

log = logging.getLogger(__name__)


class Simulator:
    def __init__(self, flock: Flock, log_every: int = 100):
        self.flock = flock
        self.t = 0
        self.log_every = log_every

    def step(self) -> Flock:
        """
        Advance one tick. The new flock is installed only after every boid has
        been updated against the previous snapshot.
        """
        self.flock = self.flock.update()
        self.t += 1
        if self.log_every and self.t % self.log_every == 0:
            stats = summarize(self.flock)
            log.debug(
                "tick %d: %d boids, polarization=%.3f, mean distance=%.2f",
                self.t,
                len(self.flock),
                stats["polarization"],
                stats["mean_pairwise_distance"],
            )
        return self.flock

    def run(self, steps: int, callback: Callable[[int, Flock], None] | None = None) -> Flock:
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")
        log.info("running %d ticks with %d boids", steps, len(self.flock))
        for _ in range(steps):
            flock = self.step()
            if callback:
                callback(self.t, flock)
        return self.flock

    def set_target(self, target):
        self.flock = self.flock.with_target(target)

    def clear_target(self):
        self.flock = self.flock.with_target(None)
