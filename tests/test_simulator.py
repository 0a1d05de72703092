"""Tests for the Simulator loop."""

import logging

import numpy as np
import pytest

from boids.core.flock import Flock
from boids.core.simulator import Simulator


class TestSimulator:
    """Tests for Simulator."""

    def test_step_advances(self, random_flock):
        """Test one step matches Flock.update."""
        sim = Simulator(random_flock)
        flock = sim.step()
        assert sim.t == 1
        assert sim.flock is flock
        np.testing.assert_array_equal(flock.positions(), random_flock.update().positions())

    def test_run_calls_callback(self, random_flock):
        """Test the callback sees every tick in order."""
        seen = []
        sim = Simulator(random_flock)
        sim.run(5, callback=lambda t, flock: seen.append((t, len(flock))))
        assert seen == [(t, 30) for t in range(1, 6)]
        assert sim.t == 5

    def test_run_zero_steps(self, random_flock):
        """Test zero steps leaves the flock alone."""
        sim = Simulator(random_flock)
        assert sim.run(0) is random_flock

    def test_negative_steps(self, random_flock):
        """Test negative step counts are rejected."""
        with pytest.raises(ValueError):
            Simulator(random_flock).run(-1)

    def test_target_control(self, random_flock):
        """Test the target can be set and cleared between ticks."""
        sim = Simulator(random_flock)
        sim.set_target([30.0, 30.0])
        np.testing.assert_array_equal(sim.flock.target, [30.0, 30.0])
        sim.clear_target()
        assert sim.flock.target is None

    def test_logs_progress(self, random_flock, caplog):
        """Test periodic debug logging."""
        sim = Simulator(random_flock, log_every=2)
        with caplog.at_level(logging.DEBUG, logger="boids.core.simulator"):
            sim.run(4)
        ticks = [r.getMessage() for r in caplog.records if r.getMessage().startswith("tick")]
        assert len(ticks) == 2

    def test_empty_flock(self):
        """Test an empty flock runs without error."""
        sim = Simulator(Flock(), log_every=1)
        assert len(sim.run(3)) == 0
