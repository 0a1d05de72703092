"""Tests for vector and limiting primitives."""

import numpy as np
import pytest

from boids.core.vector import as_vector, distance, limit_magnitude, magnitude, normalize, zeros


class TestAsVector:
    """Tests for as_vector."""

    def test_int_input_promoted_to_float(self):
        """Test integer components become float64."""
        v = as_vector([1, 2])
        assert v.dtype == np.float64

    def test_float32_preserved(self):
        """Test float32 input keeps its dtype."""
        v = as_vector(np.array([1.0, 2.0], dtype=np.float32))
        assert v.dtype == np.float32

    def test_read_only(self):
        """Test vectors cannot be modified in place."""
        v = as_vector([1.0, 2.0])
        with pytest.raises(ValueError):
            v[0] = 5.0

    def test_copies_input(self):
        """Test the source array is not shared."""
        src = np.array([1.0, 2.0])
        v = as_vector(src)
        src[0] = 9.0
        assert v[0] == 1.0

    def test_rejects_matrix(self):
        """Test 2-D input is rejected."""
        with pytest.raises(ValueError):
            as_vector([[1.0, 2.0], [3.0, 4.0]])


class TestPrimitives:
    """Tests for distance, normalize and limit_magnitude."""

    def test_distance(self):
        """Test Euclidean distance in 2D and 3D."""
        assert distance(as_vector([0, 0]), as_vector([3, 4])) == pytest.approx(5.0)
        assert distance(as_vector([1, 2, 3]), as_vector([1, 2, 3])) == 0.0

    def test_normalize_unit_length(self):
        """Test normalize returns a unit vector in the same direction."""
        v = normalize(as_vector([0.0, -4.0, 3.0]))
        assert magnitude(v) == pytest.approx(1.0)
        np.testing.assert_allclose(v, [0.0, -0.8, 0.6])

    def test_normalize_zero_vector_stays_zero(self):
        """Test the zero vector normalizes to zero instead of NaN."""
        v = normalize(zeros(3))
        assert not np.isnan(v).any()
        np.testing.assert_array_equal(v, [0.0, 0.0, 0.0])

    def test_limit_magnitude_clamps_long_vectors(self):
        """Test vectors longer than max are scaled to exactly max."""
        v = limit_magnitude(as_vector([30.0, 40.0]), 5.0)
        np.testing.assert_allclose(v, [3.0, 4.0])

    def test_limit_magnitude_keeps_short_vectors(self):
        """Test vectors within max come back unchanged."""
        v = as_vector([0.3, 0.4])
        assert limit_magnitude(v, 1.0) is v

    def test_limit_magnitude_boundary_unchanged(self):
        """Test a vector exactly at max is not rescaled."""
        v = as_vector([3.0, 4.0])
        np.testing.assert_array_equal(limit_magnitude(v, 5.0), [3.0, 4.0])

    def test_float32_stays_float32(self):
        """Test operations keep the scalar type."""
        v = as_vector([3.0, 4.0], np.float32)
        assert normalize(v).dtype == np.float32
        assert limit_magnitude(v, 1.0).dtype == np.float32
