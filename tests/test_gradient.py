"""Tests for gradient estimation."""

import pytest
import numpy as np

from py_landscape.core.alea_prng import AleaPRNG
from py_landscape.core.gradient import differentiate
from py_landscape.core.heightfield import generate


class TestDifferentiate:
    """Test the backward three point variation estimate."""

    def test_shape_matches_input(self):
        heights = generate(2.0, 4, 3, 2, AleaPRNG("shape"))
        assert differentiate(heights).shape == heights.shape

    def test_edges_are_zero(self):
        """Cells on the x == 0 or y == 0 edges are exactly 0."""
        heights = np.random.default_rng(3).normal(size=(9, 7))
        gradient = differentiate(heights)

        assert np.all(gradient[0, :] == 0)
        assert np.all(gradient[:, 0] == 0)

    def test_linear_ramp(self):
        """For h = 3x + y every interior value is -8/3."""
        x, y = np.meshgrid(np.arange(4), np.arange(3), indexing="ij")
        heights = (3 * x + y).astype(float)

        gradient = differentiate(heights)

        np.testing.assert_allclose(gradient[1:, 1:], np.full((3, 2), -8.0 / 3.0))

    def test_single_cell(self):
        """Hand computed value for one interior point."""
        heights = np.array([[1.0, 2.0], [4.0, 10.0]])
        gradient = differentiate(heights)

        # ((2 - 10) + (1 - 10) + (4 - 10)) / 3
        assert gradient[1, 1] == pytest.approx(-23.0 / 3.0)

    def test_only_backward_neighbours_count(self):
        """Changing an east or south neighbour leaves a point unchanged."""
        heights = np.zeros((4, 4))
        before = differentiate(heights)[1, 1]

        heights[2, 1] = 5.0
        heights[1, 2] = 5.0
        heights[2, 2] = 5.0

        assert differentiate(heights)[1, 1] == before

    def test_flat_field_is_zero(self):
        np.testing.assert_array_equal(differentiate(np.ones((5, 5))), np.zeros((5, 5)))

    def test_input_is_not_modified(self):
        heights = np.arange(9, dtype=float).reshape(3, 3)
        copy = heights.copy()
        differentiate(heights)
        np.testing.assert_array_equal(heights, copy)

    def test_rejects_non_2d(self):
        with pytest.raises(ValueError, match="2D"):
            differentiate(np.zeros(5))
