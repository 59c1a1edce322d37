"""Tests pour la frontière de décision."""

import numpy as np
import pytest

from neuronlab.boundary import (
    REAL_WORLD_VIEWPORT,
    SANDBOX_EPSILON,
    SANDBOX_VIEWPORT,
    Viewport,
    boundary_segment,
    decision_grid,
)
from neuronlab.perceptron import NeuronWeights


def on_line(weights, point):
    return weights.w1 * point[0] + weights.w2 * point[1] + weights.b == pytest.approx(0, abs=1e-9)


class TestBoundarySegment:
    """Tests pour boundary_segment."""

    def test_diagonal(self):
        """x + y = 1 traverse la fenêtre d'un coin à l'autre."""
        w = NeuronWeights(1.0, 1.0, -1.0)
        points = boundary_segment(w, SANDBOX_VIEWPORT, SANDBOX_EPSILON)

        assert len(points) == 2
        assert sorted(points) == [(-0.5, pytest.approx(1.5)), (1.5, pytest.approx(-0.5))]

    def test_points_on_line_and_inside(self):
        w = NeuronWeights(0.7, -1.3, 4.0)
        points = boundary_segment(w, REAL_WORLD_VIEWPORT)

        assert len(points) == 2
        for p in points:
            assert on_line(w, p)
            assert REAL_WORLD_VIEWPORT.contains(*p)

    def test_vertical_line(self):
        """w2 = 0: seules les intersections avec les bords horizontaux existent."""
        w = NeuronWeights(1.0, 0.0, -0.5)
        points = boundary_segment(w, SANDBOX_VIEWPORT, SANDBOX_EPSILON)
        assert sorted(points) == [(0.5, -0.5), (0.5, 1.5)]

    def test_horizontal_line(self):
        w = NeuronWeights(0.0, 2.0, -10.0)
        points = boundary_segment(w, REAL_WORLD_VIEWPORT)
        assert sorted(points) == [(0.0, 5.0), (10.0, 5.0)]

    def test_degenerate_weights(self):
        """Poids quasi nuls: aucun segment."""
        assert boundary_segment(NeuronWeights(0.0, 0.0, 1.0), SANDBOX_VIEWPORT) == []
        assert boundary_segment(NeuronWeights(5e-5, -5e-5, 0.0), SANDBOX_VIEWPORT,
                                SANDBOX_EPSILON) == []

    def test_line_outside(self):
        assert boundary_segment(NeuronWeights(1.0, 1.0, -10.0), SANDBOX_VIEWPORT) == []

    def test_corner_touch(self):
        """Une droite qui ne touche qu'un coin ne produit pas de segment."""
        assert boundary_segment(NeuronWeights(1.0, 1.0, -3.0), SANDBOX_VIEWPORT) == []


class TestViewport:
    def test_degenerate(self):
        with pytest.raises(ValueError):
            Viewport(1.0, 1.0, 0.0, 1.0)


class TestDecisionGrid:
    """Tests pour la carte de signe."""

    def test_shape(self):
        grid = decision_grid(NeuronWeights(1, 1, -1), SANDBOX_VIEWPORT, 30)
        assert grid.shape == (30, 30)
        assert grid.dtype == np.bool_

    def test_constant_sign(self):
        assert decision_grid(NeuronWeights(0, 0, 1), SANDBOX_VIEWPORT).all()
        assert not decision_grid(NeuronWeights(0, 0, -1), SANDBOX_VIEWPORT).any()

    def test_half_plane(self):
        """x >= 5 sur [0, 10]: la moitié droite des colonnes est positive."""
        grid = decision_grid(NeuronWeights(1, 0, -5), REAL_WORLD_VIEWPORT, 10)
        assert not grid[:5].any()
        assert grid[5:].all()
