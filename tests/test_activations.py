"""Tests pour les fonctions d'activation."""

import numpy as np
import pytest

from neuronlab.activations import (
    relu,
    relu_curve,
    sigmoid,
    sigmoid_curve,
    threshold_unit,
    tlu_curve,
)


class TestThresholdUnit:
    """Tests pour le neurone de McCulloch-Pitts."""

    def test_fires_at_threshold(self):
        out = threshold_unit(1, 1, 1.0, 1.0, theta=2.0)
        assert out.z == 2.0
        assert out.output == 1

    def test_below_threshold(self):
        out = threshold_unit(1, 0, 1.0, 1.0, theta=1.5)
        assert out.output == 0

    def test_bias_is_negated_threshold(self):
        assert threshold_unit(0, 0, 1.0, 1.0, theta=1.5).bias == -1.5


class TestScalarActivations:
    def test_relu(self):
        assert relu(-3.0) == 0.0
        assert relu(2.5) == 2.5

    def test_sigmoid_center(self):
        assert sigmoid(0.0) == 0.5

    def test_sigmoid_symmetry(self):
        assert sigmoid(2.0) + sigmoid(-2.0) == pytest.approx(1.0)

    def test_sigmoid_extremes(self):
        """Pas de débordement pour |z| très grand."""
        assert sigmoid(1000.0) == 1.0
        assert sigmoid(-1000.0) == 0.0


class TestCurves:
    """Tests pour les courbes de réponse."""

    def test_tlu_curve(self):
        x, y = tlu_curve(1.5)
        assert len(x) == 41
        assert x[0] == pytest.approx(-0.5)
        assert x[-1] == pytest.approx(3.5)
        assert y[0] == 0 and y[-1] == 1
        # Escalier monotone: un seul saut
        assert np.count_nonzero(np.diff(y)) == 1

    def test_relu_curve(self):
        x, z, out = relu_curve(-2.0)
        assert len(x) == 51
        assert np.allclose(z, x * -2.0)
        assert (out >= 0).all()
        assert out[0] == pytest.approx(10.0)

    def test_sigmoid_curve(self):
        x, out = sigmoid_curve(50.0)
        assert len(x) == 101
        assert np.isfinite(out).all()
        assert ((out >= 0) & (out <= 1)).all()
        assert (np.diff(out) >= 0).all()
