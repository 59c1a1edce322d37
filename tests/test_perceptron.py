"""Tests pour la règle d'apprentissage du perceptron."""

import numpy as np
import pytest

from neuronlab.gates import LogicGate, TrainingSample, logic_gate_samples
from neuronlab.perceptron import (
    NeuronWeights,
    accuracy,
    perceptron_step,
    predict,
    random_weights,
    run_epoch,
)


class TestPerceptronStep:
    """Tests pour un pas de la règle d'apprentissage."""

    def test_tie_goes_to_one(self):
        """z = 0 donne une prédiction de 1."""
        assert predict(NeuronWeights(0.0, 0.0, 0.0), 5.0, -3.0) == 1

    def test_negative_error_update(self):
        weights, trace = perceptron_step(NeuronWeights(0, 0, 0), TrainingSample(1, 1, 0), 0.1)

        assert trace.z == 0
        assert trace.y_hat == 1
        assert trace.error == -1
        assert (trace.dw1, trace.dw2, trace.db) == pytest.approx((-0.1, -0.1, -0.1))
        assert weights == NeuronWeights(-0.1, -0.1, -0.1)

    def test_positive_error_update(self):
        weights, trace = perceptron_step(NeuronWeights(0, 0, -1), TrainingSample(2, 3, 1), 0.5)

        assert trace.error == 1
        assert weights.w1 == pytest.approx(1.0)
        assert weights.w2 == pytest.approx(1.5)
        assert weights.b == pytest.approx(-0.5)

    def test_no_update_when_correct(self):
        """Erreur nulle: poids identiques bit à bit et deltas nuls."""
        before = NeuronWeights(0.123456789, -0.987654321, 0.3)
        after, trace = perceptron_step(before, TrainingSample(1, 0, 1), 0.1)

        assert trace.error == 0
        assert not trace.updated
        assert after is before
        assert (after.w1, after.w2, after.b) == (before.w1, before.w2, before.b)
        assert (trace.dw1, trace.dw2, trace.db) == (0.0, 0.0, 0.0)

    def test_sample_index_in_trace(self):
        _, trace = perceptron_step(NeuronWeights(), TrainingSample(0, 0, 1), 0.1, sample_index=3)
        assert trace.sample_index == 3


class TestAccuracy:
    """Tests pour le calcul de précision."""

    def test_empty_dataset(self):
        assert accuracy(NeuronWeights(1, 1, 1), []) == 0.0

    def test_perfect_and(self):
        weights = NeuronWeights(1.0, 1.0, -1.5)
        assert accuracy(weights, logic_gate_samples("AND")) == 100.0

    def test_xor_never_perfect(self):
        """Aucun poids ne dépasse 75 % sur XOR."""
        rng = np.random.default_rng(0)
        xor = logic_gate_samples("XOR")
        for _ in range(2000):
            w = NeuronWeights(*rng.uniform(-5, 5, size=3))
            assert accuracy(w, xor) <= 75.0


class TestEpochScenario:
    """Passage séquentiel sur AND à partir de poids nuls."""

    def test_first_epoch(self):
        weights, traces = run_epoch(NeuronWeights(0, 0, 0), logic_gate_samples("AND"), 0.1)

        assert [t.error for t in traces] == [-1, 0, 0, 1]
        assert traces[0].z == 0
        assert traces[0].y_hat == 1
        assert traces[1].z == pytest.approx(-0.1)
        assert traces[1].y_hat == 0
        assert traces[3].z == pytest.approx(-0.1)

        assert weights.w1 == pytest.approx(0.1)
        assert weights.w2 == pytest.approx(0.1)
        assert weights.b == pytest.approx(0.0)

    def test_accuracy_after_first_epoch(self):
        """Avec (0.1, 0.1, 0.0), seul (1,1) est bien classé: 25 %."""
        weights, _ = run_epoch(NeuronWeights(0, 0, 0), logic_gate_samples("AND"), 0.1)
        assert accuracy(weights, logic_gate_samples("AND")) == 25.0

    def test_shuffled_epoch_visits_every_sample(self):
        samples = logic_gate_samples("OR")
        _, traces = run_epoch(NeuronWeights(), samples, 0.1, np.random.default_rng(3))
        assert sorted(t.sample_index for t in traces) == [0, 1, 2, 3]


class TestConvergence:
    """Convergence sur les portes séparables."""

    @pytest.mark.parametrize("gate", [LogicGate.AND, LogicGate.OR, LogicGate.NAND])
    @pytest.mark.parametrize("seed", range(10))
    def test_sequential_converges(self, gate, seed):
        rng = np.random.default_rng(seed)
        samples = logic_gate_samples(gate)
        weights = random_weights(rng)

        for _ in range(1000):
            weights, _ = run_epoch(weights, samples, 0.1, rng)
            if accuracy(weights, samples) == 100.0:
                break
        assert accuracy(weights, samples) == 100.0

        # Plus aucune erreur: les poids ne bougent plus
        stable, traces = run_epoch(weights, samples, 0.1, rng)
        assert stable == weights
        assert all(t.error == 0 for t in traces)

    @pytest.mark.parametrize("gate", [LogicGate.AND, LogicGate.OR, LogicGate.NAND])
    def test_random_steps_converge(self, gate):
        rng = np.random.default_rng(11)
        samples = logic_gate_samples(gate)
        weights = random_weights(rng)

        for _ in range(4000):
            weights, _ = perceptron_step(weights, samples[int(rng.integers(4))], 0.1)
        assert accuracy(weights, samples) == 100.0

    def test_xor_keeps_failing(self):
        rng = np.random.default_rng(0)
        samples = logic_gate_samples("XOR")
        weights = random_weights(rng)
        for _ in range(500):
            weights, _ = run_epoch(weights, samples, 0.1, rng)
            assert accuracy(weights, samples) <= 75.0


class TestRandomWeights:
    def test_range(self):
        rng = np.random.default_rng(0)
        for _ in range(100):
            w = random_weights(rng, scale=0.2)
            assert all(-0.2 <= x < 0.2 for x in (w.w1, w.w2, w.b))
