"""Tests pour les générateurs de jeux synthétiques."""

import numpy as np
import pytest

from neuronlab.datasets import (
    DatasetType,
    LinearDatasetConfig,
    MoonsDatasetConfig,
    generate_dataset,
    generate_linear_samples,
    generate_moon_samples,
)
from neuronlab.errors import GenerationFailed


class TestLinearDataset:
    """Tests pour le générateur linéaire."""

    def test_sample_count(self):
        samples = generate_linear_samples(rng=np.random.default_rng(0))
        assert len(samples) == 100

    def test_domain(self):
        """Tous les points sont dans [0, 10]²."""
        samples = generate_linear_samples(rng=np.random.default_rng(1))
        for s in samples:
            assert 0 <= s.x1 <= 10
            assert 0 <= s.x2 <= 10

    def test_labels_respect_margin(self):
        """Chaque point est à au moins la marge de la droite, du bon côté."""
        config = LinearDatasetConfig()
        samples = generate_linear_samples(config, np.random.default_rng(2))
        for s in samples:
            threshold = config.slope * s.x1 + config.intercept
            if s.y == 1:
                assert s.x2 > threshold + config.margin
            else:
                assert s.x2 < threshold - config.margin

    def test_both_classes_present(self):
        samples = generate_linear_samples(rng=np.random.default_rng(3))
        labels = {s.y for s in samples}
        assert labels == {0, 1}

    def test_reproducible_with_seed(self):
        a = generate_linear_samples(rng=np.random.default_rng(42))
        b = generate_linear_samples(rng=np.random.default_rng(42))
        assert a == b

    def test_impossible_margin_fails(self):
        """Une marge plus large que le domaine épuise les tirages."""
        config = LinearDatasetConfig(margin=20.0, max_attempts=1000)
        with pytest.raises(GenerationFailed) as exc:
            generate_linear_samples(config, np.random.default_rng(0))

        assert exc.value.accepted == 0
        assert exc.value.requested == 100
        assert exc.value.attempts == 1000

    def test_invalid_config(self):
        with pytest.raises(ValueError):
            LinearDatasetConfig(low=5.0, high=5.0)


class TestMoonsDataset:
    """Tests pour le générateur de lunes."""

    def test_shape_and_balance(self):
        """120 points, 60 par classe, classe 0 en premier."""
        samples = generate_moon_samples(rng=np.random.default_rng(0))
        assert len(samples) == 120
        assert sum(s.y for s in samples) == 60
        assert all(s.y == 0 for s in samples[:60])
        assert all(s.y == 1 for s in samples[60:])

    def test_bounding_region(self):
        """Arcs de rayon 3.8 plus un bruit d'au plus ±1.0125."""
        samples = generate_moon_samples(rng=np.random.default_rng(5))
        for s in samples[:60]:
            assert -0.32 <= s.x1 <= 9.32
            assert 4.48 <= s.x2 <= 10.32
        for s in samples[60:]:
            assert -2.32 <= s.x1 <= 7.32
            assert 1.68 <= s.x2 <= 7.52

    def test_noise_free_arcs(self):
        """Sans bruit, les points sont exactement sur les arcs."""
        config = MoonsDatasetConfig(noise=0.0)
        samples = generate_moon_samples(config, np.random.default_rng(0))
        first = samples[0]
        assert first.x1 == pytest.approx(4.5 + 3.8)
        assert first.x2 == pytest.approx(5.5)
        mirrored = samples[60]
        assert mirrored.x1 == pytest.approx(2.5 - 3.8)
        assert mirrored.x2 == pytest.approx(6.5)

    def test_custom_size(self):
        samples = generate_moon_samples(MoonsDatasetConfig(n_per_class=10))
        assert len(samples) == 20


class TestGenerateDataset:
    def test_dispatch(self):
        rng = np.random.default_rng(0)
        assert len(generate_dataset(DatasetType.LINEAR, rng)) == 100
        assert len(generate_dataset("moons", rng)) == 120
