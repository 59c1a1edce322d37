"""
Perceptron - règle d'apprentissage par correction d'erreur.

Le neurone calcule ``z = w1*x1 + w2*x2 + b`` puis ``ŷ = 1 si z >= 0``.
Sur une erreur ``e = y - ŷ`` non nulle, chaque poids avance de
``taux * e * entrée`` (le biais a une entrée constante de 1).
Si l'erreur est nulle, les poids ne bougent pas du tout.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Sequence

import numpy as np

from .gates import TrainingSample


@dataclass(frozen=True)
class NeuronWeights:
    """Paramètres du classifieur linéaire ``w1*x1 + w2*x2 + b = 0``."""
    w1: float = 0.0
    w2: float = 0.0
    b: float = 0.0

    def weighted_sum(self, x1: float, x2: float) -> float:
        return self.w1 * x1 + self.w2 * x2 + self.b

    def is_finite(self) -> bool:
        return all(math.isfinite(w) for w in (self.w1, self.w2, self.b))

    def as_dict(self) -> dict[str, float]:
        return {'w1': self.w1, 'w2': self.w2, 'b': self.b}


@dataclass(frozen=True)
class StepTrace:
    """Trace complète d'un pas d'apprentissage, pour l'affichage.

    Attributes:
        sample: Échantillon présenté
        z: Somme pondérée avant la mise à jour
        y_hat: Prédiction (0 ou 1)
        error: ``y - y_hat`` dans {-1, 0, 1}
        dw1, dw2, db: Variation appliquée à chaque paramètre
        sample_index: Position de l'échantillon dans son jeu, si connue
    """
    sample: TrainingSample
    z: float
    y_hat: int
    error: int
    dw1: float = 0.0
    dw2: float = 0.0
    db: float = 0.0
    sample_index: Optional[int] = field(default=None)

    @property
    def updated(self) -> bool:
        return self.error != 0


def predict(weights: NeuronWeights, x1: float, x2: float) -> int:
    """Sortie à seuil du neurone (égalité à zéro -> 1)."""
    return 1 if weights.weighted_sum(x1, x2) >= 0 else 0


def perceptron_step(
    weights: NeuronWeights,
    sample: TrainingSample,
    learning_rate: float,
    sample_index: Optional[int] = None,
) -> tuple[NeuronWeights, StepTrace]:
    """Applique la règle du perceptron à un échantillon.

    Args:
        weights: Poids courants
        sample: Échantillon présenté
        learning_rate: Taux d'apprentissage
        sample_index: Index de l'échantillon (conservé dans la trace)

    Returns:
        Tuple (nouveaux poids, trace). Sans erreur, les poids retournés
        sont l'objet d'entrée lui-même.
    """
    z = weights.weighted_sum(sample.x1, sample.x2)
    y_hat = 1 if z >= 0 else 0
    error = sample.y - y_hat

    if error == 0:
        return weights, StepTrace(sample, z, y_hat, error, sample_index=sample_index)

    dw1 = learning_rate * error * sample.x1
    dw2 = learning_rate * error * sample.x2
    db = learning_rate * error
    new_weights = NeuronWeights(weights.w1 + dw1, weights.w2 + dw2, weights.b + db)
    return new_weights, StepTrace(sample, z, y_hat, error, dw1, dw2, db, sample_index)


def run_epoch(
    weights: NeuronWeights,
    dataset: Sequence[TrainingSample],
    learning_rate: float,
    rng: Optional[np.random.Generator] = None,
) -> tuple[NeuronWeights, list[StepTrace]]:
    """Un passage complet sur le jeu de données.

    Les mises à jour s'enchaînent échantillon par échantillon. Si ``rng``
    est fourni, l'ordre de passage est mélangé, sinon l'ordre du jeu
    est conservé.

    Returns:
        Tuple (poids après le passage, traces dans l'ordre de passage)
    """
    order = range(len(dataset)) if rng is None else rng.permutation(len(dataset))
    traces = []
    for idx in order:
        weights, trace = perceptron_step(weights, dataset[int(idx)], learning_rate, int(idx))
        traces.append(trace)
    return weights, traces


def accuracy(weights: NeuronWeights, dataset: Sequence[TrainingSample]) -> float:
    """Pourcentage d'échantillons correctement classés (0 si jeu vide)."""
    if len(dataset) == 0:
        return 0.0
    correct = sum(1 for s in dataset if predict(weights, s.x1, s.x2) == s.y)
    return correct / len(dataset) * 100


def random_weights(
    rng: Optional[np.random.Generator] = None,
    scale: float = 0.5,
) -> NeuronWeights:
    """Poids tirés uniformément dans [-scale, scale)."""
    rng = rng if rng is not None else np.random.default_rng()
    w1, w2, b = rng.uniform(-scale, scale, size=3)
    return NeuronWeights(float(w1), float(w2), float(b))
