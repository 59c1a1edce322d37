"""
Fonctions d'activation élémentaires.

- Unité à seuil de McCulloch-Pitts (TLU): sortie 1 si z >= θ
- ReLU: max(0, z)
- Sigmoïde: 1 / (1 + e^-z), calculée sans débordement

Les fonctions ``*_curve`` produisent les courbes de réponse affichées
à côté des curseurs.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ThresholdOutput:
    """Résultat d'une unité à seuil.

    Attributes:
        z: Somme pondérée des entrées (sans biais)
        output: 1 si z >= θ, sinon 0
        bias: Biais équivalent (-θ)
    """
    z: float
    output: int
    bias: float


def threshold_unit(x1: float, x2: float, w1: float, w2: float, theta: float) -> ThresholdOutput:
    """Neurone de McCulloch-Pitts à deux entrées."""
    z = x1 * w1 + x2 * w2
    return ThresholdOutput(z=z, output=1 if z >= theta else 0, bias=-theta)


def relu(z: float) -> float:
    return max(0.0, z)


def sigmoid(z: float) -> float:
    """Sigmoïde logistique stable pour |z| grand."""
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    # Forme équivalente qui évite exp(+grand)
    ez = math.exp(z)
    return ez / (1.0 + ez)


def _inputs(start: float, stop: float, step: float) -> np.ndarray:
    # Nombre de points calculé pour inclure la borne supérieure malgré l'arrondi
    count = int(round((stop - start) / step)) + 1
    return start + np.arange(count) * step


def tlu_curve(theta: float) -> tuple[np.ndarray, np.ndarray]:
    """Réponse en escalier de l'unité à seuil sur [-0.5, 3.5].

    Returns:
        Tuple (entrées, sorties 0/1)
    """
    x = _inputs(-0.5, 3.5, 0.1)
    return x, (x >= theta).astype(np.int8)


def relu_curve(weight: float) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Réponse ReLU d'une entrée pondérée sur [-5, 5].

    Returns:
        Tuple (entrées, z = entrée * poids, sorties)
    """
    x = _inputs(-5.0, 5.0, 0.2)
    z = x * weight
    return x, z, np.maximum(0.0, z)


def sigmoid_curve(gain: float) -> tuple[np.ndarray, np.ndarray]:
    """Réponse sigmoïde sur [-10, 10] pour un gain donné."""
    x = _inputs(-10.0, 10.0, 0.2)
    z = x * gain
    # exp(-|z|) ne déborde jamais
    ez = np.exp(-np.abs(z))
    out = np.where(z >= 0, 1.0 / (1.0 + ez), ez / (1.0 + ez))
    return x, out
