"""
Jeux de données synthétiques pour le module "problème réel".

Deux générateurs:
- Linéaire: points uniformes dans [0, 10]², acceptés seulement à une
  marge minimale d'une droite séparatrice (échantillonnage par rejet)
- Lunes: deux croissants bruités, décalés et imbriqués, non séparables
  linéairement

Les tirages passent par un ``numpy.random.Generator`` pour pouvoir
reproduire un jeu de données à partir d'une graine.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from .errors import GenerationFailed
from .gates import TrainingSample

logger = logging.getLogger(__name__)


class DatasetType(Enum):
    """Type de jeu de données du module réel."""
    LINEAR = "linear"
    MOONS = "moons"


@dataclass
class LinearDatasetConfig:
    """Configuration du générateur linéaire.

    Attributes:
        n_samples: Nombre d'échantillons à accepter
        slope: Pente de la droite séparatrice
        intercept: Ordonnée à l'origine de la droite
        margin: Distance verticale minimale à la droite
        low: Borne inférieure du domaine (les deux axes)
        high: Borne supérieure du domaine
        max_attempts: Nombre maximum de tirages avant abandon
    """
    n_samples: int = 100
    slope: float = 0.8
    intercept: float = 1.0
    margin: float = 0.8
    low: float = 0.0
    high: float = 10.0
    max_attempts: int = 100_000

    def __post_init__(self):
        if self.n_samples < 0:
            raise ValueError(f"n_samples must be >= 0, got {self.n_samples}")
        if self.high <= self.low:
            raise ValueError(f"Empty domain [{self.low}, {self.high}]")
        if self.max_attempts <= 0:
            raise ValueError(f"max_attempts must be positive, got {self.max_attempts}")


@dataclass
class MoonsDatasetConfig:
    """Configuration du générateur de lunes.

    Attributes:
        n_per_class: Nombre de points par croissant
        radius: Rayon des deux arcs
        noise: Échelle du bruit (amplitude totale = noise * 4.5)
        center_0: Centre de l'arc de classe 0
        center_1: Centre de l'arc de classe 1 (arc retourné)
    """
    n_per_class: int = 60
    radius: float = 3.8
    noise: float = 0.45
    center_0: tuple[float, float] = (4.5, 5.5)
    center_1: tuple[float, float] = (2.5, 6.5)

    @property
    def noise_half_width(self) -> float:
        """Demi-amplitude du bruit uniforme sur chaque axe."""
        return self.noise * 4.5 / 2


def generate_linear_samples(
    config: Optional[LinearDatasetConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> list[TrainingSample]:
    """Génère un jeu linéairement séparable par rejet.

    Un point (x1, x2) est étiqueté 1 s'il est au-dessus de
    ``slope*x1 + intercept + margin``, 0 s'il est en dessous de
    ``slope*x1 + intercept - margin``, sinon il est rejeté.

    Args:
        config: Paramètres du générateur
        rng: Générateur aléatoire (nouveau générateur si None)

    Returns:
        Liste de ``config.n_samples`` échantillons

    Raises:
        GenerationFailed: Si ``max_attempts`` tirages ne suffisent pas
    """
    config = config or LinearDatasetConfig()
    rng = rng if rng is not None else np.random.default_rng()

    samples: list[TrainingSample] = []
    attempts = 0
    while len(samples) < config.n_samples:
        if attempts >= config.max_attempts:
            logger.warning(
                "Linear dataset generation gave up: %d/%d samples after %d draws",
                len(samples), config.n_samples, attempts,
            )
            raise GenerationFailed(len(samples), config.n_samples, attempts)
        attempts += 1

        x1, x2 = rng.uniform(config.low, config.high, size=2)
        threshold = config.slope * x1 + config.intercept
        if x2 > threshold + config.margin:
            samples.append(TrainingSample(float(x1), float(x2), 1))
        elif x2 < threshold - config.margin:
            samples.append(TrainingSample(float(x1), float(x2), 0))

    return samples


def generate_moon_samples(
    config: Optional[MoonsDatasetConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> list[TrainingSample]:
    """Génère deux croissants imbriqués.

    La classe 0 suit le demi-cercle supérieur autour de ``center_0``,
    la classe 1 le demi-cercle inférieur (retourné) autour de
    ``center_1``. Chaque coordonnée reçoit un bruit uniforme indépendant.

    Returns:
        Liste de ``2 * n_per_class`` échantillons (classe 0 puis classe 1)
    """
    config = config or MoonsDatasetConfig()
    rng = rng if rng is not None else np.random.default_rng()

    n = config.n_per_class
    half = config.noise_half_width
    samples: list[TrainingSample] = []

    for label, (cx, cy), sign in ((0, config.center_0, 1.0), (1, config.center_1, -1.0)):
        for i in range(n):
            angle = i / n * math.pi
            nx, ny = rng.uniform(-half, half, size=2)
            samples.append(TrainingSample(
                x1=float(cx + sign * config.radius * math.cos(angle) + nx),
                x2=float(cy + sign * config.radius * math.sin(angle) + ny),
                y=label,
            ))

    return samples


def generate_dataset(
    dataset_type: DatasetType | str,
    rng: Optional[np.random.Generator] = None,
) -> list[TrainingSample]:
    """Génère le jeu de données d'un type donné avec la configuration par défaut."""
    dataset_type = DatasetType(dataset_type)
    if dataset_type is DatasetType.LINEAR:
        return generate_linear_samples(rng=rng)
    return generate_moon_samples(rng=rng)
