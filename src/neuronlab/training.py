"""
Contrôleurs d'entraînement du perceptron.

Deux modes:
- ``GateTrainer``: bac à sable sur une porte logique. Chaque tick tire
  un échantillon au hasard (une "époque" = un pas), ou avance
  manuellement dans l'ordre 0 → 3.
- ``DatasetTrainer``: problème réel (linéaire ou lunes). Chaque tick
  est un passage complet mélangé sur le jeu de données.

Chaque tick est atomique: poids, compteur d'époque et historique sont
mis à jour ensemble à partir de l'état *après* le pas, ou pas du tout.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .boundary import (
    REAL_WORLD_EPSILON, REAL_WORLD_VIEWPORT, SANDBOX_EPSILON, SANDBOX_VIEWPORT,
    boundary_segment, decision_grid,
)
from .datasets import DatasetType, generate_dataset
from .errors import NumericOverflow
from .gates import LogicGate, TrainingSample, logic_gate_samples
from .history import HistoryBuffer
from .perceptron import (
    NeuronWeights, StepTrace, accuracy, perceptron_step, random_weights, run_epoch,
)

logger = logging.getLogger(__name__)

TRAINING_HISTORY_CAP = 100


@dataclass(frozen=True)
class TrainingHistoryPoint:
    """Précision mesurée à une époque donnée."""
    epoch: int
    accuracy: float


def _check_weights(source: str, weights: NeuronWeights) -> None:
    if not weights.is_finite():
        logger.warning("Non-finite weights produced by %s: %s", source, weights)
        raise NumericOverflow(source, weights.as_dict())


@dataclass
class GateTrainerConfig:
    """Configuration du bac à sable.

    Attributes:
        learning_rate: Taux d'apprentissage
        target_epochs: Nombre de pas aléatoires avant arrêt automatique
        weight_scale: Amplitude des poids initiaux aléatoires
        history_interval: Un point d'historique tous les N pas aléatoires
        tick_interval_ms: Période du minuteur d'entraînement
    """
    learning_rate: float = 0.1
    target_epochs: int = 200
    weight_scale: float = 0.5
    history_interval: int = 2
    tick_interval_ms: int = 100

    def __post_init__(self):
        if not 50 <= self.target_epochs <= 1000:
            raise ValueError(f"target_epochs must be in [50, 1000], got {self.target_epochs}")
        if self.history_interval <= 0:
            raise ValueError(f"history_interval must be positive, got {self.history_interval}")


class GateTrainer:
    """Entraînement d'un perceptron sur une porte logique.

    Args:
        gate: Porte initiale
        config: Configuration
        rng: Générateur aléatoire (poids initiaux et tirage des échantillons)
    """

    def __init__(
        self,
        gate: LogicGate | str = LogicGate.AND,
        config: Optional[GateTrainerConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.config = config or GateTrainerConfig()
        self._rng = rng if rng is not None else np.random.default_rng()
        self.gate = LogicGate(gate)
        self.history: HistoryBuffer[TrainingHistoryPoint] = HistoryBuffer(TRAINING_HISTORY_CAP)
        self.reset()

    @property
    def samples(self) -> tuple[TrainingSample, ...]:
        return logic_gate_samples(self.gate)

    @property
    def accuracy(self) -> float:
        return accuracy(self.weights, self.samples)

    @property
    def finished(self) -> bool:
        return self.epoch >= self.config.target_epochs

    def reset(self, weights: Optional[NeuronWeights] = None) -> None:
        """Nouveaux poids (aléatoires par défaut), compteurs et historique remis à zéro."""
        self.weights = weights or random_weights(self._rng, self.config.weight_scale)
        self.epoch = 0
        self.trial_index = 0
        self.is_training = False
        self.last_trace: Optional[StepTrace] = None
        self.history.clear()
        self.history.append(TrainingHistoryPoint(0, self.accuracy))

    def set_gate(self, gate: LogicGate | str) -> None:
        """Change de porte et réinitialise les poids."""
        self.gate = LogicGate(gate)
        self.reset()

    def _apply(self, index: int) -> tuple[NeuronWeights, StepTrace]:
        new_weights, trace = perceptron_step(
            self.weights, self.samples[index], self.config.learning_rate, index
        )
        _check_weights("GateTrainer", new_weights)
        return new_weights, trace

    def train_step(self) -> Optional[StepTrace]:
        """Un pas sur un échantillon tiré au hasard.

        Returns:
            La trace du pas, ou None si le nombre d'époques cible est
            atteint (l'entraînement s'arrête alors)
        """
        if self.finished:
            self.is_training = False
            return None

        index = int(self._rng.integers(len(self.samples)))
        try:
            new_weights, trace = self._apply(index)
        except NumericOverflow:
            self.is_training = False
            raise

        self.weights = new_weights
        self.last_trace = trace
        self.epoch += 1
        if (self.epoch - 1) % self.config.history_interval == 0:
            self.history.append(TrainingHistoryPoint(self.epoch, self.accuracy))
        return trace

    def advance_manual_trial(self) -> StepTrace:
        """Présente l'échantillon suivant dans l'ordre 0, 1, 2, 3, 0...

        Le cycle complet compte pour une époque; la précision enregistrée
        est celle des poids après le dernier pas du cycle.
        """
        new_weights, trace = self._apply(self.trial_index)
        self.weights = new_weights
        self.last_trace = trace
        self.trial_index = (self.trial_index + 1) % len(self.samples)
        if self.trial_index == 0:
            self.epoch += 1
            self.history.append(TrainingHistoryPoint(self.epoch, self.accuracy))
        return trace

    def toggle_training(self) -> bool:
        """Démarre ou arrête l'entraînement automatique.

        Redémarrer après avoir atteint la cible efface époque et historique.
        """
        if not self.is_training and self.finished:
            self.epoch = 0
            self.history.clear()
        self.is_training = not self.is_training
        return self.is_training

    def tick(self) -> Optional[StepTrace]:
        """Point d'entrée du minuteur: un pas si l'entraînement est actif."""
        if not self.is_training:
            return None
        return self.train_step()

    def boundary(self) -> list[tuple[float, float]]:
        return boundary_segment(self.weights, SANDBOX_VIEWPORT, SANDBOX_EPSILON)

    def decision_grid(self, resolution: int = 30) -> np.ndarray:
        return decision_grid(self.weights, SANDBOX_VIEWPORT, resolution)


@dataclass
class DatasetTrainerConfig:
    """Configuration du module réel.

    Attributes:
        learning_rate: Taux d'apprentissage, dans [0.001, 0.1]
        initial_weights: Poids au tout premier chargement
        weight_scale: Amplitude des poids aléatoires après un reset
        tick_interval_ms: Période du minuteur d'entraînement
    """
    learning_rate: float = 0.01
    initial_weights: NeuronWeights = NeuronWeights(0.1, -0.2, 0.05)
    weight_scale: float = 0.2
    tick_interval_ms: int = 50

    def __post_init__(self):
        check_learning_rate(self.learning_rate)


def check_learning_rate(rate: float) -> float:
    if not 0.001 <= rate <= 0.1:
        raise ValueError(f"learning_rate must be in [0.001, 0.1], got {rate}")
    return rate


class DatasetTrainer:
    """Entraînement par époques complètes sur un jeu synthétique."""

    def __init__(
        self,
        dataset_type: DatasetType | str = DatasetType.LINEAR,
        config: Optional[DatasetTrainerConfig] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        self.config = config or DatasetTrainerConfig()
        self._rng = rng if rng is not None else np.random.default_rng()
        self.learning_rate = self.config.learning_rate
        self.weights = self.config.initial_weights
        self.epoch = 0
        self.is_training = False
        self.history: HistoryBuffer[TrainingHistoryPoint] = HistoryBuffer(TRAINING_HISTORY_CAP)
        self.dataset_type = DatasetType(dataset_type)
        self.data: list[TrainingSample] = []
        self._regenerate()

    @property
    def accuracy(self) -> float:
        return accuracy(self.weights, self.data)

    def _regenerate(self) -> None:
        self.data = generate_dataset(self.dataset_type, self._rng)
        self.history.clear()
        self.history.append(TrainingHistoryPoint(0, self.accuracy))

    def set_learning_rate(self, rate: float) -> None:
        self.learning_rate = check_learning_rate(rate)

    def set_dataset_type(self, dataset_type: DatasetType | str) -> None:
        """Régénère les données et repart de poids aléatoires."""
        self.dataset_type = DatasetType(dataset_type)
        self.data = generate_dataset(self.dataset_type, self._rng)
        self.reset()

    def reset(self) -> None:
        self.weights = random_weights(self._rng, self.config.weight_scale)
        self.epoch = 0
        self.is_training = False
        self.history.clear()
        self.history.append(TrainingHistoryPoint(0, self.accuracy))
        logger.debug("DatasetTrainer reset on %s data", self.dataset_type.value)

    def train_epoch(self) -> list[StepTrace]:
        """Un passage complet, dans un ordre mélangé.

        Returns:
            Traces des pas de l'époque
        """
        new_weights, traces = run_epoch(self.weights, self.data, self.learning_rate, self._rng)
        try:
            _check_weights("DatasetTrainer", new_weights)
        except NumericOverflow:
            self.is_training = False
            raise
        point = TrainingHistoryPoint(self.epoch + 1, accuracy(new_weights, self.data))
        self.history.append(point)
        self.weights = new_weights
        self.epoch += 1
        return traces

    def toggle_training(self) -> bool:
        self.is_training = not self.is_training
        return self.is_training

    def tick(self) -> Optional[list[StepTrace]]:
        if not self.is_training:
            return None
        return self.train_epoch()

    def boundary(self) -> list[tuple[float, float]]:
        return boundary_segment(self.weights, REAL_WORLD_VIEWPORT, REAL_WORLD_EPSILON)

    def decision_grid(self, resolution: int = 30) -> np.ndarray:
        return decision_grid(self.weights, REAL_WORLD_VIEWPORT, resolution)
