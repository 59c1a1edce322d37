"""
NeuronLab - Simulateurs pédagogiques de neurones.

Deux noyaux de calcul indépendants:
- Perceptron: règle d'apprentissage par correction d'erreur sur des
  portes logiques et des jeux 2D synthétiques
- Neurone à impulsions: modèle d'Izhikevich intégré par Euler, injection
  d'impulsions de courant et états des canaux ioniques
"""

__all__ = [
    # Erreurs
    "NeuronLabError",
    "GenerationFailed",
    "NumericOverflow",
    # Historique
    "HistoryBuffer",
    # Portes logiques
    "LogicGate",
    "TrainingSample",
    "LOGIC_GATES",
    "logic_gate_samples",
    # Jeux synthétiques
    "DatasetType",
    "LinearDatasetConfig",
    "MoonsDatasetConfig",
    "generate_linear_samples",
    "generate_moon_samples",
    "generate_dataset",
    # Perceptron
    "NeuronWeights",
    "StepTrace",
    "perceptron_step",
    "run_epoch",
    "accuracy",
    "predict",
    "random_weights",
    # Frontière de décision
    "Viewport",
    "SANDBOX_VIEWPORT",
    "REAL_WORLD_VIEWPORT",
    "boundary_segment",
    "decision_grid",
    # Fonctions d'activation
    "threshold_unit",
    "relu",
    "sigmoid",
    "tlu_curve",
    "relu_curve",
    "sigmoid_curve",
    # Entraînement
    "TrainingHistoryPoint",
    "GateTrainer",
    "GateTrainerConfig",
    "DatasetTrainer",
    "DatasetTrainerConfig",
    # Modèle d'Izhikevich
    "NeuronType",
    "NeuronParams",
    "PRESET_PARAMS",
    "SimulationState",
    "integrate_step",
    # Impulsions
    "Pulse",
    "PulsePool",
    "PulseTrainConfig",
    # Canaux ioniques
    "NaState",
    "KState",
    "ChannelStates",
    "MembranePhase",
    "update_channels",
    "classify_phase",
    # Simulateur
    "SpikingSimulator",
    "SimulatorConfig",
    "SimulationHistoryPoint",
    "TickLoop",
    # Visualisation
    "visualize_decision_plane",
    "visualize_accuracy_history",
    "visualize_trace",
    "visualize_channels",
]

from .errors import NeuronLabError, GenerationFailed, NumericOverflow
from .history import HistoryBuffer
from .gates import LogicGate, TrainingSample, LOGIC_GATES, logic_gate_samples
from .datasets import (
    DatasetType, LinearDatasetConfig, MoonsDatasetConfig,
    generate_linear_samples, generate_moon_samples, generate_dataset,
)
from .perceptron import (
    NeuronWeights, StepTrace, perceptron_step, run_epoch, accuracy, predict, random_weights,
)
from .boundary import (
    Viewport, SANDBOX_VIEWPORT, REAL_WORLD_VIEWPORT, boundary_segment, decision_grid,
)
from .activations import threshold_unit, relu, sigmoid, tlu_curve, relu_curve, sigmoid_curve
from .training import (
    TrainingHistoryPoint, GateTrainer, GateTrainerConfig, DatasetTrainer, DatasetTrainerConfig,
)
from .izhikevich import NeuronType, NeuronParams, PRESET_PARAMS, SimulationState, integrate_step
from .pulses import Pulse, PulsePool, PulseTrainConfig
from .channels import (
    NaState, KState, ChannelStates, MembranePhase, update_channels, classify_phase,
)
from .simulator import SpikingSimulator, SimulatorConfig, SimulationHistoryPoint
from .clock import TickLoop
from .visualize import (
    visualize_decision_plane, visualize_accuracy_history, visualize_trace, visualize_channels,
)
