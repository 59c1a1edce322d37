#!/usr/bin/env python3
"""
Entraînement du perceptron en temps réel (fenêtre OpenCV).

Contrôles:
- 'q' ou ESC: Quitter
- Espace: Démarrer / arrêter l'entraînement
- 'n': Essai manuel suivant (mode porte)
- 'r': Nouveaux poids aléatoires
- 'g': Porte suivante (AND → OR → NAND → XOR)
- 'd': Basculer porte / problème réel
- 'm': Basculer jeu linéaire / lunes
"""

from __future__ import annotations

import logging

import cv2
import numpy as np

from neuronlab import (
    REAL_WORLD_VIEWPORT,
    SANDBOX_VIEWPORT,
    DatasetTrainer,
    DatasetType,
    GateTrainer,
    LogicGate,
    NumericOverflow,
    TickLoop,
    visualize_accuracy_history,
    visualize_decision_plane,
)
from neuronlab.boundary import REAL_WORLD_EPSILON, SANDBOX_EPSILON

logger = logging.getLogger(__name__)

WINDOW_NAME = "NeuronLab - Perceptron"


class LivePerceptron:
    """Fenêtre unique, deux modes: bac à sable et problème réel."""

    def __init__(self, seed: int | None = None):
        rng = np.random.default_rng(seed)
        self.gate_trainer = GateTrainer(LogicGate.AND, rng=rng)
        self.dataset_trainer = DatasetTrainer(DatasetType.LINEAR, rng=rng)
        self.real_world = False
        self._make_loop()

    def _make_loop(self):
        trainer = self.trainer
        self.loop = TickLoop(trainer.tick, trainer.config.tick_interval_ms, playing=True)

    @property
    def trainer(self):
        return self.dataset_trainer if self.real_world else self.gate_trainer

    def handle_key(self, key: int) -> bool:
        if key in (ord('q'), 27):
            return False
        if key == ord(' '):
            self.trainer.toggle_training()
        elif key == ord('n') and not self.real_world:
            self.gate_trainer.advance_manual_trial()
        elif key == ord('r'):
            self.trainer.reset()
        elif key == ord('g') and not self.real_world:
            gates = list(LogicGate)
            self.gate_trainer.set_gate(gates[(gates.index(self.gate_trainer.gate) + 1) % len(gates)])
        elif key == ord('d'):
            self.real_world = not self.real_world
            self._make_loop()
        elif key == ord('m') and self.real_world:
            current = self.dataset_trainer.dataset_type
            self.dataset_trainer.set_dataset_type(
                DatasetType.MOONS if current is DatasetType.LINEAR else DatasetType.LINEAR
            )
        return True

    def render(self) -> np.ndarray:
        if self.real_world:
            t = self.dataset_trainer
            plane = visualize_decision_plane(t.weights, t.data, REAL_WORLD_VIEWPORT,
                                             REAL_WORLD_EPSILON)
        else:
            t = self.gate_trainer
            plane = visualize_decision_plane(t.weights, t.samples, SANDBOX_VIEWPORT,
                                             SANDBOX_EPSILON)
        curve = visualize_accuracy_history(t.history.to_list())
        return np.vstack([plane, curve])

    def run(self):
        cv2.namedWindow(WINDOW_NAME)
        try:
            while True:
                try:
                    self.loop.on_frame()
                except NumericOverflow as e:
                    logger.warning("Training stopped: %s", e)
                cv2.imshow(WINDOW_NAME, self.render())
                key = cv2.waitKey(self.loop.interval_ms) & 0xFF
                if key != 255 and not self.handle_key(key):
                    break
        finally:
            cv2.destroyAllWindows()


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Perceptron interactif NeuronLab")
    parser.add_argument("-s", "--seed", type=int, default=None, help="Graine aléatoire")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    LivePerceptron(args.seed).run()


if __name__ == "__main__":
    main()
