#!/usr/bin/env python3
"""
Démonstration console du perceptron NeuronLab.

1. Unité à seuil de McCulloch-Pitts sur les 4 entrées binaires
2. Premier passage de la règle d'apprentissage sur AND, pas à pas
3. Convergence sur AND/OR/NAND, échec sur XOR
4. Problème réel: jeu linéaire puis lunes
"""

import logging

import numpy as np

from neuronlab import (
    DatasetTrainer,
    DatasetType,
    GateTrainer,
    GateTrainerConfig,
    LogicGate,
    NeuronWeights,
    threshold_unit,
)


def demo_threshold_unit():
    """Table de vérité d'un TLU (w1 = w2 = 1, θ = 1.5)."""
    print("=" * 60)
    print("UNITÉ À SEUIL - McCulloch & Pitts (1943)")
    print("=" * 60)
    print(f"{'x1':>4} | {'x2':>4} | {'z':>5} | {'sortie':>6}")
    print("-" * 30)
    for x1 in (0, 1):
        for x2 in (0, 1):
            out = threshold_unit(x1, x2, 1.0, 1.0, theta=1.5)
            print(f"{x1:>4} | {x2:>4} | {out.z:>5.1f} | {out.output:>6}")
    print()
    print("→ θ = 1.5 réalise la porte AND (biais équivalent -1.5)")
    print()


def demo_manual_epoch():
    """Un cycle manuel sur AND depuis des poids nuls."""
    print("=" * 60)
    print("RÈGLE DU PERCEPTRON - Premier passage sur AND")
    print("=" * 60)
    trainer = GateTrainer(LogicGate.AND)
    trainer.reset(NeuronWeights(0.0, 0.0, 0.0))

    for _ in range(4):
        trace = trainer.advance_manual_trial()
        s = trace.sample
        w = trainer.weights
        print(
            f"  ({s.x1:.0f},{s.x2:.0f}) y={s.y}  z={trace.z:+.2f}  ŷ={trace.y_hat}  "
            f"e={trace.error:+d}  → w=({w.w1:+.2f}, {w.w2:+.2f}, {w.b:+.2f})"
        )
    print(f"  Précision après l'époque 1: {trainer.accuracy:.1f}%")
    print()


def demo_gates(seed: int):
    """Entraînement aléatoire sur chaque porte."""
    print("=" * 60)
    print("PORTES LOGIQUES - 1000 pas aléatoires")
    print("=" * 60)
    for gate in LogicGate:
        trainer = GateTrainer(
            gate, GateTrainerConfig(target_epochs=1000), np.random.default_rng(seed)
        )
        trainer.toggle_training()
        while trainer.tick() is not None:
            pass
        best = max(p.accuracy for p in trainer.history)
        print(f"  {gate.value:>4}: finale {trainer.accuracy:5.1f}%  meilleure {best:5.1f}%")
    print()
    print("→ XOR n'est pas linéairement séparable: 75% au mieux")
    print()


def demo_real_world(seed: int):
    print("=" * 60)
    print("PROBLÈME RÉEL - 100 époques mélangées")
    print("=" * 60)
    trainer = DatasetTrainer(rng=np.random.default_rng(seed))
    for dataset_type in DatasetType:
        trainer.set_dataset_type(dataset_type)
        for _ in range(100):
            trainer.train_epoch()
        print(f"  {dataset_type.value:>6}: {len(trainer.data)} points, "
              f"précision {trainer.accuracy:5.1f}%")
    print()


def main():
    """Point d'entrée principal."""
    logging.basicConfig(level=logging.INFO)
    seed = 7
    demo_threshold_unit()
    demo_manual_epoch()
    demo_gates(seed)
    demo_real_world(seed)


if __name__ == "__main__":
    main()
