"""
Portes logiques - jeux d'entraînement fixes à deux entrées.

Chaque porte est définie par ses 4 combinaisons d'entrées binaires.
AND, OR et NAND sont linéairement séparables, XOR ne l'est pas.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class TrainingSample:
    """Point 2D étiqueté.

    Attributes:
        x1: Première coordonnée
        x2: Seconde coordonnée
        y: Étiquette (0 ou 1)
    """
    x1: float
    x2: float
    y: int


class LogicGate(Enum):
    """Porte logique disponible dans le bac à sable."""
    AND = "AND"
    OR = "OR"
    NAND = "NAND"
    XOR = "XOR"

    @property
    def description(self) -> str:
        return GATE_DESCRIPTIONS[self]

    @property
    def linearly_separable(self) -> bool:
        return self is not LogicGate.XOR


def _table(*labels: int) -> tuple[TrainingSample, ...]:
    # Ordre des entrées: (0,0), (1,0), (0,1), (1,1)
    inputs = ((0, 0), (1, 0), (0, 1), (1, 1))
    return tuple(TrainingSample(x1, x2, y) for (x1, x2), y in zip(inputs, labels))


LOGIC_GATES: dict[LogicGate, tuple[TrainingSample, ...]] = {
    LogicGate.AND: _table(0, 0, 0, 1),
    LogicGate.OR: _table(0, 1, 1, 1),
    LogicGate.NAND: _table(1, 1, 1, 0),
    LogicGate.XOR: _table(0, 1, 1, 0),
}

GATE_DESCRIPTIONS: dict[LogicGate, str] = {
    LogicGate.AND: "Output is 1 only if BOTH are 1. Linearly separable.",
    LogicGate.OR: "Output is 1 if EITHER is 1. Linearly separable.",
    LogicGate.NAND: "Output is 0 only if BOTH are 1. Linearly separable.",
    LogicGate.XOR: "Output is 1 only if DIFFERENT. NOT linearly separable!",
}


def logic_gate_samples(gate: LogicGate | str) -> tuple[TrainingSample, ...]:
    """Retourne les 4 échantillons d'une porte.

    Args:
        gate: Porte (enum ou nom, ex. "XOR")

    Raises:
        ValueError: Si le nom de porte est inconnu
    """
    return LOGIC_GATES[LogicGate(gate)]
