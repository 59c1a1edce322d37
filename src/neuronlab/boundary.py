"""
Frontière de décision dans une fenêtre d'affichage.

La droite ``w1*x + w2*y + b = 0`` est intersectée avec les quatre bords
du rectangle visible. Le résultat est soit vide, soit un segment de
deux points distincts.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .perceptron import NeuronWeights

# Seuils de dégénérescence (|w| en dessous -> pas d'intersection sur cet axe)
SANDBOX_EPSILON = 1e-4
REAL_WORLD_EPSILON = 1e-6

# Distance sous laquelle deux intersections sont considérées identiques
DEDUPE_TOLERANCE = 0.01


@dataclass(frozen=True)
class Viewport:
    """Rectangle visible aligné sur les axes."""
    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def __post_init__(self):
        if self.x_max <= self.x_min or self.y_max <= self.y_min:
            raise ValueError(f"Degenerate viewport {self}")

    def contains(self, x: float, y: float) -> bool:
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max


SANDBOX_VIEWPORT = Viewport(-0.5, 1.5, -0.5, 1.5)
REAL_WORLD_VIEWPORT = Viewport(0.0, 10.0, 0.0, 10.0)


def boundary_segment(
    weights: NeuronWeights,
    viewport: Viewport,
    epsilon: float = REAL_WORLD_EPSILON,
) -> list[tuple[float, float]]:
    """Calcule le segment visible de la frontière de décision.

    Args:
        weights: Poids du neurone
        viewport: Fenêtre visible
        epsilon: Valeur absolue minimale d'un poids pour diviser par lui

    Returns:
        Liste vide ou liste de deux points (x, y)
    """
    w1, w2, b = weights.w1, weights.w2, weights.b
    candidates: list[tuple[float, float]] = []

    # Bords verticaux: x fixé, on résout pour y
    if abs(w2) > epsilon:
        for x in (viewport.x_min, viewport.x_max):
            y = (-w1 * x - b) / w2
            if viewport.y_min <= y <= viewport.y_max:
                candidates.append((x, y))

    # Bords horizontaux: y fixé, on résout pour x
    if abs(w1) > epsilon:
        for y in (viewport.y_min, viewport.y_max):
            x = (-w2 * y - b) / w1
            if viewport.x_min <= x <= viewport.x_max:
                candidates.append((x, y))

    points: list[tuple[float, float]] = []
    for p in candidates:
        if not any(abs(p[0] - q[0]) < DEDUPE_TOLERANCE and abs(p[1] - q[1]) < DEDUPE_TOLERANCE
                   for q in points):
            points.append(p)

    # Un seul point = la droite ne fait que toucher un coin
    if len(points) < 2:
        return []
    return points[:2]


def decision_grid(
    weights: NeuronWeights,
    viewport: Viewport,
    resolution: int = 30,
) -> np.ndarray:
    """Carte du signe de z sur une grille régulière.

    La cellule (i, j) est évaluée à son coin inférieur gauche, i indexant
    l'axe x et j l'axe y.

    Returns:
        Tableau booléen (resolution, resolution), True si z >= 0
    """
    xs = viewport.x_min + np.arange(resolution) * (viewport.x_max - viewport.x_min) / resolution
    ys = viewport.y_min + np.arange(resolution) * (viewport.y_max - viewport.y_min) / resolution
    gx, gy = np.meshgrid(xs, ys, indexing='ij')
    return (gx * weights.w1 + gy * weights.w2 + weights.b) >= 0
