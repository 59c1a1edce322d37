"""
Rendu des états du noyau en images BGR (OpenCV).

Ces fonctions ne modifient rien: elles lisent un instantané (poids,
échantillons, historique, canaux) et retournent une image ``uint8``
prête pour ``cv2.imshow`` ou ``cv2.imwrite``.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .boundary import Viewport, boundary_segment, decision_grid
from .channels import ChannelStates, KState, MembranePhase, NaState
from .gates import TrainingSample
from .perceptron import NeuronWeights
from .simulator import SimulationHistoryPoint
from .training import TrainingHistoryPoint

# Couleurs BGR
POSITIVE = (129, 185, 16)
NEGATIVE = (94, 63, 244)
BOUNDARY = (250, 165, 96)
VOLTAGE = (250, 165, 96)
CURRENT1 = (129, 185, 16)
CURRENT2 = (94, 63, 244)
BACKGROUND = (23, 15, 2)
GRID = (59, 41, 30)
TEXT = (225, 232, 240)


def _to_pixel(x: float, y: float, viewport: Viewport, size: int) -> tuple[int, int]:
    px = (x - viewport.x_min) / (viewport.x_max - viewport.x_min) * (size - 1)
    py = (viewport.y_max - y) / (viewport.y_max - viewport.y_min) * (size - 1)
    return int(round(px)), int(round(py))


def visualize_decision_plane(
    weights: NeuronWeights,
    samples: Sequence[TrainingSample],
    viewport: Viewport,
    epsilon: float = 1e-6,
    size: int = 400,
    resolution: int = 30,
) -> np.ndarray:
    """Plan de décision: fond coloré selon le signe de z, points, frontière.

    Returns:
        Image BGR (size, size, 3)
    """
    import cv2

    img = np.full((size, size, 3), BACKGROUND, dtype=np.uint8)

    # Fond: une cellule par case de la grille de décision
    grid = decision_grid(weights, viewport, resolution)
    cell = size / resolution
    for i in range(resolution):
        for j in range(resolution):
            color = POSITIVE if grid[i, j] else NEGATIVE
            x0 = int(i * cell)
            y1 = size - int(j * cell)
            y0 = size - int((j + 1) * cell)
            overlay = img[y0:y1, x0:int((i + 1) * cell)]
            overlay[:] = (0.88 * overlay + 0.12 * np.array(color)).astype(np.uint8)

    for s in samples:
        center = _to_pixel(s.x1, s.x2, viewport, size)
        cv2.circle(img, center, 5, POSITIVE if s.y == 1 else NEGATIVE, -1)

    segment = boundary_segment(weights, viewport, epsilon)
    if segment:
        p0 = _to_pixel(*segment[0], viewport, size)
        p1 = _to_pixel(*segment[1], viewport, size)
        cv2.line(img, p0, p1, BOUNDARY, 2)

    return img


def visualize_accuracy_history(
    history: Sequence[TrainingHistoryPoint],
    width: int = 400,
    height: int = 150,
) -> np.ndarray:
    """Courbe de précision (0-100 %) en fonction des points enregistrés."""
    import cv2

    img = np.full((height, width, 3), BACKGROUND, dtype=np.uint8)
    cv2.line(img, (0, height // 2), (width, height // 2), GRID, 1)
    if len(history) >= 2:
        n = len(history)
        pts = np.array([
            (int(i / (n - 1) * (width - 1)), int((100 - p.accuracy) / 100 * (height - 1)))
            for i, p in enumerate(history)
        ], dtype=np.int32)
        cv2.polylines(img, [pts], False, POSITIVE, 2)
    if history:
        cv2.putText(img, f"{history[-1].accuracy:.1f}%", (8, 20),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.5, TEXT, 1)
    return img


def visualize_trace(
    history: Sequence[SimulationHistoryPoint],
    width: int = 600,
    height: int = 300,
    v_range: tuple[float, float] = (-90.0, 40.0),
    current_range: tuple[float, float] = (-40.0, 40.0),
) -> np.ndarray:
    """Potentiel de membrane (haut) et courants injectés (bas)."""
    import cv2

    img = np.full((height, width, 3), BACKGROUND, dtype=np.uint8)
    v_height = int(height * 0.65)
    cv2.line(img, (0, v_height), (width, v_height), GRID, 1)
    if len(history) < 2:
        return img

    n = len(history)
    xs = [int(i / (n - 1) * (width - 1)) for i in range(n)]

    def scale(value: float, lo: float, hi: float, top: int, bottom: int) -> int:
        value = min(max(value, lo), hi)
        return int(bottom - (value - lo) / (hi - lo) * (bottom - top))

    def polyline(values: list[float], lo: float, hi: float, top: int, bottom: int, color):
        pts = np.array([(x, scale(v, lo, hi, top, bottom)) for x, v in zip(xs, values)],
                       dtype=np.int32)
        cv2.polylines(img, [pts], False, color, 1)

    polyline([p.v for p in history], *v_range, 0, v_height - 1, VOLTAGE)
    polyline([p.current1 for p in history], *current_range, v_height + 1, height - 1, CURRENT1)
    polyline([p.current2 for p in history], *current_range, v_height + 1, height - 1, CURRENT2)
    cv2.putText(img, f"t={history[-1].time:.1f} ms  v={history[-1].v:.1f} mV", (8, 18),
                cv2.FONT_HERSHEY_SIMPLEX, 0.45, TEXT, 1)
    return img


def visualize_channels(
    channels: ChannelStates,
    phase: MembranePhase,
    width: int = 600,
    height: int = 120,
) -> np.ndarray:
    """Deux canaux (Na+, K+) et le titre de la phase courante."""
    import cv2

    img = np.full((height, width, 3), BACKGROUND, dtype=np.uint8)
    na_color = {
        NaState.OPEN: (36, 191, 251),
        NaState.INACTIVATED: (15, 40, 120),
        NaState.CLOSED: GRID,
    }[channels.na]
    k_color = (247, 85, 168) if channels.k is KState.OPEN else GRID

    for x, label, state, color in ((20, "Na+", channels.na, na_color),
                                   (140, "K+", channels.k, k_color)):
        cv2.rectangle(img, (x, 20), (x + 90, height - 20), color, 3)
        cv2.putText(img, label, (x + 8, 45), cv2.FONT_HERSHEY_SIMPLEX, 0.5, TEXT, 1)
        cv2.putText(img, state.value.upper(), (x + 8, 75), cv2.FONT_HERSHEY_SIMPLEX, 0.4, TEXT, 1)

    cv2.putText(img, phase.title, (260, 55), cv2.FONT_HERSHEY_SIMPLEX, 0.6, TEXT, 1)
    return img
