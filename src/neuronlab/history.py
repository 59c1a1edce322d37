"""
Historique borné pour les graphiques.

Un tampon FIFO de taille fixe: une fois la capacité atteinte, les points
les plus anciens sont éliminés. Un point contenant une valeur non finie
est refusé, le tampon reste intact.
"""

from __future__ import annotations

import dataclasses
import math
from collections import deque
from typing import Generic, Iterator, TypeVar

from .errors import NumericOverflow

T = TypeVar("T")


def non_finite_fields(point) -> dict[str, float]:
    """Retourne les champs numériques non finis d'une dataclass."""
    bad = {}
    for f in dataclasses.fields(point):
        value = getattr(point, f.name)
        if isinstance(value, (int, float)) and not math.isfinite(value):
            bad[f.name] = value
    return bad


class HistoryBuffer(Generic[T]):
    """Tampon circulaire des points récents.

    Args:
        capacity: Nombre maximum de points conservés
    """

    def __init__(self, capacity: int):
        if capacity <= 0:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._points: deque[T] = deque(maxlen=capacity)

    def append(self, point: T) -> None:
        """Ajoute un point (dataclass) à la fin du tampon.

        Raises:
            NumericOverflow: Si le point contient une valeur infinie ou NaN
        """
        bad = non_finite_fields(point)
        if bad:
            raise NumericOverflow(type(point).__name__, bad)
        self._points.append(point)

    def clear(self) -> None:
        self._points.clear()

    @property
    def last(self) -> T | None:
        return self._points[-1] if self._points else None

    def to_list(self) -> list[T]:
        """Copie des points, du plus ancien au plus récent."""
        return list(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[T]:
        return iter(self._points)

    def __getitem__(self, index: int) -> T:
        return self._points[index]
