"""
Planification des impulsions de courant.

Une impulsion est un créneau rectangulaire ``[start, end]`` (bornes
incluses) d'intensité constante. Un déclenchement crée un train de
``count`` impulsions espacées de ``interval``. Chaque entrée du
simulateur possède son propre réservoir d'impulsions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Pulse:
    """Créneau de courant planifié."""
    start_time: float
    end_time: float
    intensity: float

    def is_active(self, t: float) -> bool:
        return self.start_time <= t <= self.end_time

    def is_expired(self, t: float) -> bool:
        return self.end_time < t


@dataclass
class PulseTrainConfig:
    """Réglages d'un train d'impulsions.

    Attributes:
        intensity: Courant injecté par impulsion, dans [-30, 30]
        duration: Durée d'une impulsion (ms), dans [1, 100]
        count: Nombre d'impulsions du train, dans [1, 20]
        interval: Écart entre débuts d'impulsions (ms), dans [1, 100]
    """
    intensity: float = 15.0
    duration: float = 10.0
    count: int = 1
    interval: float = 20.0

    def __post_init__(self):
        if not -30 <= self.intensity <= 30:
            raise ValueError(f"intensity must be in [-30, 30], got {self.intensity}")
        if not 1 <= self.duration <= 100:
            raise ValueError(f"duration must be in [1, 100], got {self.duration}")
        if not 1 <= self.count <= 20:
            raise ValueError(f"count must be in [1, 20], got {self.count}")
        if not 1 <= self.interval <= 100:
            raise ValueError(f"interval must be in [1, 100], got {self.interval}")


class PulsePool:
    """Réservoir d'impulsions d'une entrée.

    Args:
        name: Nom affiché de l'entrée (ex. "Input 1")
        train: Réglages utilisés par ``trigger``
    """

    def __init__(self, name: str, train: PulseTrainConfig | None = None):
        self.name = name
        self.train = train or PulseTrainConfig()
        self._pulses: list[Pulse] = []

    def schedule(
        self,
        count: int,
        duration: float,
        interval: float,
        intensity: float,
        start_time: float,
    ) -> list[Pulse]:
        """Ajoute ``count`` impulsions, la i-ème commençant à ``start_time + i*interval``.

        Returns:
            Les impulsions créées
        """
        new_pulses = []
        for i in range(count):
            start = start_time + i * interval
            new_pulses.append(Pulse(start, start + duration, intensity))
        self._pulses.extend(new_pulses)
        return new_pulses

    def trigger(self, start_time: float) -> list[Pulse]:
        """Planifie un train avec les réglages courants du réservoir."""
        return self.schedule(
            self.train.count, self.train.duration, self.train.interval,
            self.train.intensity, start_time,
        )

    def active_current(self, t: float) -> float:
        """Somme des intensités des impulsions actives à l'instant t."""
        return sum(p.intensity for p in self._pulses if p.is_active(t))

    def prune(self, t: float) -> int:
        """Retire les impulsions terminées avant t.

        Returns:
            Nombre d'impulsions retirées
        """
        before = len(self._pulses)
        self._pulses = [p for p in self._pulses if not p.is_expired(t)]
        return before - len(self._pulses)

    def clear(self) -> None:
        self._pulses.clear()

    @property
    def pulses(self) -> list[Pulse]:
        return list(self._pulses)

    def __len__(self) -> int:
        return len(self._pulses)

    def __iter__(self) -> Iterator[Pulse]:
        return iter(self._pulses)
