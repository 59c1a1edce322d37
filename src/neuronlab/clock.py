"""
Boucle de ticks indépendante de l'affichage.

Un minuteur ou une boucle d'animation appelle ``on_frame`` à chaque
rappel. La boucle exécute au plus un tick par rappel, seulement en
lecture, et jamais deux ticks imbriqués.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Optional, TypeVar

from .errors import NumericOverflow

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TickLoop(Generic[T]):
    """Pilote lecture/pause autour d'une fonction de tick.

    Args:
        tick: Fonction qui fait avancer l'état d'un pas
        interval_ms: Période souhaitée entre deux rappels
        playing: État initial de lecture
    """

    def __init__(self, tick: Callable[[], T], interval_ms: int = 16, playing: bool = False):
        self._tick = tick
        self.interval_ms = interval_ms
        self.is_playing = playing
        self._in_tick = False
        self.ticks = 0

    def play(self) -> None:
        self.is_playing = True

    def pause(self) -> None:
        self.is_playing = False

    def toggle(self) -> bool:
        self.is_playing = not self.is_playing
        return self.is_playing

    def _run_tick(self) -> Optional[T]:
        if self._in_tick:
            logger.debug("Tick requested while another is running; skipped")
            return None
        self._in_tick = True
        try:
            result = self._tick()
        except NumericOverflow:
            self.is_playing = False
            raise
        finally:
            self._in_tick = False
        self.ticks += 1
        return result

    def on_frame(self) -> Optional[T]:
        """Rappel du minuteur: un tick si la boucle est en lecture."""
        if not self.is_playing:
            return None
        return self._run_tick()

    def step(self) -> Optional[T]:
        """Pas manuel: met en pause puis exécute exactement un tick."""
        self.is_playing = False
        return self._run_tick()
