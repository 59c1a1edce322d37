"""
Simulateur de neurone à impulsions.

Le contexte ``SpikingSimulator`` regroupe tout l'état mutable d'une
session: état (v, u, t), paramètres du modèle, deux réservoirs
d'impulsions, historique borné et états des canaux ioniques.
Un appel à ``tick`` fait un pas complet:

1. somme des courants actifs des deux entrées + courant de base
2. pas d'intégration d'Izhikevich
3. ajout du point d'historique, puis validation du nouvel état
4. mise à jour des canaux ioniques à partir de la tension affichée
5. nettoyage périodique des impulsions terminées
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Optional

from .channels import ChannelStates, MembranePhase, classify_phase, update_channels
from .errors import NumericOverflow
from .history import HistoryBuffer, non_finite_fields
from .izhikevich import (
    DT, NeuronParams, NeuronType, PRESET_PARAMS, SimulationState, integrate_step,
)
from .pulses import PulsePool, PulseTrainConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationHistoryPoint:
    """Point de graphique produit par un tick."""
    time: float
    v: float
    u: float
    current1: float
    current2: float
    total_current: float


@dataclass
class SimulatorConfig:
    """Configuration du simulateur.

    Attributes:
        neuron_type: Préréglage initial des paramètres
        dt: Pas d'intégration (ms)
        history_size: Nombre de points conservés pour les graphiques
        prune_every: Nettoyage des impulsions tous les N pas
        base_current: Courant constant ajouté aux deux entrées
        combined_delay: Retard de l'entrée 2 lors d'un déclenchement combiné (ms)
        trigger_lead: Avance entre l'instant courant et le début d'un train (ms)
        input1: Réglages du train de l'entrée 1
        input2: Réglages du train de l'entrée 2
    """
    neuron_type: NeuronType = NeuronType.REGULAR_SPIKING
    dt: float = DT
    history_size: int = 300
    prune_every: int = 50
    base_current: float = 0.0
    combined_delay: float = 20.0
    trigger_lead: float = 1.0
    input1: PulseTrainConfig = field(default_factory=lambda: PulseTrainConfig(intensity=15.0))
    input2: PulseTrainConfig = field(default_factory=lambda: PulseTrainConfig(intensity=10.0))

    def __post_init__(self):
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.prune_every <= 0:
            raise ValueError(f"prune_every must be positive, got {self.prune_every}")
        if not 0 <= self.combined_delay <= 200:
            raise ValueError(f"combined_delay must be in [0, 200], got {self.combined_delay}")


class SpikingSimulator:
    """Contexte de simulation d'un neurone d'Izhikevich.

    Args:
        config: Configuration (préréglage, pas de temps, trains...)
    """

    def __init__(self, config: Optional[SimulatorConfig] = None):
        self.config = config or SimulatorConfig()
        self.neuron_type = self.config.neuron_type
        self.params: NeuronParams = PRESET_PARAMS[self.neuron_type]
        self.base_current = self.config.base_current
        self.combined_delay = self.config.combined_delay
        self.input1 = PulsePool("Input 1", self.config.input1)
        self.input2 = PulsePool("Input 2", self.config.input2)
        self.history: HistoryBuffer[SimulationHistoryPoint] = HistoryBuffer(self.config.history_size)
        self.reset()

    def reset(self) -> None:
        """Redémarrage complet: état initial, impulsions et historique vidés."""
        self.state = SimulationState()
        self.input1.clear()
        self.input2.clear()
        self.history.clear()
        self.channels = ChannelStates()
        self.tick_count = 0
        self.spike_count = 0
        self.last_spiked = False

    def set_neuron_type(self, neuron_type: NeuronType | str) -> None:
        """Charge un préréglage; la simulation est réinitialisée."""
        self.neuron_type = NeuronType(neuron_type)
        self.params = PRESET_PARAMS[self.neuron_type]
        logger.debug("Neuron preset switched to %s", self.neuron_type.value)
        self.reset()

    def set_params(self, **overrides: float) -> None:
        """Remplace individuellement a, b, c ou d sans réinitialiser."""
        self.params = dataclasses.replace(self.params, **overrides)

    @property
    def phase(self) -> MembranePhase:
        v = self.history.last.v if len(self.history) else self.state.v
        return classify_phase(v, self.channels)

    def trigger_input1(self) -> None:
        self.input1.trigger(self.state.t + self.config.trigger_lead)

    def trigger_input2(self) -> None:
        self.input2.trigger(self.state.t + self.config.trigger_lead)

    def trigger_combined(self) -> None:
        """Entrée 1 immédiatement, entrée 2 après ``combined_delay``."""
        start = self.state.t + self.config.trigger_lead
        self.input1.trigger(start)
        self.input2.trigger(start + self.combined_delay)

    def tick(self) -> SimulationHistoryPoint:
        """Avance la simulation d'un pas.

        Returns:
            Le point d'historique ajouté

        Raises:
            NumericOverflow: Si le pas produit une valeur non finie.
                Rien n'est alors modifié (état, historique, canaux).
        """
        t = self.state.t
        current1 = self.input1.active_current(t)
        current2 = self.input2.active_current(t)
        total = self.base_current + current1 + current2

        result = integrate_step(self.state, self.params, total, self.config.dt)
        point = SimulationHistoryPoint(
            time=round(result.state.t, 1),
            v=result.plot_v,
            u=result.state.u,
            current1=current1,
            current2=current2,
            total_current=total,
        )

        bad = non_finite_fields(result.state)
        if bad:
            logger.warning("Integration diverged at t=%.1f ms: %s", t, bad)
            raise NumericOverflow("SpikingSimulator", bad)
        # Refuse aussi un point non fini avant de modifier l'état
        self.history.append(point)

        self.state = result.state
        self.tick_count += 1
        self.last_spiked = result.spiked
        if result.spiked:
            self.spike_count += 1
        self.channels = update_channels(result.plot_v, self.channels)

        if round(self.state.t / self.config.dt) % self.config.prune_every == 0:
            self.input1.prune(t)
            self.input2.prune(t)

        return point

    def run(self, steps: int) -> list[SimulationHistoryPoint]:
        """Enchaîne ``steps`` ticks (mode sans affichage)."""
        return [self.tick() for _ in range(steps)]
