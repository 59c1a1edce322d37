"""
États des canaux ioniques, à but explicatif.

Deux automates avec hystérésis, pilotés par la tension affichée:
- Na+: fermé / ouvert / inactivé
- K+: fermé / ouvert

Le nouvel état dépend de la tension courante *et* de l'état précédent.
Une phase descriptive (repos, dépolarisation...) en est dérivée par une
table de règles ordonnée. Rien ici ne rétroagit sur la simulation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NaState(Enum):
    CLOSED = "closed"
    OPEN = "open"
    INACTIVATED = "inactivated"


class KState(Enum):
    CLOSED = "closed"
    OPEN = "open"


@dataclass(frozen=True)
class ChannelStates:
    """États courants des deux canaux."""
    na: NaState = NaState.CLOSED
    k: KState = KState.CLOSED


def next_na_state(v: float, previous: NaState) -> NaState:
    if v >= 30:
        return NaState.INACTIVATED
    if v >= -55 and (previous is not NaState.INACTIVATED or v < -60):
        return NaState.OPEN
    if v <= -65:
        return NaState.CLOSED
    return previous


def next_k_state(v: float, previous: KState) -> KState:
    if v >= 15:
        return KState.OPEN
    if v <= -75:
        return KState.CLOSED
    return previous


def update_channels(v: float, previous: ChannelStates) -> ChannelStates:
    """Fait avancer les deux automates d'un pas."""
    return ChannelStates(next_na_state(v, previous.na), next_k_state(v, previous.k))


class MembranePhase(Enum):
    """Phase du potentiel d'action, avec titre et texte explicatif."""
    RESTING = (
        "Resting Potential",
        "The membrane is at rest (~-70mV). Most voltage-gated channels are closed. "
        "Leaky channels maintain equilibrium.",
    )
    DEPOLARIZATION = (
        "Depolarization",
        "Threshold reached! Na+ channels snap open, allowing a rapid influx of positive ions, "
        "driving the potential upward.",
    )
    REPOLARIZATION = (
        "Repolarization",
        "Na+ channels inactivate. K+ channels open at +15mV, allowing K+ to exit the cell "
        "(outbound flux), bringing the potential back down.",
    )
    HYPERPOLARIZATION = (
        "Hyperpolarization",
        "K+ channels close slowly. The potential drops below resting level (undershoot) "
        "before stabilizing.",
    )
    STABILIZING = (
        "Stabilizing",
        "Ionic pumps work to restore the original concentration gradients.",
    )

    @property
    def title(self) -> str:
        return self.value[0]

    @property
    def description(self) -> str:
        return self.value[1]


def classify_phase(v: float, channels: ChannelStates) -> MembranePhase:
    """Première règle satisfaite de la table de phases."""
    na, k = channels.na, channels.k
    if v < -55 and k is KState.CLOSED and na is NaState.CLOSED:
        return MembranePhase.RESTING
    if -55 <= v < 15 and na is NaState.OPEN:
        return MembranePhase.DEPOLARIZATION
    if v < -70 and k is KState.OPEN:
        return MembranePhase.HYPERPOLARIZATION
    if v >= 15 or (v < 30 and k is KState.OPEN):
        return MembranePhase.REPOLARIZATION
    return MembranePhase.STABILIZING
