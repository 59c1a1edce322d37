"""
Modèle de neurone d'Izhikevich.

Deux variables d'état:
    dv/dt = 0.04 v² + 5 v + 140 - u + I     (potentiel de membrane, mV)
    du/dt = a (b v - u)                     (variable de récupération)

Intégration d'Euler explicite à pas fixe (0.5 ms). Quand v atteint
30 mV, le pic est enregistré à 30 puis v repart à ``c`` et u reçoit ``d``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DT = 0.5
SPIKE_THRESHOLD = 30.0
INITIAL_V = -70.0
INITIAL_U = -14.0


class NeuronType(Enum):
    """Classes de décharge corticales."""
    REGULAR_SPIKING = "Regular Spiking"
    FAST_SPIKING = "Fast Spiking"
    CHATTERING = "Chattering"
    INTRINSICALLY_BURSTING = "Intrinsically Bursting"


@dataclass(frozen=True)
class NeuronParams:
    """Constantes du modèle.

    Attributes:
        a: Vitesse de récupération de u
        b: Sensibilité de u à v
        c: Potentiel de reset après un pic (mV)
        d: Saut de u après un pic
    """
    a: float
    b: float
    c: float
    d: float


PRESET_PARAMS: dict[NeuronType, NeuronParams] = {
    NeuronType.REGULAR_SPIKING: NeuronParams(a=0.02, b=0.2, c=-65.0, d=6.0),
    NeuronType.FAST_SPIKING: NeuronParams(a=0.1, b=0.2, c=-65.0, d=2.0),
    NeuronType.CHATTERING: NeuronParams(a=0.02, b=0.2, c=-50.0, d=2.0),
    NeuronType.INTRINSICALLY_BURSTING: NeuronParams(a=0.02, b=0.2, c=-55.0, d=4.0),
}


@dataclass(frozen=True)
class SimulationState:
    """État instantané (v en mV, u, t en ms)."""
    v: float = INITIAL_V
    u: float = INITIAL_U
    t: float = 0.0


@dataclass(frozen=True)
class IntegrationResult:
    """Résultat d'un pas d'intégration.

    Attributes:
        state: Nouvel état (après reset éventuel)
        plot_v: Potentiel à afficher (30 sur un pic, sinon v avant reset)
        spiked: True si le seuil a été franchi pendant ce pas
    """
    state: SimulationState
    plot_v: float
    spiked: bool


def integrate_step(
    state: SimulationState,
    params: NeuronParams,
    total_current: float,
    dt: float = DT,
) -> IntegrationResult:
    """Avance le modèle d'un pas de temps.

    Aucun bornage n'est appliqué en dehors du reset: pour des courants
    extrêmes le terme quadratique peut diverger, c'est à l'appelant de
    vérifier la finitude du résultat.
    """
    v, u = state.v, state.u
    dv = 0.04 * v * v + 5 * v + 140 - u + total_current
    du = params.a * (params.b * v - u)

    next_v = v + dt * dv
    next_u = u + dt * du
    plot_v = next_v

    spiked = next_v >= SPIKE_THRESHOLD
    if spiked:
        plot_v = SPIKE_THRESHOLD
        next_v = params.c
        next_u = next_u + params.d

    return IntegrationResult(SimulationState(next_v, next_u, state.t + dt), plot_v, spiked)
