"""
Exceptions de NeuronLab.

Le domaine est purement arithmétique: seules deux conditions d'échec
existent, l'épuisement de l'échantillonneur par rejet et l'apparition
d'une valeur non finie pendant un pas de calcul.
"""

from __future__ import annotations


class NeuronLabError(Exception):
    """Erreur de base du paquet."""


class GenerationFailed(NeuronLabError):
    """L'échantillonneur par rejet n'a pas pu remplir le jeu de données.

    Attributes:
        accepted: Nombre d'échantillons acceptés avant l'abandon
        requested: Nombre d'échantillons demandés
        attempts: Nombre de tirages effectués
    """

    def __init__(self, accepted: int, requested: int, attempts: int):
        self.accepted = accepted
        self.requested = requested
        self.attempts = attempts
        super().__init__(
            f"Rejection sampling accepted {accepted}/{requested} samples "
            f"after {attempts} draws"
        )


class NumericOverflow(NeuronLabError):
    """Un pas de calcul a produit une valeur infinie ou NaN.

    Attributes:
        source: Composant qui a détecté le débordement
        values: Valeurs fautives (nom -> valeur)
    """

    def __init__(self, source: str, values: dict[str, float]):
        self.source = source
        self.values = dict(values)
        details = ", ".join(f"{k}={v!r}" for k, v in self.values.items())
        super().__init__(f"Non-finite value in {source}: {details}")
