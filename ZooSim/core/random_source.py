"""
Source d'aléa injectable.

Tout tirage du moteur (événements, maladie, vieillesse, famine, marché,
reproduction) passe par une `RandomSource` reçue en paramètre ; aucun
appel direct au générateur global. Le jeu crée une seule source au
démarrage, les tests la remplacent par une source scriptée.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class RandomSource(ABC):
    """Interface minimale : un entier uniforme, le reste en découle."""

    @abstractmethod
    def randint(self, low: int, high: int) -> int:
        """Entier uniforme dans [low, high] (bornes incluses)."""

    def chance(self, percent: int) -> bool:
        """Épreuve de Bernoulli à `percent` % (tirage 0..99 < percent)."""
        return self.randint(0, 99) < percent

    def coin(self) -> bool:
        return self.chance(50)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise ValueError("Cannot choose from an empty sequence")
        return seq[self.randint(0, len(seq) - 1)]


class NumpyRandomSource(RandomSource):
    """Source par défaut adossée à `numpy.random.Generator`."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def randint(self, low: int, high: int) -> int:
        if high < low:
            raise ValueError(f"Empty range [{low}, {high}]")
        return int(self._rng.integers(low, high + 1))
