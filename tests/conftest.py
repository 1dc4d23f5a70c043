"""Pytest configuration and fixtures."""

from collections import deque
from typing import Iterable

import pytest

from ZooSim.core.random_source import RandomSource
from ZooSim.domain.animal import Animal
from ZooSim.domain.enclosure import Enclosure
from ZooSim.domain.types import Climate, Gender
from ZooSim.domain.zoo import Zoo


class ScriptedRandom(RandomSource):
    """Source déterministe : les tirages sont lus dans des files.

    - `chance` dépile `chances` (puis renvoie `default_chance`) ;
    - `randint` dépile `ints` (puis renvoie le milieu de l'intervalle).
    Les pourcentages demandés sont enregistrés dans `percents`.
    """

    def __init__(
        self,
        chances: Iterable[bool] = (),
        ints: Iterable[int] = (),
        default_chance: bool = False,
    ):
        self.chances = deque(chances)
        self.ints = deque(ints)
        self.default_chance = default_chance
        self.percents = []
        self.ranges = []

    def chance(self, percent: int) -> bool:
        self.percents.append(percent)
        if self.chances:
            return self.chances.popleft()
        return self.default_chance

    def randint(self, low: int, high: int) -> int:
        self.ranges.append((low, high))
        if self.ints:
            return self.ints.popleft()
        return (low + high) // 2


@pytest.fixture
def scripted():
    """Factory: scripted(chances=[...], ints=[...])."""
    return ScriptedRandom


@pytest.fixture
def rng():
    """Source scriptée où aucune épreuve ne réussit et randint vaut le milieu."""
    return ScriptedRandom()


@pytest.fixture
def make_animal():
    def _make(**overrides) -> Animal:
        fields = dict(
            name="Rex",
            species="Cerf des ombres",
            age_in_days=10,
            weight=20,
            climate=Climate.FOREST,
            is_carnivore=False,
            gender=Gender.MALE,
        )
        fields.update(overrides)
        return Animal(**fields)

    return _make


@pytest.fixture
def zoo():
    """Zoo nu : pas de directeur, pas de marché, 1000 pièces."""
    return Zoo(name="Zoo de test", money=1000)


@pytest.fixture
def forest_enclosure(make_animal):
    """Enclos de forêt (5 places) avec un couple d'herbivores adultes."""
    return Enclosure(
        climate=Climate.FOREST,
        capacity=5,
        animals=[
            make_animal(name="Boris", species="Ours de cristal", gender=Gender.MALE, weight=41),
            make_animal(name="Nina", species="Renard scintillant", gender=Gender.FEMALE, weight=20),
        ],
    )
