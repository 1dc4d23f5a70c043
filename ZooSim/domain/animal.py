from typing import Tuple

from pydantic import BaseModel, Field

from ZooSim.core.random_source import RandomSource
from ZooSim.data.game_params import (
    ANIMAL_AGE_DISCOUNT,
    ANIMAL_BASE_PRICE,
    ANIMAL_MIN_PRICE,
    ANIMAL_PRICE_PER_KG,
    AQUATIC_PREMIUM,
    CARNIVORE_PREMIUM,
    CLIMATE_PREMIUM,
    OLD_AGE_THRESHOLD,
)
from ZooSim.domain.types import Climate, Diet, Gender, Habitat


class Animal(BaseModel):
    """Un animal du zoo (ou du marché).

    Le type d'habitat n'est jamais stocké : il se déduit du climat
    (aquatique si et seulement si climat océanique).
    """

    name: str = ""
    species: str
    age_in_days: int = Field(ge=0)
    weight: int = Field(ge=0, description="Poids en kg, fixé à la création")
    climate: Climate
    is_carnivore: bool
    gender: Gender
    is_infected: bool = False
    parents: Tuple[str, str] = ("", "")

    @property
    def habitat(self) -> Habitat:
        return Habitat.for_climate(self.climate)

    @property
    def is_aquatic(self) -> bool:
        return self.habitat is Habitat.AQUATIC

    @property
    def diet(self) -> Diet:
        return Diet.of(self.is_carnivore)

    @property
    def display_name(self) -> str:
        return self.name or "(sans nom)"

    def calculate_maintenance_cost(self) -> int:
        """Coût d'entretien : le poids, doublé pour les aquatiques."""
        if self.is_aquatic:
            return self.weight * 2
        return self.weight

    def calculate_price(self) -> int:
        """Calcule le prix de l'animal selon ses caractéristiques.

        Prix = 60 + 2 x poids - 5 par tranche de 30 jours d'âge
        + 100 si carnivore + 50 x ordinal du climat + 200 si aquatique,
        avec un plancher à 10 pièces.

        Example:
            Un herbivore de forêt, 20 kg, 40 jours :
            60 + 40 - 5 + 0 + 50 + 0 = 145
        """
        price = (
            ANIMAL_BASE_PRICE
            + self.weight * ANIMAL_PRICE_PER_KG
            - (self.age_in_days // 30) * ANIMAL_AGE_DISCOUNT
        )
        price += CARNIVORE_PREMIUM if self.is_carnivore else 0
        price += self.climate.index * CLIMATE_PREMIUM
        if self.is_aquatic:
            price += AQUATIC_PREMIUM
        return max(price, ANIMAL_MIN_PRICE)

    def grow_older(self) -> None:
        self.age_in_days += 1

    def dies_of_old_age(self, rng: RandomSource) -> bool:
        """Épreuve de mort naturelle : (âge - 60) % au-delà de 60 jours.

        Aucun tirage n'est consommé tant que l'animal n'a pas dépassé le seuil.
        """
        if self.age_in_days > OLD_AGE_THRESHOLD:
            return rng.chance(self.age_in_days - OLD_AGE_THRESHOLD)
        return False

    def describe_parents(self) -> str:
        first, second = self.parents
        if not first and not second:
            return "Parents inconnus"
        return f"Parents : {first} et {second}"
