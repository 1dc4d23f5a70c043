import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import numpy as np

from ZooSim.core.random_source import RandomSource
from ZooSim.data.game_params import (
    FREE_MARKET_DAYS,
    INITIAL_POPULARITY,
    MARKET_SIZE,
    MAX_DAYS,
    VISITORS_PER_POPULARITY,
)
from ZooSim.domain.animal import Animal
from ZooSim.domain.enclosure import Enclosure
from ZooSim.domain.scenario import ZooScenario
from ZooSim.domain.staff import Employee
from ZooSim.domain.types import Position

logger = logging.getLogger(__name__)


@dataclass
class Zoo:
    """Racine d'agrégat : tout l'état mutable d'une partie.

    Le capital peut devenir négatif au cours du traitement d'une journée ;
    la faillite n'est constatée qu'en fin de journée par le moteur.
    """

    name: str
    money: int
    food: int = 0
    popularity: int = INITIAL_POPULARITY
    day: int = 1
    max_days: int = MAX_DAYS
    market_size: int = MARKET_SIZE
    animals_bought_today: int = 0
    enclosures: List[Enclosure] = field(default_factory=list)
    employees: List[Employee] = field(default_factory=list)
    animal_market: List[Animal] = field(default_factory=list)
    daily_events: List[str] = field(default_factory=list)

    # ---------- Journal du jour ----------

    def add_event(self, event: str) -> None:
        self.daily_events.append(event)

    def reset_daily_counters(self) -> None:
        self.animals_bought_today = 0
        self.daily_events.clear()

    def clamp_popularity(self) -> None:
        self.popularity = max(self.popularity, 0)

    # ---------- Requêtes ----------

    def iter_animals(self) -> Iterator[Tuple[int, Animal]]:
        """Parcourt (index_enclos, animal) dans l'ordre des enclos."""
        for index, enclosure in enumerate(self.enclosures):
            for animal in enclosure.animals:
                yield index, animal

    def get_total_animals(self) -> int:
        return sum(len(enclosure.animals) for enclosure in self.enclosures)

    def get_total_infected(self) -> int:
        return sum(enclosure.infected_count() for enclosure in self.enclosures)

    def visitors(self) -> int:
        return VISITORS_PER_POPULARITY * self.popularity

    def total_salaries(self) -> int:
        return sum(employee.salary for employee in self.employees)

    def total_enclosure_costs(self) -> int:
        return sum(enclosure.daily_cost for enclosure in self.enclosures)

    def total_capacity(self) -> int:
        return sum(enclosure.capacity for enclosure in self.enclosures)

    def market_median_price(self) -> float:
        """Prix médian du marché aux animaux."""
        prices = [animal.calculate_price() for animal in self.animal_market]
        return float(np.median(prices)) if prices else 0.0

    def dismissable_employees(self) -> List[Employee]:
        return [employee for employee in self.employees if not employee.is_protected]

    def suitable_enclosures(self, animal: Animal) -> List[Enclosure]:
        return [enclosure for enclosure in self.enclosures if enclosure.can_add_animal(animal)]

    def enclosure_at(self, index: int) -> Optional[Enclosure]:
        """Enclos par index 0-based, None si hors limites."""
        if 0 <= index < len(self.enclosures):
            return self.enclosures[index]
        return None

    @property
    def in_free_market_period(self) -> bool:
        return self.day <= FREE_MARKET_DAYS

    @property
    def is_bankrupt(self) -> bool:
        return self.money < 0

    @property
    def is_finished(self) -> bool:
        return self.day > self.max_days


def open_zoo(
    name: str,
    initial_money: int,
    rng: RandomSource,
    scenario: Optional[ZooScenario] = None,
) -> Zoo:
    """Ouvre un zoo : capital de départ, directeur en poste, premier marché.

    Args:
        name: Nom du zoo
        initial_money: Capital de départ (pièces)
        rng: Source d'aléa utilisée pour générer le marché
        scenario: Conditions de départ optionnelles (nourriture, durée, marché).
            Le capital passé explicitement prime sur celui du scénario.

    Returns:
        Le zoo prêt à jouer le jour 1.
    """
    # Import local : le générateur du marché dépend lui-même du domaine
    from ZooSim.core.market import generate_animal_market

    scenario = scenario or ZooScenario(name=name, initial_money=initial_money)
    zoo = Zoo(
        name=name,
        money=initial_money,
        food=scenario.initial_food,
        popularity=scenario.initial_popularity,
        max_days=scenario.max_days,
        market_size=scenario.market_size,
    )
    zoo.employees.append(Employee(scenario.director_name, Position.DIRECTOR))
    generate_animal_market(zoo, rng, zoo.market_size)
    logger.info(
        f"Zoo '{name}' opened with {initial_money} coins, {len(zoo.animal_market)} animals on the market"
    )
    return zoo
