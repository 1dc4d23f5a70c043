"""
Passage au jour suivant.

`next_day` enchaîne toujours les mêmes étapes, dans le même ordre ; chaque
étape s'appuie sur l'état laissé par la précédente :

1. remise à zéro du compteur d'achats et du journal ;
2. événement aléatoire ;
3. vieillissement et morts de vieillesse ;
4. contamination puis propagation / mortalité du virus, enclos par enclos ;
5. perte de popularité due aux malades ;
6. visiteurs et recettes ;
7. salaires ;
8. répartition du personnel ;
9. entretien des enclos ;
10. nourrissage (ou famine) ;
11. fluctuation de la popularité ;
12. contrôle de faillite ;
13. jour suivant (ou fin de partie).
"""

import logging
import math
from typing import List

from ZooSim.core.disease import seed_infection, spread_virus
from ZooSim.core.events import roll_random_event
from ZooSim.core.random_source import RandomSource
from ZooSim.core.recruitment import allocate_staff
from ZooSim.core.results import DayOutcome, DayReport, DeathCause, DeathRecord
from ZooSim.data.game_params import (
    FOOD_PER_ANIMAL,
    FOOD_PRICE_PER_KG,
    POPULARITY_DRIFT_RATIO,
    STARVATION_DEATH_CHANCE,
)
from ZooSim.domain.zoo import Zoo

logger = logging.getLogger(__name__)


def _age_animals(zoo: Zoo, rng: RandomSource) -> List[DeathRecord]:
    deaths = []
    for index, enclosure in enumerate(zoo.enclosures):
        survivors = []
        for animal in enclosure.animals:
            animal.grow_older()
            if animal.dies_of_old_age(rng):
                deaths.append(
                    DeathRecord(
                        name=animal.display_name,
                        species=animal.species,
                        cause=DeathCause.OLD_AGE,
                        enclosure_index=index,
                    )
                )
            else:
                survivors.append(animal)
        enclosure.animals = survivors
    return deaths


def _starve(zoo: Zoo, rng: RandomSource, deficit: int) -> List[DeathRecord]:
    """Une passe par enclos : chaque occupant meurt à 50 % jusqu'à couvrir le déficit."""
    deaths = []
    for index, enclosure in enumerate(zoo.enclosures):
        animals = enclosure.animals
        i = 0
        while i < len(animals) and deficit > 0:
            if rng.chance(STARVATION_DEATH_CHANCE):
                animal = animals.pop(i)
                deficit -= 1
                deaths.append(
                    DeathRecord(
                        name=animal.display_name,
                        species=animal.species,
                        cause=DeathCause.STARVATION,
                        enclosure_index=index,
                    )
                )
            else:
                i += 1
    return deaths


def _feed(zoo: Zoo, rng: RandomSource, report: DayReport) -> None:
    required = zoo.get_total_animals() * FOOD_PER_ANIMAL
    report.food_required = required
    if zoo.food >= required:
        zoo.food -= required
        report.food_consumed = required
        report.food_cost = required * FOOD_PRICE_PER_KG
        zoo.money -= report.food_cost
        return

    report.food_deficit = required - zoo.food
    report.food_consumed = zoo.food
    zoo.food = 0
    report.deaths.extend(_starve(zoo, rng, report.food_deficit))


def _drift_popularity(zoo: Zoo, rng: RandomSource) -> int:
    amplitude = math.floor(zoo.popularity * POPULARITY_DRIFT_RATIO)
    change = rng.randint(-amplitude, amplitude)
    zoo.popularity += change
    zoo.clamp_popularity()
    return change


def next_day(zoo: Zoo, rng: RandomSource) -> DayReport:
    """Fait avancer le zoo d'une journée et retourne le rapport détaillé."""
    report = DayReport(
        zoo_name=zoo.name,
        day=zoo.day,
        money_start=zoo.money,
        popularity_start=zoo.popularity,
    )

    # 1-2. Compteurs du jour, événement
    zoo.reset_daily_counters()
    report.event = roll_random_event(zoo, rng)

    # 3. Vieillesse
    report.deaths.extend(_age_animals(zoo, rng))

    # 4. Virus : toutes les contaminations d'abord, puis propagation
    for enclosure in zoo.enclosures:
        report.infections.extend(seed_infection(enclosure, rng))
    for index, enclosure in enumerate(zoo.enclosures):
        infections, deaths = spread_virus(enclosure, rng, index)
        report.infections.extend(infections)
        report.deaths.extend(deaths)

    # 5. Les malades font fuir le public
    report.infected_count = zoo.get_total_infected()
    zoo.popularity -= report.infected_count
    zoo.clamp_popularity()

    # 6. Recettes
    report.visitors = zoo.visitors()
    report.animals_count = zoo.get_total_animals()
    report.income = report.visitors * report.animals_count
    zoo.money += report.income

    # 7-8. Salaires puis répartition du personnel
    report.salaries = zoo.total_salaries()
    zoo.money -= report.salaries
    allocate_staff(zoo)

    # 9. Entretien des enclos
    report.enclosure_costs = zoo.total_enclosure_costs()
    zoo.money -= report.enclosure_costs

    # 10. Nourriture
    _feed(zoo, rng, report)

    # 11. Fluctuation de popularité
    report.popularity_drift = _drift_popularity(zoo, rng)

    report.money_end = zoo.money
    report.popularity_end = zoo.popularity
    for death in report.deaths:
        logger.warning(f"'{death.name}' ({death.species}) died: {death.cause.value}")

    # 12. Faillite : le jour n'avance pas
    if zoo.is_bankrupt:
        report.outcome = DayOutcome.BANKRUPT
        logger.warning(f"Zoo '{zoo.name}' went bankrupt on day {zoo.day} ({zoo.money} coins)")
        return report

    # 13. Jour suivant
    zoo.day += 1
    report.outcome = DayOutcome.COMPLETED if zoo.is_finished else DayOutcome.CONTINUE
    logger.info(
        f"Day {report.day} settled: income {report.income}, expenses {report.expenses}, "
        f"money {report.money_start} -> {report.money_end}, outcome {report.outcome.value}"
    )
    return report
