"""
Virus des enclos : contamination, propagation, mortalité et soins.
"""

import logging
from typing import List, Tuple

from ZooSim.core.random_source import RandomSource
from ZooSim.core.results import ActionResult, DeathCause, DeathRecord, ErrorKind
from ZooSim.data.game_params import (
    CURE_COST,
    INFECTION_CHANCE,
    SPREAD_CHANCE,
    SPREAD_PER_ANIMAL,
    VIRUS_DEATH_CHANCE,
)
from ZooSim.domain.enclosure import Enclosure
from ZooSim.domain.zoo import Zoo

logger = logging.getLogger(__name__)


def seed_infection(enclosure: Enclosure, rng: RandomSource) -> List[str]:
    """Au plus une nouvelle contamination par enclos et par jour.

    Les occupants sains sont éprouvés dans l'ordre ; le premier qui
    réussit l'épreuve de 30 % est contaminé et la passe s'arrête.
    """
    for animal in enclosure.animals:
        if not animal.is_infected and rng.chance(INFECTION_CHANCE):
            animal.is_infected = True
            logger.debug(f"'{animal.display_name}' caught the virus")
            return [animal.display_name]
    return []


def spread_virus(
    enclosure: Enclosure, rng: RandomSource, enclosure_index: int = 0
) -> Tuple[List[str], List[DeathRecord]]:
    """Propagation ou mortalité selon la proportion de malades.

    - Malades > moitié (entière) de l'enclos : une seule passe où chaque
      malade meurt à 50 %, tant que le seuil (recalculé sur l'effectif
      courant) est dépassé.
    - Sinon chaque malade, y compris ceux contaminés plus tôt dans la même
      passe, contamine jusqu'à 2 occupants sains à 30 % chacun.

    Returns:
        (noms des nouveaux contaminés, décès)
    """
    animals = enclosure.animals
    infections: List[str] = []
    deaths: List[DeathRecord] = []

    infected = enclosure.infected_count()
    if infected > len(animals) // 2:
        i = 0
        while i < len(animals) and infected > len(animals) // 2:
            animal = animals[i]
            if animal.is_infected and rng.chance(VIRUS_DEATH_CHANCE):
                animals.pop(i)
                infected -= 1
                deaths.append(
                    DeathRecord(
                        name=animal.display_name,
                        species=animal.species,
                        cause=DeathCause.VIRUS,
                        enclosure_index=enclosure_index,
                    )
                )
                logger.warning(f"'{animal.display_name}' died of the virus")
            else:
                i += 1
        return infections, deaths

    for carrier in animals:
        if not carrier.is_infected:
            continue
        transmitted = 0
        for target in animals:
            if transmitted >= SPREAD_PER_ANIMAL:
                break
            if not target.is_infected and rng.chance(SPREAD_CHANCE):
                target.is_infected = True
                transmitted += 1
                infections.append(target.display_name)
                logger.debug(f"'{carrier.display_name}' infected '{target.display_name}'")
    return infections, deaths


def cure_cost() -> int:
    return CURE_COST


def cure_animal(zoo: Zoo, enclosure_index: int, animal_index: int) -> ActionResult:
    enclosure = zoo.enclosure_at(enclosure_index)
    if enclosure is None:
        return ActionResult.failure(ErrorKind.INVALID_SELECTION, "Numéro d'enclos invalide.")
    if not 0 <= animal_index < len(enclosure.animals):
        return ActionResult.failure(ErrorKind.INVALID_SELECTION, "Numéro d'animal invalide.")

    animal = enclosure.animals[animal_index]
    if not animal.is_infected:
        return ActionResult.failure(
            ErrorKind.INVALID_SELECTION, f"« {animal.display_name} » n'est pas malade."
        )
    cost = cure_cost()
    if zoo.money < cost:
        return ActionResult.failure(
            ErrorKind.INSUFFICIENT_FUNDS, f"Fonds insuffisants : le soin coûte {cost} pièces."
        )

    animal.is_infected = False
    zoo.money -= cost
    logger.info(f"'{animal.display_name}' cured for {cost} coins")
    return ActionResult.success(f"« {animal.display_name} » est guéri.", amount=cost)
