"""
Marché aux animaux : génération du pool, rafraîchissement, achat, vente.

Le pool est toujours régénéré en bloc, jamais complété animal par animal.
Les indices reçus sont 0-based ; la numérotation 1..N reste l'affaire de l'UI.
"""

import logging
from typing import Optional

from ZooSim.core.random_source import RandomSource
from ZooSim.core.results import ActionResult, ErrorKind
from ZooSim.data.game_params import (
    MARKET_AGE_RANGE,
    MARKET_REFRESH_COST,
    MARKET_SIZE,
    MARKET_WEIGHT_RANGE,
    MAX_PURCHASES_PER_DAY,
    SELL_PRICE_RATIO,
)
from ZooSim.domain.animal import Animal
from ZooSim.domain.enclosure import Enclosure
from ZooSim.domain.market import SPECIES_BY_CLIMATE
from ZooSim.domain.types import Climate, Gender
from ZooSim.domain.zoo import Zoo

logger = logging.getLogger(__name__)


def generate_random_animal(rng: RandomSource) -> Animal:
    """Tire un animal anonyme : âge, poids, climat, régime, sexe puis espèce."""
    age = rng.randint(*MARKET_AGE_RANGE)
    weight = rng.randint(*MARKET_WEIGHT_RANGE)
    climate = Climate.from_index(rng.randint(0, len(Climate) - 1))
    is_carnivore = rng.coin()
    gender = Gender.MALE if rng.coin() else Gender.FEMALE
    species = rng.choice(SPECIES_BY_CLIMATE[climate])
    return Animal(
        species=species,
        age_in_days=age,
        weight=weight,
        climate=climate,
        is_carnivore=is_carnivore,
        gender=gender,
    )


def generate_animal_market(zoo: Zoo, rng: RandomSource, size: int = MARKET_SIZE) -> None:
    """Remplace entièrement le pool du marché par `size` nouveaux animaux."""
    zoo.animal_market = [generate_random_animal(rng) for _ in range(size)]


def refresh_cost(zoo: Zoo) -> int:
    """Frais de rafraîchissement : gratuit jusqu'au jour 10 ou si le pool est vide."""
    if zoo.in_free_market_period or not zoo.animal_market:
        return 0
    return MARKET_REFRESH_COST


def refresh_market(zoo: Zoo, rng: RandomSource) -> ActionResult:
    cost = refresh_cost(zoo)
    if zoo.money < cost:
        return ActionResult.failure(
            ErrorKind.INSUFFICIENT_FUNDS,
            f"Fonds insuffisants pour rafraîchir le marché ({cost} pièces requises).",
        )
    # Le paiement précède la régénération
    zoo.money -= cost
    generate_animal_market(zoo, rng, zoo.market_size)
    logger.info(f"Market refreshed on day {zoo.day} for {cost} coins")
    return ActionResult.success("Le marché aux animaux a été renouvelé.", amount=cost)


def purchase_blocked(zoo: Zoo) -> bool:
    """Après le jour 10, un seul achat par jour."""
    return (
        not zoo.in_free_market_period
        and zoo.animals_bought_today >= MAX_PURCHASES_PER_DAY
    )


def buy_animal(
    zoo: Zoo, market_index: int, enclosure: Enclosure, name: str
) -> ActionResult:
    """Achète l'animal `market_index` du marché et l'installe dans `enclosure`.

    Contrôles dans l'ordre : sélection, limite journalière, fonds, admission.
    Au moindre refus, ni le capital, ni le marché, ni l'enclos ne bougent.
    """
    if not zoo.animal_market:
        return ActionResult.failure(
            ErrorKind.INVALID_SELECTION, "Aucun animal disponible sur le marché."
        )
    if not 0 <= market_index < len(zoo.animal_market):
        return ActionResult.failure(ErrorKind.INVALID_SELECTION, "Numéro d'animal invalide.")
    if not any(enc is enclosure for enc in zoo.enclosures):
        return ActionResult.failure(ErrorKind.INVALID_SELECTION, "Enclos inconnu.")
    if purchase_blocked(zoo):
        return ActionResult.failure(
            ErrorKind.POLICY_VIOLATION,
            "Après le 10e jour, un seul achat par jour : revenez demain.",
        )

    offer = zoo.animal_market[market_index]
    price = offer.calculate_price()
    if zoo.money < price:
        return ActionResult.failure(
            ErrorKind.INSUFFICIENT_FUNDS,
            f"Fonds insuffisants : {price} pièces requises, {zoo.money} disponibles.",
        )

    animal = offer.model_copy(update={"name": name})
    admitted = enclosure.add_animal(animal)
    if not admitted.ok:
        return admitted

    zoo.money -= price
    zoo.animal_market.pop(market_index)
    zoo.animals_bought_today += 1
    logger.info(f"Bought {animal.species} '{animal.display_name}' for {price} coins")
    return ActionResult.success(
        f"« {animal.display_name} » ({animal.species}) acheté pour {price} pièces.",
        amount=price,
    )


def sell_price(animal: Animal) -> int:
    return int(animal.calculate_price() * SELL_PRICE_RATIO)


def _select_animal(
    zoo: Zoo, enclosure_index: int, animal_index: int
) -> tuple[Optional[Enclosure], Optional[Animal], Optional[ActionResult]]:
    """Résout (enclos, animal) ou renvoie l'échec de sélection correspondant."""
    enclosure = zoo.enclosure_at(enclosure_index)
    if enclosure is None:
        return None, None, ActionResult.failure(
            ErrorKind.INVALID_SELECTION, "Numéro d'enclos invalide."
        )
    if not enclosure.animals:
        return enclosure, None, ActionResult.failure(
            ErrorKind.INVALID_SELECTION, "Cet enclos est vide."
        )
    if not 0 <= animal_index < len(enclosure.animals):
        return enclosure, None, ActionResult.failure(
            ErrorKind.INVALID_SELECTION, "Numéro d'animal invalide."
        )
    return enclosure, enclosure.animals[animal_index], None


def sell_animal(zoo: Zoo, enclosure_index: int, animal_index: int) -> ActionResult:
    enclosure, animal, error = _select_animal(zoo, enclosure_index, animal_index)
    if error is not None:
        return error

    price = sell_price(animal)
    enclosure.remove_animal(animal)
    zoo.money += price
    logger.info(f"Sold '{animal.display_name}' for {price} coins")
    return ActionResult.success(
        f"« {animal.display_name} » vendu pour {price} pièces.", amount=-price
    )


def rename_animal(
    zoo: Zoo, enclosure_index: int, animal_index: int, new_name: str
) -> ActionResult:
    _, animal, error = _select_animal(zoo, enclosure_index, animal_index)
    if error is not None:
        return error

    old_name = animal.display_name
    animal.name = new_name
    return ActionResult.success(f"« {old_name} » s'appelle désormais « {animal.display_name} ».")
