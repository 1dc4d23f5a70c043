"""
Achats de nourriture et campagnes publicitaires.
"""

import logging

from ZooSim.core.results import ActionResult, ErrorKind
from ZooSim.data.game_params import COST_PER_POPULARITY, FOOD_PRICE_PER_KG
from ZooSim.domain.zoo import Zoo

logger = logging.getLogger(__name__)


def food_cost(kg: int) -> int:
    return kg * FOOD_PRICE_PER_KG


def buy_food(zoo: Zoo, kg: int) -> ActionResult:
    if kg <= 0:
        return ActionResult.failure(
            ErrorKind.INVALID_SELECTION, "La quantité doit être positive."
        )
    cost = food_cost(kg)
    if zoo.money < cost:
        return ActionResult.failure(
            ErrorKind.INSUFFICIENT_FUNDS,
            f"Fonds insuffisants : {kg} kg coûtent {cost} pièces.",
        )
    zoo.money -= cost
    zoo.food += kg
    logger.info(f"Bought {kg} kg of food for {cost} coins")
    return ActionResult.success(
        f"{kg} kg de nourriture achetés ({cost} pièces). Stock : {zoo.food} kg.",
        amount=cost,
    )


def launch_ad_campaign(zoo: Zoo, budget: int) -> ActionResult:
    """Publicité : +1 popularité par tranche de 20 pièces (le reliquat est perdu)."""
    if budget <= 0:
        return ActionResult.failure(
            ErrorKind.INVALID_SELECTION, "Le budget doit être positif."
        )
    if zoo.money < budget:
        return ActionResult.failure(
            ErrorKind.INSUFFICIENT_FUNDS, "Fonds insuffisants pour cette campagne."
        )
    gain = budget // COST_PER_POPULARITY
    zoo.money -= budget
    zoo.popularity += gain
    logger.info(f"Ad campaign: {budget} coins spent, popularity +{gain}")
    return ActionResult.success(
        f"Campagne lancée : popularité +{gain} (désormais {zoo.popularity}).",
        amount=budget,
    )
