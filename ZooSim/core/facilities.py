"""
Construction et amélioration des enclos.
"""

import logging

from ZooSim.core.results import ActionResult, ErrorKind
from ZooSim.domain.enclosure import Enclosure
from ZooSim.domain.types import Climate
from ZooSim.domain.zoo import Zoo

logger = logging.getLogger(__name__)


def quote_enclosure(climate: Climate, capacity: int) -> Enclosure:
    """Enclos prêt à construire, pour afficher prix et frais avant confirmation."""
    return Enclosure(climate=climate, capacity=capacity)


def build_enclosure(zoo: Zoo, climate: Climate, capacity: int) -> ActionResult:
    if capacity < 1:
        return ActionResult.failure(
            ErrorKind.INVALID_SELECTION, "La capacité doit être d'au moins 1 place."
        )
    enclosure = quote_enclosure(climate, capacity)
    cost = enclosure.calculate_cost()
    if zoo.money < cost:
        return ActionResult.failure(
            ErrorKind.INSUFFICIENT_FUNDS,
            f"Fonds insuffisants : l'enclos coûte {cost} pièces.",
        )
    zoo.money -= cost
    zoo.enclosures.append(enclosure)
    logger.info(f"Built {climate.value} enclosure (capacity {capacity}) for {cost} coins")
    return ActionResult.success(
        f"Enclos « {climate.label} » de {capacity} places construit pour {cost} pièces "
        f"(entretien {enclosure.daily_cost} pièces/jour).",
        amount=cost,
    )


def upgrade_enclosure(zoo: Zoo, index: int) -> ActionResult:
    enclosure = zoo.enclosure_at(index)
    if enclosure is None:
        return ActionResult.failure(ErrorKind.INVALID_SELECTION, "Numéro d'enclos invalide.")
    if not enclosure.can_upgrade:
        return ActionResult.failure(
            ErrorKind.POLICY_VIOLATION, "Niveau maximal atteint pour cet enclos."
        )
    cost = enclosure.upgrade_cost()
    if zoo.money < cost:
        return ActionResult.failure(
            ErrorKind.INSUFFICIENT_FUNDS,
            f"Fonds insuffisants : l'amélioration coûte {cost} pièces.",
        )
    # Débit seulement une fois l'amélioration structurelle effectuée
    if not enclosure.upgrade():
        return ActionResult.failure(
            ErrorKind.POLICY_VIOLATION, "Niveau maximal atteint pour cet enclos."
        )
    zoo.money -= cost
    logger.info(f"Enclosure #{index + 1} upgraded to level {enclosure.level} for {cost} coins")
    return ActionResult.success(
        f"Enclos amélioré au niveau {enclosure.level} : {enclosure.capacity} places, "
        f"entretien {enclosure.daily_cost} pièces/jour.",
        amount=cost,
    )
