"""
Reproduction dans un enclos.

Deux temps distincts pour que l'UI puisse annuler :
- `plan_breeding` cherche le couple et tire le nombre, l'espèce et le sexe
  des petits, sans rien modifier ;
- `commit_breeding` crée effectivement les petits avec les noms choisis.
Abandonner le plan suffit à annuler.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from ZooSim.core.random_source import RandomSource
from ZooSim.core.results import ActionResult, ErrorKind
from ZooSim.data.game_params import BREEDING_MIN_AGE, OFFSPRING_AGE, TWINS_CHANCE
from ZooSim.domain.animal import Animal
from ZooSim.domain.enclosure import Enclosure
from ZooSim.domain.types import Gender

logger = logging.getLogger(__name__)


class BreedingStatus(Enum):
    PAIRED = "PAIRED"
    NO_ELIGIBLE_PAIR = "NO_ELIGIBLE_PAIR"
    INCOMPATIBLE = "INCOMPATIBLE"  # même sexe ou même espèce
    NO_ROOM = "NO_ROOM"


@dataclass
class OffspringDraft:
    species: str
    gender: Gender


@dataclass
class BreedingPlan:
    status: BreedingStatus
    reason: str = ""
    parents: Optional[Tuple[Animal, Animal]] = None
    offspring: List[OffspringDraft] = field(default_factory=list)

    @property
    def is_paired(self) -> bool:
        return self.status is BreedingStatus.PAIRED


def combine_species(first: str, second: str, rng: RandomSource) -> str:
    """Nom composé : un mot au hasard de chaque espèce, séparés d'un espace.

    Example:
        "Ours polaire" + "Loup des neiges" -> "polaire Loup" (selon le tirage)
    """
    first_words = first.split() or [first]
    second_words = second.split() or [second]
    return f"{rng.choice(first_words)} {rng.choice(second_words)}"


def check_compatibility(first: Animal, second: Animal) -> Optional[str]:
    """Raison d'incompatibilité du couple, ou None s'il peut se reproduire."""
    if first.gender == second.gender:
        return "Les deux animaux sont du même sexe."
    if first.species == second.species:
        return f"Les deux animaux sont de la même espèce ({first.species})."
    return None


def find_breeding_pair(animals: Sequence[Animal]) -> Optional[Tuple[Animal, Animal]]:
    """Premier couple (ordre des occupants) de sexes opposés et tous deux âgés de plus de 5 jours."""
    for i, first in enumerate(animals):
        for second in animals[i + 1 :]:
            if (
                first.gender != second.gender
                and first.age_in_days > BREEDING_MIN_AGE
                and second.age_in_days > BREEDING_MIN_AGE
            ):
                return first, second
    return None


def plan_breeding(enclosure: Enclosure, rng: RandomSource) -> BreedingPlan:
    animals = enclosure.animals
    if len(animals) < 2:
        return BreedingPlan(
            BreedingStatus.NO_ELIGIBLE_PAIR,
            "Il faut au moins deux animaux dans l'enclos.",
        )
    if len({animal.gender for animal in animals}) == 1:
        return BreedingPlan(
            BreedingStatus.INCOMPATIBLE, "Tous les occupants sont du même sexe."
        )

    pair = find_breeding_pair(animals)
    if pair is None:
        return BreedingPlan(
            BreedingStatus.NO_ELIGIBLE_PAIR,
            f"Aucun couple mâle/femelle de plus de {BREEDING_MIN_AGE} jours.",
        )
    incompatibility = check_compatibility(*pair)
    if incompatibility:
        return BreedingPlan(BreedingStatus.INCOMPATIBLE, incompatibility, parents=pair)

    count = 2 if rng.chance(TWINS_CHANCE) else 1
    count = min(count, enclosure.free_slots)
    if count == 0:
        return BreedingPlan(
            BreedingStatus.NO_ROOM, "L'enclos est plein : pas de place pour un petit.", parents=pair
        )

    first, second = pair
    drafts = []
    for _ in range(count):
        species = combine_species(first.species, second.species, rng)
        gender = Gender.MALE if rng.coin() else Gender.FEMALE
        drafts.append(OffspringDraft(species=species, gender=gender))
    return BreedingPlan(BreedingStatus.PAIRED, parents=pair, offspring=drafts)


def breeding_result(plan: BreedingPlan) -> ActionResult:
    """Traduit un plan non abouti en résultat affichable."""
    if plan.status is BreedingStatus.PAIRED:
        first, second = plan.parents
        return ActionResult.success(
            f"Couple trouvé : {first.display_name} ({first.species}) et "
            f"{second.display_name} ({second.species}), {len(plan.offspring)} petit(s) attendu(s)."
        )
    if plan.status is BreedingStatus.INCOMPATIBLE:
        return ActionResult.failure(ErrorKind.INCOMPATIBLE_BREEDING, plan.reason)
    if plan.status is BreedingStatus.NO_ELIGIBLE_PAIR:
        return ActionResult.failure(ErrorKind.POLICY_VIOLATION, plan.reason)
    # Enclos plein : abandon sans erreur
    return ActionResult(ok=False, message=plan.reason)


def commit_breeding(
    enclosure: Enclosure, plan: BreedingPlan, names: Sequence[str]
) -> ActionResult:
    """Fait naître les petits prévus par `plan`, nommés dans l'ordre de `names`."""
    if not plan.is_paired:
        return breeding_result(plan)

    first, second = plan.parents
    if not any(a is first for a in enclosure.animals) or not any(
        a is second for a in enclosure.animals
    ):
        return ActionResult.failure(
            ErrorKind.INVALID_SELECTION, "Les parents ne sont plus dans cet enclos."
        )
    if enclosure.free_slots < len(plan.offspring):
        return ActionResult.failure(
            ErrorKind.POLICY_VIOLATION, "L'enclos n'a plus assez de place."
        )

    babies = []
    for index, draft in enumerate(plan.offspring):
        babies.append(
            Animal(
                name=names[index] if index < len(names) else "",
                species=draft.species,
                age_in_days=OFFSPRING_AGE,
                weight=(first.weight + second.weight) // 2,
                climate=first.climate,
                is_carnivore=first.is_carnivore or second.is_carnivore,
                gender=draft.gender,
                parents=(first.name, second.name),
            )
        )
    enclosure.animals.extend(babies)

    logger.info(
        f"{len(babies)} offspring born from '{first.display_name}' and '{second.display_name}'"
    )
    born = ", ".join(f"{b.display_name} ({b.gender.value}, {b.species})" for b in babies)
    return ActionResult.success(f"Naissance : {born}.")


def breed(enclosure: Enclosure, rng: RandomSource, names: Sequence[str]) -> ActionResult:
    """Planifie puis valide immédiatement (sans porte de confirmation)."""
    return commit_breeding(enclosure, plan_breeding(enclosure, rng), names)
