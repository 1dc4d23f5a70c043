import logging
from typing import List, Optional

from pydantic import BaseModel, Field

from ZooSim.core.results import ActionResult, ErrorKind
from ZooSim.data.game_params import (
    ENCLOSURE_BASE_COST,
    ENCLOSURE_BASE_DAILY_COST,
    ENCLOSURE_COST_PER_CLIMATE,
    ENCLOSURE_COST_PER_SLOT,
    ENCLOSURE_DAILY_COST_PER_AQUATIC,
    ENCLOSURE_DAILY_COST_PER_CLIMATE,
    ENCLOSURE_MIN_COST,
    ENCLOSURE_MIN_DAILY_COST,
    MAX_ENCLOSURE_LEVEL,
    UPGRADE_COST_PER_SLOT,
)
from ZooSim.domain.animal import Animal
from ZooSim.domain.types import Climate, Diet

logger = logging.getLogger(__name__)


class Enclosure(BaseModel):
    """Enclos : un climat, une capacité, et les animaux qu'il possède.

    Invariants garantis par `add_animal` :
    - tous les occupants ont le climat de l'enclos ;
    - jamais d'aquatique hors océan ni de terrestre dans l'océan ;
    - jamais de mélange carnivores / herbivores ;
    - len(animals) <= capacity.
    """

    climate: Climate
    capacity: int = Field(ge=1)
    level: int = Field(default=1, ge=1, le=MAX_ENCLOSURE_LEVEL)
    daily_cost: Optional[int] = None
    animals: List[Animal] = Field(default_factory=list)

    def model_post_init(self, __context) -> None:
        # Coût journalier figé à la construction, puis relevé par les améliorations
        if self.daily_cost is None:
            self.daily_cost = self.calculate_daily_cost()

    # ---------- Requêtes ----------

    @property
    def size(self) -> int:
        return len(self.animals)

    @property
    def free_slots(self) -> int:
        return max(0, self.capacity - len(self.animals))

    @property
    def is_full(self) -> bool:
        return len(self.animals) >= self.capacity

    @property
    def diet(self) -> Optional[Diet]:
        """Régime des occupants (None si l'enclos est vide)."""
        return self.animals[0].diet if self.animals else None

    def count_aquatic(self) -> int:
        return sum(1 for animal in self.animals if animal.is_aquatic)

    def infected_count(self) -> int:
        return sum(1 for animal in self.animals if animal.is_infected)

    # ---------- Coûts ----------

    def calculate_cost(self) -> int:
        """Coût de construction : 100 + 10/place + 50 x ordinal du climat, min 150."""
        cost = ENCLOSURE_BASE_COST
        cost += self.capacity * ENCLOSURE_COST_PER_SLOT
        cost += self.climate.index * ENCLOSURE_COST_PER_CLIMATE
        return max(cost, ENCLOSURE_MIN_COST)

    def calculate_daily_cost(self) -> int:
        """Frais journaliers recalculés à partir de l'état courant.

        10 + capacité // 10 + 5 x ordinal du climat + 10 par aquatique, min 10.
        """
        daily = ENCLOSURE_BASE_DAILY_COST
        daily += self.capacity // 10
        daily += self.climate.index * ENCLOSURE_DAILY_COST_PER_CLIMATE
        daily += self.count_aquatic() * ENCLOSURE_DAILY_COST_PER_AQUATIC
        return max(daily, ENCLOSURE_MIN_DAILY_COST)

    def upgrade_cost(self) -> int:
        return self.capacity * UPGRADE_COST_PER_SLOT * (self.level + 1)

    @property
    def can_upgrade(self) -> bool:
        return self.level < MAX_ENCLOSURE_LEVEL

    def upgrade(self) -> bool:
        """Améliore l'enclos d'un niveau (le paiement est géré par l'appelant).

        Returns:
            False sans aucun changement si le niveau maximal est atteint.
        """
        if not self.can_upgrade:
            return False
        self.capacity *= 2
        self.daily_cost += self.calculate_daily_cost() // 2
        self.level += 1
        return True

    # ---------- Admission ----------

    def admission_problem(self, animal: Animal) -> Optional[str]:
        """Retourne la raison du refus d'admission, ou None si l'animal peut entrer."""
        if self.is_full:
            return "L'enclos est plein."
        if animal.climate is not self.climate:
            return (
                f"Climat incompatible : l'animal vient de « {animal.climate.label} », "
                f"l'enclos est « {self.climate.label} »."
            )
        if self.climate is Climate.OCEAN and not animal.is_aquatic:
            return "Seuls les animaux aquatiques peuvent vivre dans un enclos « Océan »."
        if self.climate is not Climate.OCEAN and animal.is_aquatic:
            return "Les animaux aquatiques ne peuvent vivre que dans un enclos « Océan »."
        if self.animals and self.diet is not animal.diet:
            return "Impossible de mélanger carnivores et herbivores dans un même enclos."
        return None

    def can_add_animal(self, animal: Animal) -> bool:
        return self.admission_problem(animal) is None

    def add_animal(self, animal: Animal) -> ActionResult:
        problem = self.admission_problem(animal)
        if problem is not None:
            return ActionResult.failure(ErrorKind.POLICY_VIOLATION, problem)
        self.animals.append(animal)
        logger.debug(f"{animal.display_name} admitted into {self.climate.value} enclosure")
        return ActionResult.success(
            f"« {animal.display_name} » a rejoint l'enclos ({self.size}/{self.capacity})."
        )

    def remove_animal(self, animal: Animal) -> bool:
        """Retire cet animal précis (identité, pas le nom)."""
        for index, occupant in enumerate(self.animals):
            if occupant is animal:
                self.animals.pop(index)
                return True
        return False
