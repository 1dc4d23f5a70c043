"""Gestion du personnel / staff."""

from dataclasses import dataclass, field

from ZooSim.domain.types import Position


@dataclass
class Employee:
    name: str
    position: Position

    # Etat recalculé chaque jour (jamais conservé d'un jour à l'autre)
    current_animals: int = field(default=0, init=False)

    @property
    def salary(self) -> int:
        return self.position.salary

    @property
    def max_animals(self) -> int:
        return self.position.max_animals

    @property
    def is_protected(self) -> bool:
        """Le directeur ne peut pas être licencié."""
        return self.position.protected

    @property
    def free_capacity(self) -> int:
        return max(0, self.max_animals - self.current_animals)

    def reset_load(self) -> None:
        self.current_animals = 0

    def assign(self, available: int) -> int:
        """Prend en charge jusqu'à `available` animaux ; retourne le nombre pris."""
        taken = min(self.free_capacity, max(0, available))
        self.current_animals += taken
        return taken
