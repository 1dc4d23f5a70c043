# ZooSim/domain/types.py
from enum import Enum


class Climate(Enum):
    # value = (code, ordinal, libellé, multiplicateur affiché à la construction)
    DESERT = ("DESERT", 0, "Désert", 1.2)
    FOREST = ("FOREST", 1, "Forêt", 1.0)
    ARCTIC = ("ARCTIC", 2, "Arctique", 1.5)
    OCEAN = ("OCEAN", 3, "Océan", 1.8)

    def __new__(cls, code: str, index: int, label: str, price_multiplier: float):
        obj = object.__new__(cls)
        obj._value_ = code
        obj.index = index
        obj.label = label
        obj.price_multiplier = price_multiplier
        return obj

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_index(cls, index: int) -> "Climate":
        for climate in cls:
            if climate.index == index:
                return climate
        raise ValueError(f"Unknown climate index: {index}")


class Habitat(Enum):
    LAND = "LAND"
    AQUATIC = "AQUATIC"

    @classmethod
    def for_climate(cls, climate: Climate) -> "Habitat":
        # Aquatique si et seulement si climat océanique
        return cls.AQUATIC if climate is Climate.OCEAN else cls.LAND

    @property
    def label(self) -> str:
        return "Aquatique" if self is Habitat.AQUATIC else "Terrestre"


class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"


class Diet(Enum):
    CARNIVORE = "CARNIVORE"
    HERBIVORE = "HERBIVORE"

    @classmethod
    def of(cls, is_carnivore: bool) -> "Diet":
        return cls.CARNIVORE if is_carnivore else cls.HERBIVORE

    @property
    def label(self) -> str:
        return "Carnivore" if self is Diet.CARNIVORE else "Herbivore"


class Position(Enum):
    # value = (code, libellé, salaire journalier, animaux max, protégé)
    DIRECTOR = ("DIRECTOR", "Directeur", 50, 50, True)
    CLEANER = ("CLEANER", "Agent d'entretien", 80, 20, False)
    VET = ("VET", "Vétérinaire", 150, 10, False)
    FEEDER = ("FEEDER", "Soigneur", 100, 30, False)

    def __new__(
        cls, code: str, label: str, salary: int, max_animals: int, protected: bool
    ):
        obj = object.__new__(cls)
        obj._value_ = code
        obj.label = label
        obj.salary = salary
        obj.max_animals = max_animals
        obj.protected = protected
        return obj

    def __str__(self) -> str:
        return self.label


# Postes proposés au recrutement (le directeur est unique et fourni à l'ouverture)
HIREABLE_POSITIONS = (Position.CLEANER, Position.VET, Position.FEEDER)
