"""
Domain objects for ZooSim.

The domain layer holds the core business objects that model animals,
enclosures, employees and the zoo itself. Entities are pydantic models
or plain dataclasses with small pure computations (prices, costs,
compatibility) and no random draws of their own.
"""

from .types import Climate, Diet, Gender, Habitat, Position
from .animal import Animal
from .enclosure import Enclosure
from .staff import Employee
from .zoo import Zoo
from .scenario import ZooScenario

__all__ = [
    "Animal",
    "Climate",
    "Diet",
    "Employee",
    "Enclosure",
    "Gender",
    "Habitat",
    "Position",
    "Zoo",
    "ZooScenario",
]
