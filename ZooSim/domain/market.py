"""
Domain market primitives: espèces proposées par climat.

This module loads the species table (5 espèces par climat) used by the
market generator.
"""

from typing import Dict, List

from pydantic import RootModel, field_validator

from ZooSim.data import data_file
from ZooSim.domain.types import Climate
from ZooSim.utils import load_and_validate

SPECIES_PER_CLIMATE = 5


class SpeciesTableModel(RootModel[Dict[Climate, List[str]]]):
    @field_validator("root")
    @classmethod
    def _five_species_per_climate(cls, table: Dict[Climate, List[str]]):
        missing = [c.value for c in Climate if c not in table]
        if missing:
            raise ValueError(f"Climats sans espèces : {missing}")
        for climate, species in table.items():
            if len(species) != SPECIES_PER_CLIMATE:
                raise ValueError(
                    f"{climate.value}: {SPECIES_PER_CLIMATE} espèces attendues, {len(species)} trouvées"
                )
        return table


SPECIES_DATA = load_and_validate(data_file("species.json"), SpeciesTableModel)

SPECIES_BY_CLIMATE: Dict[Climate, List[str]] = dict(SPECIES_DATA.root)
