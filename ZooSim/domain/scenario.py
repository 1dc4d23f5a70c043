"""
Scénarios de partie (capital de départ, durée, taille du marché).
Ces données sont affichées au lancement et fixent les règles de la session.
"""

import json
from pathlib import Path
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, Field

from ZooSim.data import data_file
from ZooSim.data.game_params import INITIAL_POPULARITY, MARKET_SIZE, MAX_DAYS


class ZooScenario(BaseModel):
    """
    Conditions de départ d'une partie.

    Exemple de scénario:
    {
    "petit_budget": {
        "name": "Petit budget",
        "initial_money": 1500,
        "initial_food": 20,
        "note": "Chaque pièce compte : attention à la faillite."
    }
    """

    name: str
    initial_money: int = Field(ge=0, description="Capital de départ (pièces)")
    initial_food: int = Field(default=0, ge=0, description="Stock de nourriture (kg)")
    initial_popularity: int = Field(default=INITIAL_POPULARITY, ge=0)
    max_days: int = Field(default=MAX_DAYS, ge=1, description="Durée de la partie")
    market_size: int = Field(default=MARKET_SIZE, ge=1)
    director_name: str = "Egor Potrochila"
    note: str = ""

    def show_scenario(self) -> None:
        print(f"📍 Scénario : {self.name}")
        if self.note:
            print(f"📝 {self.note}")
        print(f"💰 Capital de départ : {self.initial_money} pièces")
        print(f"📅 Durée : {self.max_days} jours")


def load_scenarios(json_path: Optional[Path | str] = None) -> Dict[str, ZooScenario]:
    """Charge les scénarios depuis le JSON et valide via Pydantic.

    Structure JSON attendue: { "code": { "name": ..., "initial_money": ..., ... }, ... }
    """
    path = Path(json_path) if json_path else data_file("scenarios.json")
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, Mapping):
        raise ValueError(
            "Le fichier scenarios.json doit contenir un objet JSON racine (mapping code -> scenario)."
        )
    return {code: ZooScenario(**payload) for code, payload in data.items()}


CATALOG_SCENARIOS: Dict[str, ZooScenario] = load_scenarios()


def get_default_scenario() -> ZooScenario:
    """Retourne le scénario par défaut (classique si disponible)."""
    if CATALOG_SCENARIOS:
        return CATALOG_SCENARIOS.get("classique") or next(
            iter(CATALOG_SCENARIOS.values())
        )
    return ZooScenario(name="Zoo classique", initial_money=5000)
