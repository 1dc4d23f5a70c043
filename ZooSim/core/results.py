from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class ErrorKind(Enum):
    """Familles d'échecs récupérables : l'opération est abandonnée, l'état intact."""

    INVALID_SELECTION = "INVALID_SELECTION"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    POLICY_VIOLATION = "POLICY_VIOLATION"
    INCOMPATIBLE_BREEDING = "INCOMPATIBLE_BREEDING"


class ActionResult(BaseModel):
    """Résultat d'une commande du joueur (achat, vente, soin, construction...)."""

    ok: bool
    message: str
    error: Optional[ErrorKind] = None
    amount: int = 0  # pièces débitées (>0) ou créditées (<0 pour une vente)

    @classmethod
    def success(cls, message: str, amount: int = 0) -> "ActionResult":
        return cls(ok=True, message=message, amount=amount)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> "ActionResult":
        return cls(ok=False, message=message, error=error)


class DeathCause(Enum):
    OLD_AGE = "OLD_AGE"
    VIRUS = "VIRUS"
    STARVATION = "STARVATION"

    @property
    def label(self) -> str:
        return {
            DeathCause.OLD_AGE: "de vieillesse",
            DeathCause.VIRUS: "du virus",
            DeathCause.STARVATION: "de faim",
        }[self]


class DeathRecord(BaseModel):
    name: str
    species: str
    cause: DeathCause
    enclosure_index: int


class EventRecord(BaseModel):
    """Événement aléatoire appliqué dans la journée, avec ses deltas effectifs."""

    name: str
    description: str
    positive: bool
    money_delta: int = 0
    popularity_delta: int = 0


class DayOutcome(Enum):
    CONTINUE = "CONTINUE"
    BANKRUPT = "BANKRUPT"  # capital négatif en fin de journée
    COMPLETED = "COMPLETED"  # limite de jours atteinte


class DayReport(BaseModel):
    """Snapshot des principaux KPI d'une journée du zoo."""

    zoo_name: str
    day: int
    money_start: int
    money_end: int = 0
    popularity_start: int
    popularity_end: int = 0
    event: Optional[EventRecord] = None
    infections: List[str] = Field(default_factory=list)
    deaths: List[DeathRecord] = Field(default_factory=list)
    infected_count: int = 0
    visitors: int = 0
    animals_count: int = 0
    income: int = 0
    salaries: int = 0
    enclosure_costs: int = 0
    food_required: int = 0
    food_consumed: int = 0
    food_cost: int = 0
    food_deficit: int = 0
    popularity_drift: int = 0
    outcome: DayOutcome = DayOutcome.CONTINUE

    @property
    def expenses(self) -> int:
        return self.salaries + self.enclosure_costs + self.food_cost

    @property
    def event_money(self) -> int:
        return self.event.money_delta if self.event else 0

    @property
    def net(self) -> int:
        return self.money_end - self.money_start

    def deaths_by_cause(self) -> Dict[DeathCause, List[DeathRecord]]:
        grouped: Dict[DeathCause, List[DeathRecord]] = {}
        for record in self.deaths:
            grouped.setdefault(record.cause, []).append(record)
        return grouped
