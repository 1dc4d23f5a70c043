"""
Événements aléatoires du zoo (au plus un par jour).
"""

import logging
from typing import List, Optional

from pydantic import BaseModel, field_validator

from ZooSim.core.random_source import RandomSource
from ZooSim.core.results import EventRecord
from ZooSim.data import data_file
from ZooSim.data.game_params import EVENT_PROBABILITY
from ZooSim.domain.zoo import Zoo
from ZooSim.utils import load_and_validate

logger = logging.getLogger(__name__)

EVENTS_PER_POOL = 5


class ZooEvent(BaseModel):
    name: str
    description: str
    money: int = 0
    popularity: int = 0


class EventTable(BaseModel):
    positive: List[ZooEvent]
    negative: List[ZooEvent]

    @field_validator("positive", "negative")
    @classmethod
    def _five_events(cls, events: List[ZooEvent]):
        if len(events) != EVENTS_PER_POOL:
            raise ValueError(f"{EVENTS_PER_POOL} événements attendus, {len(events)} trouvés")
        return events


EVENT_TABLE = load_and_validate(data_file("events.json"), EventTable)


def apply_event(zoo: Zoo, event: ZooEvent, positive: bool) -> EventRecord:
    """Applique les deltas d'un événement et l'inscrit au journal du jour."""
    zoo.money += event.money
    popularity_before = zoo.popularity
    zoo.popularity += event.popularity
    zoo.clamp_popularity()
    zoo.add_event(event.description)
    return EventRecord(
        name=event.name,
        description=event.description,
        positive=positive,
        money_delta=event.money,
        popularity_delta=zoo.popularity - popularity_before,
    )


def roll_random_event(
    zoo: Zoo, rng: RandomSource, table: EventTable = EVENT_TABLE
) -> Optional[EventRecord]:
    """20 % de chances qu'un événement survienne ; pile ou face pour le bon ou le mauvais."""
    if not rng.chance(EVENT_PROBABILITY):
        return None
    positive = rng.coin()
    pool = table.positive if positive else table.negative
    event = rng.choice(pool)
    record = apply_event(zoo, event, positive)
    logger.info(
        f"Event '{event.name}' on day {zoo.day}: money {event.money:+d}, popularity {record.popularity_delta:+d}"
    )
    return record
