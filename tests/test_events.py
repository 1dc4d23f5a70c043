import pytest
from pydantic import ValidationError

from ZooSim.core.events import EVENT_TABLE, EventTable, roll_random_event


class TestEventTable:
    def test_five_events_per_pool(self):
        assert len(EVENT_TABLE.positive) == 5
        assert len(EVENT_TABLE.negative) == 5

    def test_pools_have_expected_signs(self):
        for event in EVENT_TABLE.positive:
            assert event.money >= 0 and event.popularity >= 0
        for event in EVENT_TABLE.negative:
            assert event.money <= 0 and event.popularity <= 0

    def test_wrong_pool_size_is_rejected(self):
        payload = EVENT_TABLE.model_dump()
        payload["positive"] = payload["positive"][:4]
        with pytest.raises(ValidationError):
            EventTable.model_validate(payload)


class TestRollRandomEvent:
    def test_eighty_percent_of_days_are_quiet(self, zoo, rng):
        assert roll_random_event(zoo, rng) is None
        assert rng.percents == [20]
        assert zoo.money == 1000
        assert zoo.daily_events == []

    def test_positive_event(self, zoo, scripted):
        source = scripted(chances=[True, True], ints=[1])
        record = roll_random_event(zoo, source)
        assert record.positive
        assert record.money_delta == 500
        assert zoo.money == 1500
        assert zoo.daily_events == [record.description]

    def test_negative_event_clamps_popularity(self, zoo, scripted):
        zoo.popularity = 5
        source = scripted(chances=[True, False], ints=[3])
        record = roll_random_event(zoo, source)
        assert not record.positive
        assert zoo.popularity == 0
        assert record.popularity_delta == -5
        assert zoo.money == 500
