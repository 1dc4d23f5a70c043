import pytest

from ZooSim.core.results import DayOutcome, DeathCause
from ZooSim.core.turn import next_day
from ZooSim.domain.enclosure import Enclosure
from ZooSim.domain.staff import Employee
from ZooSim.domain.types import Climate, Position


@pytest.fixture
def quiet_zoo(zoo, make_animal):
    """1000 pièces, popularité 50, 5 kg de nourriture, 3 animaux sains, aucun employé."""
    zoo.food = 5
    zoo.enclosures.append(
        Enclosure(
            climate=Climate.FOREST,
            capacity=5,
            daily_cost=20,
            animals=[make_animal(name=n) for n in ("A", "B", "C")],
        )
    )
    return zoo


class TestDeterministicDay:
    def test_reference_day(self, quiet_zoo, rng):
        report = next_day(quiet_zoo, rng)

        assert report.income == 300
        assert report.food_cost == 6
        assert report.enclosure_costs == 20
        assert quiet_zoo.money == 1274
        assert quiet_zoo.food == 2
        assert quiet_zoo.popularity == 50
        assert quiet_zoo.day == 2
        assert report.outcome is DayOutcome.CONTINUE
        assert report.event is None
        assert report.deaths == []

    def test_animals_age(self, quiet_zoo, rng):
        next_day(quiet_zoo, rng)
        assert all(a.age_in_days == 11 for a in quiet_zoo.enclosures[0].animals)

    def test_counters_reset(self, quiet_zoo, rng):
        quiet_zoo.animals_bought_today = 3
        quiet_zoo.daily_events.append("hier")
        next_day(quiet_zoo, rng)
        assert quiet_zoo.animals_bought_today == 0
        assert quiet_zoo.daily_events == []

    def test_capital_identity_with_event_and_staff(self, quiet_zoo, scripted):
        quiet_zoo.employees.append(Employee("Egor", Position.DIRECTOR))
        quiet_zoo.employees.append(Employee("Nadia", Position.VET))
        source = scripted(chances=[True, True], ints=[4])
        report = next_day(quiet_zoo, source)

        assert report.event_money == 1000
        assert report.salaries == 200
        assert report.money_end == (
            report.money_start
            + report.income
            - report.salaries
            - report.enclosure_costs
            - report.food_cost
            + report.event_money
        )
        assert report.net == report.money_end - report.money_start

    def test_popularity_drift_is_bounded(self, quiet_zoo, scripted):
        source = scripted(ints=[-5])
        report = next_day(quiet_zoo, source)
        assert source.ranges[-1] == (-5, 5)
        assert report.popularity_drift == -5
        assert quiet_zoo.popularity == 45

    def test_drift_amplitude_is_floored(self, quiet_zoo, scripted):
        quiet_zoo.popularity = 59
        source = scripted(ints=[0])
        next_day(quiet_zoo, source)
        assert source.ranges[-1] == (-5, 5)


class TestDeaths:
    def test_old_age_death_happens_before_disease(self, quiet_zoo, scripted, make_animal):
        quiet_zoo.enclosures[0].animals.append(make_animal(name="Ancêtre", age_in_days=160))
        source = scripted(chances=[False, True])
        report = next_day(quiet_zoo, source)

        assert [d.name for d in report.deaths] == ["Ancêtre"]
        assert report.deaths[0].cause is DeathCause.OLD_AGE
        assert source.percents[1] == 101
        assert quiet_zoo.get_total_animals() == 3

    def test_infected_animals_cost_popularity(self, quiet_zoo, rng):
        quiet_zoo.enclosures[0].animals[0].is_infected = True
        report = next_day(quiet_zoo, rng)
        assert report.infected_count == 1
        assert report.visitors == 98
        assert report.income == 98 * 3

    def test_starvation(self, quiet_zoo, scripted):
        quiet_zoo.food = 0
        # événement, 3 contaminations, puis famine : A meurt, B survit, C meurt
        source = scripted(chances=[False, False, False, False, True, False, True])
        report = next_day(quiet_zoo, source)

        assert report.food_deficit == 3
        assert report.food_cost == 0
        starved = report.deaths_by_cause()[DeathCause.STARVATION]
        assert [d.name for d in starved] == ["A", "C"]
        assert [a.name for a in quiet_zoo.enclosures[0].animals] == ["B"]
        assert quiet_zoo.food == 0
        assert quiet_zoo.money == 1000 + 300 - 20

    def test_partial_stock_is_used_up(self, quiet_zoo, rng):
        quiet_zoo.food = 2
        report = next_day(quiet_zoo, rng)
        assert report.food_deficit == 1
        assert report.food_consumed == 2
        assert quiet_zoo.food == 0
        assert quiet_zoo.get_total_animals() == 3


class TestOutcomes:
    def test_bankruptcy_keeps_the_day(self, zoo, rng):
        zoo.money = 10
        zoo.enclosures.append(Enclosure(climate=Climate.FOREST, capacity=2, daily_cost=20))
        report = next_day(zoo, rng)
        assert report.outcome is DayOutcome.BANKRUPT
        assert zoo.money == -10
        assert zoo.day == 1

    def test_last_day_completes(self, quiet_zoo, rng):
        quiet_zoo.day = quiet_zoo.max_days
        report = next_day(quiet_zoo, rng)
        assert report.outcome is DayOutcome.COMPLETED
        assert quiet_zoo.day == quiet_zoo.max_days + 1
        assert quiet_zoo.is_finished
