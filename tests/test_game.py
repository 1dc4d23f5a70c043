import builtins

import pytest
from pydantic import ValidationError

from ZooSim.core.game import Game
from ZooSim.core.random_source import NumpyRandomSource
from ZooSim.core.results import DayOutcome
from ZooSim.domain.enclosure import Enclosure
from ZooSim.domain.market import SPECIES_BY_CLIMATE, SpeciesTableModel
from ZooSim.domain.scenario import CATALOG_SCENARIOS, ZooScenario, get_default_scenario
from ZooSim.domain.types import Climate, Position
from ZooSim.domain.zoo import open_zoo
from ZooSim.utils import confirm, get_input


class TestOpenZoo:
    def test_director_and_market(self, rng):
        zoo = open_zoo("Safari", 5000, rng)
        assert zoo.money == 5000
        assert zoo.day == 1
        assert zoo.popularity == 50
        assert [e.position for e in zoo.employees] == [Position.DIRECTOR]
        assert zoo.dismissable_employees() == []
        assert len(zoo.animal_market) == 10

    def test_scenario_settings(self, rng):
        scenario = ZooScenario(name="Court", initial_money=100, initial_food=7, max_days=5, market_size=3)
        zoo = open_zoo("Mini", 2000, rng, scenario)
        assert zoo.money == 2000
        assert zoo.food == 7
        assert zoo.max_days == 5
        assert len(zoo.animal_market) == 3


class TestGame:
    def test_advance_keeps_history(self, rng):
        game = Game(open_zoo("Safari", 5000, rng), rng)
        report = game.advance()
        assert game.last_report is report
        assert report.day == 1
        assert not game.is_over

    def test_bankruptcy_ends_the_game(self, rng):
        zoo = open_zoo("Fauché", 0, rng)
        zoo.enclosures.append(Enclosure(climate=Climate.DESERT, capacity=1))
        game = Game(zoo, rng)
        assert game.advance().outcome is DayOutcome.BANKRUPT
        assert game.is_over
        with pytest.raises(RuntimeError):
            game.advance()

    def test_full_season_with_seeded_source(self):
        source = NumpyRandomSource(seed=1)
        scenario = ZooScenario(name="Court", initial_money=10_000, max_days=3)
        game = Game(open_zoo("Graine", 10_000, source, scenario), source)
        while not game.is_over:
            game.advance()
        assert game.outcome is DayOutcome.COMPLETED
        assert len(game.reports) == 3


class TestCatalogues:
    def test_scenarios_loaded(self):
        assert "classique" in CATALOG_SCENARIOS
        assert get_default_scenario().initial_money == 5000
        assert CATALOG_SCENARIOS["marathon"].max_days == 60

    def test_species_table(self):
        assert set(SPECIES_BY_CLIMATE) == set(Climate)
        assert all(len(names) == 5 for names in SPECIES_BY_CLIMATE.values())

    def test_species_table_requires_every_climate(self):
        with pytest.raises(ValidationError):
            SpeciesTableModel.model_validate({"DESERT": ["a", "b", "c", "d", "e"]})


class TestInputHelpers:
    def test_get_input_loops_until_valid(self, monkeypatch, capsys):
        answers = iter(["abc", "7", " 3 "])
        monkeypatch.setattr(builtins, "input", lambda _prompt: next(answers))
        assert get_input("? ", lambda x: x < 5, "non") == 3
        assert capsys.readouterr().out.count("non") == 2

    def test_confirm(self, monkeypatch):
        monkeypatch.setattr(builtins, "input", lambda _prompt: "2")
        assert confirm("Sûr ?") is False


class TestZooQueries:
    def test_totals(self, zoo, make_animal):
        zoo.enclosures.append(
            Enclosure(
                climate=Climate.FOREST,
                capacity=3,
                animals=[make_animal(name="A"), make_animal(name="B", is_infected=True)],
            )
        )
        zoo.enclosures.append(
            Enclosure(climate=Climate.DESERT, capacity=2, animals=[make_animal(name="C", climate=Climate.DESERT)])
        )
        assert zoo.get_total_animals() == 3
        assert zoo.get_total_infected() == 1
        assert zoo.total_capacity() == 5
        assert [(i, a.name) for i, a in zoo.iter_animals()] == [(0, "A"), (0, "B"), (1, "C")]
        assert zoo.visitors() == 100
        assert zoo.get_total_animals() == zoo.get_total_animals()

    def test_suitable_enclosures(self, zoo, make_animal):
        forest = Enclosure(climate=Climate.FOREST, capacity=1)
        desert = Enclosure(climate=Climate.DESERT, capacity=1)
        zoo.enclosures.extend([forest, desert])
        assert zoo.suitable_enclosures(make_animal()) == [forest]
        assert zoo.enclosure_at(2) is None
