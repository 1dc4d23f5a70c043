from ZooSim.core.events import EVENT_TABLE, apply_event
from ZooSim.domain.enclosure import Enclosure
from ZooSim.domain.types import Climate
from ZooSim.ui.affichage import print_all_animals, print_status


class TestStatus:
    def test_shows_daily_journal(self, zoo, capsys):
        event = EVENT_TABLE.positive[0]
        apply_event(zoo, event, positive=True)
        print_status(zoo)
        out = capsys.readouterr().out
        assert "Journal du jour" in out
        assert event.description in out

    def test_no_journal_on_quiet_day(self, zoo, capsys):
        print_status(zoo)
        assert "Journal du jour" not in capsys.readouterr().out


class TestAllAnimals:
    def test_grouped_by_enclosure(self, zoo, make_animal, capsys):
        zoo.enclosures.append(Enclosure(climate=Climate.FOREST, capacity=2, animals=[make_animal(name="Bambi")]))
        zoo.enclosures.append(Enclosure(climate=Climate.ARCTIC, capacity=2))
        zoo.enclosures.append(
            Enclosure(
                climate=Climate.DESERT,
                capacity=2,
                animals=[make_animal(name="Sable", climate=Climate.DESERT, parents=("Dune", "Oasis"))],
            )
        )
        print_all_animals(zoo)
        out = capsys.readouterr().out
        assert "Enclos 1 " in out
        assert "Enclos 2 " not in out
        assert "Enclos 3 " in out
        assert out.index("Bambi") < out.index("Sable")
        assert "Dune" in out and "Oasis" in out

    def test_empty_zoo(self, zoo, capsys):
        print_all_animals(zoo)
        assert "(aucun animal)" in capsys.readouterr().out
