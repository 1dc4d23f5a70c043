# smoke_test.py
"""
Smoke test minimal, sans saisie.
Valide :
- ouverture d'un zoo (directeur + marché de 10 animaux),
- construction d'un enclos et achat d'un animal compatible,
- achat de nourriture,
- trois journées jouées avec une graine fixe,
- affichage des chiffres de base (recettes, dépenses, capital).
"""

from ZooSim.core.facilities import build_enclosure
from ZooSim.core.market import buy_animal
from ZooSim.core.random_source import NumpyRandomSource
from ZooSim.core.resources import buy_food
from ZooSim.core.turn import next_day
from ZooSim.domain.zoo import open_zoo


def main():
    rng = NumpyRandomSource(seed=7)
    zoo = open_zoo("SmokeTest Zoo", 3000, rng)
    print(f"✔ Zoo ouvert : {len(zoo.employees)} employé(s), {len(zoo.animal_market)} animaux au marché")

    offer = zoo.animal_market[0]
    result = build_enclosure(zoo, offer.climate, 3)
    print(f"✔ {result.message}")
    result = buy_animal(zoo, 0, zoo.enclosures[0], "Pionnier")
    print(f"{'✔' if result.ok else '✖'} {result.message}")

    print(f"✔ {buy_food(zoo, 10).message}")

    for _ in range(3):
        report = next_day(zoo, rng)
        print(
            f"Jour {report.day}: recettes {report.income}, dépenses {report.expenses}, "
            f"capital {report.money_start} -> {report.money_end} ({report.outcome.value})"
        )

    assert zoo.day == 4 or zoo.is_bankrupt
    print("OK")


if __name__ == "__main__":
    main()
