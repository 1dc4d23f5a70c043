"""
Partie automatique sans saisie : un petit zoo de forêt joue jusqu'à la fin
de la saison (ou la faillite) en achetant de quoi nourrir ses animaux.
"""

import logging

from ZooSim.core.facilities import build_enclosure
from ZooSim.core.game import Game
from ZooSim.core.market import buy_animal
from ZooSim.core.random_source import NumpyRandomSource
from ZooSim.core.recruitment import hire_employee
from ZooSim.core.resources import buy_food
from ZooSim.domain.scenario import CATALOG_SCENARIOS
from ZooSim.domain.types import Climate, Position
from ZooSim.domain.zoo import open_zoo
from ZooSim.ui.affichage import print_day_report, print_final_message, print_result


def stock_enclosures(zoo):
    """Achète tout ce que les enclos existants peuvent accueillir."""
    index = 0
    while index < len(zoo.animal_market):
        offer = zoo.animal_market[index]
        suitable = zoo.suitable_enclosures(offer)
        if suitable and zoo.money > offer.calculate_price():
            result = buy_animal(zoo, index, suitable[0], f"{offer.species.split()[0]}-{index}")
            print_result(result)
            if result.ok:
                continue
        index += 1


def run(seed: int = 42):
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    rng = NumpyRandomSource(seed)
    scenario = CATALOG_SCENARIOS["classique"]
    zoo = open_zoo("Zoo de démonstration", scenario.initial_money, rng, scenario)

    for climate in Climate:
        print_result(build_enclosure(zoo, climate, 4))
    print_result(hire_employee(zoo, "Nadia", Position.FEEDER))
    stock_enclosures(zoo)

    game = Game(zoo, rng)
    while not game.is_over:
        shortfall = zoo.get_total_animals() - zoo.food
        if shortfall > 0:
            buy_food(zoo, shortfall * 2)
        print_day_report(game.advance())
    print_final_message(zoo, game.outcome)


if __name__ == "__main__":
    run()
