import logging

from ZooSim.core.game import Game
from ZooSim.core.random_source import NumpyRandomSource
from ZooSim.domain.scenario import CATALOG_SCENARIOS, get_default_scenario
from ZooSim.domain.zoo import open_zoo
from ZooSim.utils import get_input, get_line


def choose_scenario():
    codes = list(CATALOG_SCENARIOS)
    if not codes:
        return get_default_scenario()
    print("Scénarios :")
    for i, code in enumerate(codes, 1):
        scenario = CATALOG_SCENARIOS[code]
        print(f"{i}) {scenario.name} — {scenario.note}")
    choice = get_input(
        input_message="Scénario : ",
        error_message=f"⚠️ Choisis un numéro entre 1 et {len(codes)}.",
        fn_validation=lambda x: 1 <= x <= len(codes),
    )
    return CATALOG_SCENARIOS[codes[choice - 1]]


def run():
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    scenario = choose_scenario()
    scenario.show_scenario()

    name = get_line("Nom de votre zoo : ") or "Zoo sans nom"
    money = get_input(
        input_message=f"Capital de départ ({scenario.initial_money} par défaut, 0 pour le garder) : ",
        error_message="⚠️ Saisis un montant positif ou nul.",
        fn_validation=lambda x: x >= 0,
    )

    rng = NumpyRandomSource()
    zoo = open_zoo(name, money or scenario.initial_money, rng, scenario)
    Game(zoo, rng).play()


if __name__ == "__main__":
    run()
