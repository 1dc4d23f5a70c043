# ZooSim/ui/director_office.py
"""
Bureau du directeur : menus interactifs du zoo.

Chaque action affiche d'abord un devis, demande confirmation, puis seulement
appelle la commande du moteur. Une annulation ne touche jamais à l'état.
"""

from typing import Optional

from ZooSim.core.breeding import breeding_result, commit_breeding, plan_breeding
from ZooSim.core.disease import cure_animal, cure_cost
from ZooSim.core.facilities import build_enclosure, quote_enclosure, upgrade_enclosure
from ZooSim.core.market import (
    buy_animal,
    purchase_blocked,
    refresh_cost,
    refresh_market,
    rename_animal,
    sell_animal,
    sell_price,
)
from ZooSim.core.random_source import RandomSource
from ZooSim.core.recruitment import fire_employee, hire_employee
from ZooSim.core.resources import buy_food, food_cost, launch_ad_campaign
from ZooSim.data.game_params import COST_PER_POPULARITY
from ZooSim.domain.types import HIREABLE_POSITIONS, Climate
from ZooSim.domain.zoo import Zoo
from ZooSim.ui.affichage import (
    enclosure_line,
    format_coins,
    print_all_animals,
    print_animals,
    print_climates,
    print_employees,
    print_enclosures,
    print_market,
    print_result,
)
from ZooSim.utils import confirm, get_input, get_line


def _pick(count: int, prompt: str) -> Optional[int]:
    """Numéro 1..count saisi par le joueur, converti en index 0-based (None si 0)."""
    choice = get_input(
        input_message=f"{prompt} (0 pour annuler) : ",
        fn_validation=lambda x: 0 <= x <= count,
        error_message=f"⚠️ Choisis un numéro entre 0 et {count}.",
    )
    return None if choice == 0 else choice - 1


def _pick_enclosure(zoo: Zoo) -> Optional[int]:
    if not zoo.enclosures:
        print("Vous n'avez aucun enclos.")
        return None
    print_enclosures(zoo.enclosures)
    return _pick(len(zoo.enclosures), "Numéro de l'enclos")


def _pick_animal(zoo: Zoo, with_price: bool = False):
    """Retourne (index_enclos, index_animal) ou None."""
    enclosure_index = _pick_enclosure(zoo)
    if enclosure_index is None:
        return None
    enclosure = zoo.enclosures[enclosure_index]
    if not enclosure.animals:
        print("Cet enclos est vide.")
        return None
    print_animals(enclosure, with_price=with_price)
    animal_index = _pick(len(enclosure.animals), "Numéro de l'animal")
    if animal_index is None:
        return None
    return enclosure_index, animal_index


# ——— Animaux ———


def _action_buy(zoo: Zoo):
    if not zoo.animal_market:
        print("Aucun animal sur le marché.")
        return
    if purchase_blocked(zoo):
        print("Après le 10e jour, un seul achat par jour : revenez demain.")
        return
    print_market(zoo)
    market_index = _pick(len(zoo.animal_market), "Animal à acheter")
    if market_index is None:
        return
    offer = zoo.animal_market[market_index]
    price = offer.calculate_price()
    if not confirm(f"Acheter {offer.species} pour {format_coins(price)} ?"):
        print("Achat annulé.")
        return

    suitable = zoo.suitable_enclosures(offer)
    if not suitable:
        print("Aucun enclos compatible pour cet animal.")
        return
    print("\nEnclos compatibles :")
    for i, enclosure in enumerate(suitable, 1):
        print(f"{i}. {enclosure_line(enclosure)}")
    choice = _pick(len(suitable), "Enclos d'accueil")
    if choice is None:
        print("Achat annulé.")
        return
    name = get_line("Nom de l'animal : ")
    print_result(buy_animal(zoo, market_index, suitable[choice], name))


def _action_sell(zoo: Zoo):
    picked = _pick_animal(zoo, with_price=True)
    if picked is None:
        return
    animal = zoo.enclosures[picked[0]].animals[picked[1]]
    if confirm(f"Vendre « {animal.display_name} » pour {format_coins(sell_price(animal))} ?"):
        print_result(sell_animal(zoo, *picked))
    else:
        print("Vente annulée.")


def _action_cure(zoo: Zoo):
    if not zoo.get_total_infected():
        print("Aucun animal malade.")
        return
    picked = _pick_animal(zoo)
    if picked is None:
        return
    animal = zoo.enclosures[picked[0]].animals[picked[1]]
    if not animal.is_infected:
        print(f"« {animal.display_name} » n'est pas malade.")
        return
    if confirm(f"Soigner « {animal.display_name} » pour {format_coins(cure_cost())} ?"):
        print_result(cure_animal(zoo, *picked))
    else:
        print("Soin annulé.")


def _action_refresh(zoo: Zoo, rng: RandomSource):
    cost = refresh_cost(zoo)
    question = (
        f"Renouveler le marché pour {format_coins(cost)} ?"
        if cost
        else "Renouveler le marché (gratuit) ?"
    )
    if confirm(question):
        print_result(refresh_market(zoo, rng))
    else:
        print("Marché inchangé.")


def _action_breed(zoo: Zoo, rng: RandomSource):
    enclosure_index = _pick_enclosure(zoo)
    if enclosure_index is None:
        return
    enclosure = zoo.enclosures[enclosure_index]
    plan = plan_breeding(enclosure, rng)
    summary = breeding_result(plan)
    print_result(summary)
    if not plan.is_paired:
        return
    if not confirm("Lancer la reproduction ?"):
        print("Reproduction annulée.")
        return
    names = [
        get_line(f"Nom du petit n°{i} ({draft.species}, {draft.gender.value}) : ")
        for i, draft in enumerate(plan.offspring, 1)
    ]
    print_result(commit_breeding(enclosure, plan, names))


def _action_rename(zoo: Zoo):
    picked = _pick_animal(zoo)
    if picked is None:
        return
    new_name = get_line("Nouveau nom : ")
    print_result(rename_animal(zoo, *picked, new_name))


def manage_animals(zoo: Zoo, rng: RandomSource):
    print("\n=== Animaux ===")
    print("1. Acheter un animal")
    print("2. Vendre un animal")
    print("3. Voir les animaux")
    print("4. Soigner un animal")
    print(f"5. Renouveler le marché ({format_coins(refresh_cost(zoo))})")
    print("6. Faire se reproduire un enclos")
    print("7. Renommer un animal")
    print("8. Voir le marché")
    print("0. Retour")
    choice = get_input("> ", lambda x: 0 <= x <= 8, "Choix invalide.")

    if choice == 1:
        _action_buy(zoo)
    elif choice == 2:
        _action_sell(zoo)
    elif choice == 3:
        print_all_animals(zoo)
    elif choice == 4:
        _action_cure(zoo)
    elif choice == 5:
        _action_refresh(zoo, rng)
    elif choice == 6:
        _action_breed(zoo, rng)
    elif choice == 7:
        _action_rename(zoo)
    elif choice == 8:
        print_market(zoo)


# ——— Personnel ———


def _action_hire(zoo: Zoo):
    name = get_line("Nom du nouvel employé : ")
    for i, position in enumerate(HIREABLE_POSITIONS, 1):
        print(
            f"{i}. {position.label} — {format_coins(position.salary)}/jour, "
            f"{position.max_animals} animaux max"
        )
    choice = _pick(len(HIREABLE_POSITIONS), "Poste")
    if choice is None:
        print("Recrutement annulé.")
        return
    print_result(hire_employee(zoo, name, HIREABLE_POSITIONS[choice]))


def _action_fire(zoo: Zoo):
    dismissable = zoo.dismissable_employees()
    if not dismissable:
        print("Aucun employé à licencier.")
        return
    print_employees(dismissable)
    choice = _pick(len(dismissable), "Employé à licencier")
    if choice is None:
        print("Licenciement annulé.")
        return
    print_result(fire_employee(zoo, choice))


def manage_employees(zoo: Zoo):
    print("\n=== Personnel ===")
    print("1. Embaucher")
    print("2. Licencier")
    print("3. Voir l'équipe")
    print("0. Retour")
    choice = get_input("> ", lambda x: 0 <= x <= 3, "Choix invalide.")

    if choice == 1:
        _action_hire(zoo)
    elif choice == 2:
        _action_fire(zoo)
    elif choice == 3:
        print("\n--- Équipe ---")
        print_employees(zoo.employees)
        print(f"Masse salariale : {format_coins(zoo.total_salaries())}/jour")


# ——— Enclos ———


def _action_build(zoo: Zoo):
    print_climates()
    climate_index = get_input(
        "Climat : ",
        lambda x: 0 <= x < len(Climate),
        f"⚠️ Choisis un climat entre 0 et {len(Climate) - 1}.",
    )
    climate = Climate.from_index(climate_index)
    capacity = get_input("Capacité (places) : ", lambda x: x >= 1, "⚠️ Au moins 1 place.")
    quote = quote_enclosure(climate, capacity)
    print(
        f"Coût : {format_coins(quote.calculate_cost())}, "
        f"entretien {format_coins(quote.daily_cost)}/jour"
    )
    if confirm("Construire cet enclos ?"):
        print_result(build_enclosure(zoo, climate, capacity))
    else:
        print("Construction annulée.")


def _action_upgrade(zoo: Zoo):
    index = _pick_enclosure(zoo)
    if index is None:
        return
    enclosure = zoo.enclosures[index]
    if not enclosure.can_upgrade:
        print("Niveau maximal atteint pour cet enclos.")
        return
    if confirm(
        f"Améliorer au niveau {enclosure.level + 1} pour {format_coins(enclosure.upgrade_cost())} ?"
    ):
        print_result(upgrade_enclosure(zoo, index))
    else:
        print("Amélioration annulée.")


def manage_enclosures(zoo: Zoo):
    print("\n=== Enclos ===")
    print("1. Construire un enclos")
    print("2. Améliorer un enclos")
    print("3. Voir les enclos")
    print("0. Retour")
    choice = get_input("> ", lambda x: 0 <= x <= 3, "Choix invalide.")

    if choice == 1:
        _action_build(zoo)
    elif choice == 2:
        _action_upgrade(zoo)
    elif choice == 3:
        print_enclosures(zoo.enclosures)


# ——— Ressources ———


def manage_resources(zoo: Zoo):
    print("\n=== Ressources ===")
    print(f"1. Acheter de la nourriture ({format_coins(food_cost(1))}/kg)")
    print(f"2. Campagne publicitaire ({COST_PER_POPULARITY} pièces = +1 popularité)")
    print("0. Retour")
    choice = get_input("> ", lambda x: 0 <= x <= 2, "Choix invalide.")

    if choice == 1:
        kg = get_input("Quantité (kg) : ")
        print_result(buy_food(zoo, kg))
    elif choice == 2:
        budget = get_input("Budget (pièces) : ")
        print_result(launch_ad_campaign(zoo, budget))
