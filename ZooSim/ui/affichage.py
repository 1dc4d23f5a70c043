from typing import List

from ZooSim.console_style import bold, cyan, red, signed, yellow
from ZooSim.core.results import ActionResult, DayOutcome, DayReport
from ZooSim.domain.animal import Animal
from ZooSim.domain.enclosure import Enclosure
from ZooSim.domain.staff import Employee
from ZooSim.domain.types import Climate
from ZooSim.domain.zoo import Zoo


def format_coins(x: int) -> str:
    """Format an integer amount as coins, thousands separated by spaces."""
    return f"{x:,d} pièces".replace(",", " ")


def _bar(current: int, maxv: int, width: int = 20, fill_char: str = "█") -> str:
    """Text progress bar; empty when maxv <= 0."""
    if maxv <= 0:
        return " " * width
    ratio = max(0.0, min(1.0, float(current) / float(maxv)))
    n = int(round(ratio * width))
    return fill_char * n + "·" * (width - n)


def _signed_coins(x: int) -> str:
    return signed(x, f"{x:+,d}".replace(",", " "))


def print_result(result: ActionResult) -> None:
    if result.ok:
        print(f"✔ {result.message}")
    elif result.error is None:
        print(yellow(f"• {result.message}"))
    else:
        print(red(f"✖ {result.message}"))


# ---------- Tableau de bord ----------


def print_status(zoo: Zoo) -> None:
    """Tableau de bord affiché avant chaque menu principal."""
    print(f"\n{'═' * 60}")
    print(bold(f"🦁 {zoo.name} — Jour {zoo.day}/{zoo.max_days}"))
    print(f"{'═' * 60}")
    print(f"💰 Capital      : {format_coins(zoo.money)}")
    print(f"🥩 Nourriture   : {zoo.food} kg")
    print(f"⭐ Popularité   : {zoo.popularity}  (≈ {zoo.visitors()} visiteurs/jour)")
    animals = zoo.get_total_animals()
    capacity = zoo.total_capacity()
    print(f"🐾 Animaux      : {animals}/{capacity} [{_bar(animals, capacity)}]")
    infected = zoo.get_total_infected()
    if infected:
        print(red(f"🦠 Malades      : {infected}"))
    print(f"🏠 Enclos       : {len(zoo.enclosures)}")
    print(
        f"👥 Personnel    : {len(zoo.employees)} "
        f"(salaires {format_coins(zoo.total_salaries())}/jour)"
    )
    print(f"🧾 Entretien    : {format_coins(zoo.total_enclosure_costs())}/jour")
    if zoo.daily_events:
        print(cyan("📰 Journal du jour :"))
        for line in zoo.daily_events:
            print(f"   • {line}")


def print_day_report(report: DayReport) -> None:
    """Affiche le rapport d'une journée écoulée."""
    print(f"\n{'─' * 60}")
    print(bold(f"📅 Bilan du jour {report.day} — {report.zoo_name}"))
    print(f"{'─' * 60}")

    if report.event is not None:
        mark = "🎉" if report.event.positive else "⚠"
        print(cyan(f"{mark} Événement : {report.event.description}"))

    for name in report.infections:
        print(yellow(f"🦠 « {name} » a contracté le virus."))
    for cause, records in report.deaths_by_cause().items():
        for record in records:
            print(red(f"✝ « {record.name} » ({record.species}) est mort {cause.label}."))

    print(f"\nVisiteurs          : {report.visitors:>8d}")
    print(f"Animaux exposés    : {report.animals_count:>8d}")
    print(f"Recettes           : {format_coins(report.income):>16}")
    print(f"Salaires           : {format_coins(report.salaries):>16}")
    print(f"Entretien enclos   : {format_coins(report.enclosure_costs):>16}")
    print(f"Nourriture         : {format_coins(report.food_cost):>16}")
    if report.event_money:
        print(f"Événement          : {_signed_coins(report.event_money):>16}")
    print(f"Dépenses totales   : {format_coins(report.expenses):>16}")

    if report.food_deficit:
        print(red(f"\n🥩 Manque de nourriture : {report.food_deficit} kg !"))
    if report.infected_count:
        print(yellow(f"🦠 {report.infected_count} malade(s) : la popularité en souffre."))

    print(
        f"\n⭐ Popularité : {report.popularity_start} → {report.popularity_end} "
        f"(fluctuation {report.popularity_drift:+d})"
    )
    print(
        f"💰 Capital    : {format_coins(report.money_start)} → {format_coins(report.money_end)} "
        f"({_signed_coins(report.net)})"
    )
    print(f"{'─' * 60}")


def print_final_message(zoo: Zoo, outcome: DayOutcome) -> None:
    print(f"\n{'═' * 60}")
    if outcome is DayOutcome.BANKRUPT:
        print(red(bold(f"💸 FAILLITE ! {zoo.name} ferme ses portes au jour {zoo.day}.")))
    elif outcome is DayOutcome.COMPLETED:
        print(bold(f"🏁 Fin de la saison : {zoo.name} a tenu {zoo.max_days} jours !"))
    else:
        print(f"👋 Partie interrompue au jour {zoo.day}.")
    print(f"Capital final : {format_coins(zoo.money)} | Animaux : {zoo.get_total_animals()}")
    print(f"{'═' * 60}\n")


# ---------- Listes ----------


def describe_animal(animal: Animal) -> str:
    sick = red(" [malade]") if animal.is_infected else ""
    return (
        f"{animal.display_name} — {animal.species}, {animal.gender.value}, "
        f"{animal.age_in_days} j, {animal.weight} kg, {animal.climate.label}, "
        f"{animal.diet.label}, {animal.habitat.label}{sick}"
    )


def print_market(zoo: Zoo) -> None:
    print("\n--- Marché aux animaux ---")
    if not zoo.animal_market:
        print("(vide)")
        return
    for i, animal in enumerate(zoo.animal_market, 1):
        print(
            f"{i}. {animal.species} — {animal.climate.label}, {animal.age_in_days} j, "
            f"{animal.weight} kg, {animal.gender.value}, {animal.diet.label}, "
            f"{animal.habitat.label} — {format_coins(animal.calculate_price())}"
        )
    print(f"Prix médian : {format_coins(int(zoo.market_median_price()))}")


def enclosure_line(enclosure: Enclosure) -> str:
    return (
        f"{enclosure.climate.label} — niveau {enclosure.level}, "
        f"{enclosure.size}/{enclosure.capacity} animaux, "
        f"entretien {format_coins(enclosure.daily_cost)}/jour"
    )


def print_enclosures(enclosures: List[Enclosure]) -> None:
    print("\n--- Enclos ---")
    if not enclosures:
        print("(aucun enclos)")
        return
    for i, enclosure in enumerate(enclosures, 1):
        print(f"{i}. {enclosure_line(enclosure)}")


def print_animals(enclosure: Enclosure, with_price: bool = False) -> None:
    if not enclosure.animals:
        print("(enclos vide)")
        return
    for i, animal in enumerate(enclosure.animals, 1):
        price = f" — {format_coins(animal.calculate_price())}" if with_price else ""
        print(f"{i}. {describe_animal(animal)}{price}")


def print_all_animals(zoo: Zoo) -> None:
    print("\n--- Animaux du zoo ---")
    if not zoo.get_total_animals():
        print("(aucun animal)")
        return
    current = None
    for index, animal in zoo.iter_animals():
        if index != current:
            current = index
            print(bold(f"Enclos {index + 1} — {enclosure_line(zoo.enclosures[index])}"))
        print(f"   • {describe_animal(animal)}")
        if animal.parents != ("", ""):
            print(f"     {animal.describe_parents()}")


def print_employees(employees: List[Employee]) -> None:
    if not employees:
        print("(personne)")
        return
    for i, employee in enumerate(employees, 1):
        print(
            f"{i}. {employee.name} — {employee.position.label} — "
            f"{format_coins(employee.salary)}/jour — "
            f"s'occupe de {employee.current_animals}/{employee.max_animals} animaux"
        )


def print_climates() -> None:
    for climate in Climate:
        print(f"{climate.index}. {climate.label} (multiplicateur de prix : {climate.price_multiplier})")
