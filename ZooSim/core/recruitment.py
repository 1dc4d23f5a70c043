"""
Recrutement, licenciement et répartition quotidienne du personnel.
"""

import logging

from ZooSim.core.results import ActionResult, ErrorKind
from ZooSim.domain.staff import Employee
from ZooSim.domain.types import HIREABLE_POSITIONS, Position
from ZooSim.domain.zoo import Zoo

logger = logging.getLogger(__name__)


def hire_employee(zoo: Zoo, name: str, position: Position) -> ActionResult:
    """Embauche : un salaire journalier est versé immédiatement à la signature."""
    if position not in HIREABLE_POSITIONS:
        return ActionResult.failure(
            ErrorKind.POLICY_VIOLATION, f"Le poste « {position.label} » n'est pas ouvert."
        )
    if zoo.money < position.salary:
        return ActionResult.failure(
            ErrorKind.INSUFFICIENT_FUNDS,
            f"Fonds insuffisants : il faut {position.salary} pièces pour embaucher.",
        )
    employee = Employee(name or position.label, position)
    zoo.employees.append(employee)
    zoo.money -= position.salary
    logger.info(f"Hired {employee.name} as {position.value}")
    return ActionResult.success(
        f"{employee.name} rejoint l'équipe ({position.label}, {position.salary} pièces/jour).",
        amount=position.salary,
    )


def fire_employee(zoo: Zoo, index: int) -> ActionResult:
    """Licencie le `index`-ième employé licenciable (le directeur est exclu)."""
    dismissable = zoo.dismissable_employees()
    if not dismissable:
        return ActionResult.failure(ErrorKind.INVALID_SELECTION, "Aucun employé à licencier.")
    if not 0 <= index < len(dismissable):
        return ActionResult.failure(ErrorKind.INVALID_SELECTION, "Numéro d'employé invalide.")
    employee = dismissable[index]
    zoo.employees = [e for e in zoo.employees if e is not employee]
    logger.info(f"Fired {employee.name} ({employee.position.value})")
    return ActionResult.success(f"{employee.name} a quitté le zoo.")


def allocate_staff(zoo: Zoo) -> None:
    """Recalcule la charge de chaque employé, enclos par enclos.

    Pour chaque enclos, les employés non saturés prennent en charge jusqu'à
    tout l'enclos dans la limite de leur capacité ; plusieurs employés peuvent
    donc suivre les mêmes animaux. Dès qu'un employé atteint sa capacité, on
    passe à l'enclos suivant.
    """
    for employee in zoo.employees:
        employee.reset_load()

    for enclosure in zoo.enclosures:
        for employee in zoo.employees:
            if employee.free_capacity == 0:
                continue
            employee.assign(enclosure.size)
            if employee.free_capacity == 0:
                break
