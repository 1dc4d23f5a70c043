import logging
from typing import List, Optional

from ZooSim.core.random_source import RandomSource
from ZooSim.core.results import DayOutcome, DayReport
from ZooSim.core.turn import next_day
from ZooSim.domain.zoo import Zoo
from ZooSim.ui.affichage import print_day_report, print_final_message, print_status
from ZooSim.ui.director_office import (
    manage_animals,
    manage_employees,
    manage_enclosures,
    manage_resources,
)
from ZooSim.utils import confirm, get_input

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, zoo: Zoo, rng: RandomSource):
        """Moteur de partie : enchaîne les journées d'un zoo.

        Args:
            zoo: Zoo ouvert via `open_zoo`
            rng: Source d'aléa unique de la session
        """
        self.zoo = zoo
        self.rng = rng
        self.reports: List[DayReport] = []
        self.outcome: DayOutcome = DayOutcome.CONTINUE

    @property
    def is_over(self) -> bool:
        return self.outcome is not DayOutcome.CONTINUE

    @property
    def last_report(self) -> Optional[DayReport]:
        return self.reports[-1] if self.reports else None

    def advance(self) -> DayReport:
        """Joue une journée et conserve son rapport."""
        if self.is_over:
            raise RuntimeError(f"Game already over ({self.outcome.value})")
        report = next_day(self.zoo, self.rng)
        self.reports.append(report)
        self.outcome = report.outcome
        logger.debug(f"Day {report.day} report stored ({len(self.reports)} in history)")
        return report

    def play(self) -> DayOutcome:
        """Boucle interactive : tableau de bord, menus, jour suivant, quitter.

        Se termine sur abandon du joueur, limite de jours ou faillite.
        Retourne l'issue de la partie (CONTINUE si le joueur a quitté).
        """
        while not self.is_over:
            print_status(self.zoo)
            print("\n1. Animaux")
            print("2. Personnel")
            print("3. Enclos")
            print("4. Ressources")
            print("5. Jour suivant")
            print("0. Quitter")
            choice = get_input("> ", lambda x: 0 <= x <= 5, "Choix invalide.")

            if choice == 1:
                manage_animals(self.zoo, self.rng)
            elif choice == 2:
                manage_employees(self.zoo)
            elif choice == 3:
                manage_enclosures(self.zoo)
            elif choice == 4:
                manage_resources(self.zoo)
            elif choice == 5:
                print_day_report(self.advance())
            elif confirm("Quitter la partie ?"):
                logger.info(f"Player left on day {self.zoo.day}")
                break

        print_final_message(self.zoo, self.outcome)
        return self.outcome
