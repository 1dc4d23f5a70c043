import json
from pathlib import Path
from typing import Callable, Union

from pydantic import BaseModel, RootModel


def get_input(
    input_message: str,
    fn_validation: Callable = lambda x: True,
    error_message: str = "Saisie incorrecte. Réessayez.",
) -> int:
    """Prompt for an integer with validation.

    - input_message: prompt shown to the user
    - fn_validation: predicate taking the parsed int and returning True if valid
    - error_message: message displayed on invalid input

    Le moteur ne voit jamais une saisie mal formée : on boucle ici.
    """
    while True:
        try:
            result = int(input(input_message).strip())
            if fn_validation(result):
                return result
        except ValueError:
            pass
        print(error_message)


def get_line(input_message: str) -> str:
    """Lit une ligne brute (noms), éventuellement vide."""
    return input(input_message).strip()


def confirm(question: str) -> bool:
    """Porte de confirmation 1/2 : True seulement si le joueur tape 1."""
    print(question)
    print("1. Oui\n2. Non")
    return get_input("Votre choix : ") == 1


def load_and_validate(data_path: Path, model: Union[RootModel, BaseModel]) -> BaseModel:
    """
    Load and validate model data from data_path.
    Returns a validated model instance.
    """
    if not data_path.exists():
        raise FileNotFoundError(f"Data file not found: {data_path}")

    with data_path.open("r", encoding="utf-8") as f:
        raw_data = json.load(f)
        return model.model_validate(raw_data)
