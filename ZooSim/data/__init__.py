"""
Point d'entrée data : tables JSON (espèces, événements, scénarios) et
paramètres de jeu. Les modèles pydantic qui valident ces tables vivent
dans `domain` et `core` ; ce module ne fait que résoudre les chemins.
"""

from pathlib import Path

DATA_DIR = Path(__file__).parent


def data_file(name: str) -> Path:
    """Chemin absolu d'un fichier de données livré avec le paquet."""
    return DATA_DIR / name
