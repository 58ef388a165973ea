# compass/shared/numbers.py
"""Helpers numériques partagés entre engine et modèles."""
import math


def round_half_up(value: float) -> int:
    """
    Arrondi commercial (0.5 → supérieur).

    round() de Python arrondit au pair (round(62.5) == 62) : les pourcentages
    affichés à l'étudiant doivent rester ceux calculés à la soumission
    (62.5 → 63).
    """
    return int(math.floor(value + 0.5))


def safe_percentage(part: float, total: float) -> float:
    """part / total × 100, 0 si le dénominateur est nul."""
    if not total:
        return 0.0
    return (part / total) * 100
