# engine/exam/seeded_random.py
"""
Générateur pseudo-aléatoire reproductible : ZÉRO accès DB.

Seed :
    hash 32 bits glissant sur "{user_id}_{test_id}"
        h = (h × 31 + code_unit)   tronqué en entier signé 32 bits à chaque pas
    seed = |h|

Flux (générateur congruentiel linéaire) :
    seed = (seed × 9301 + 49297) mod 233280
    tirage = seed / 233280   ∈ [0, 1)

Le but est la reproductibilité (même utilisateur + même test = même examen),
pas l'imprévisibilité : ce générateur n'est PAS cryptographique.

Appelé par : engine/exam/randomizer.py
"""
from typing import List, Sequence, TypeVar

T = TypeVar("T")

LCG_MULTIPLIER = 9301
LCG_INCREMENT  = 49297
LCG_MODULUS    = 233280

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - 0x100000000 if value & _INT32_SIGN else value


def _utf16_code_units(text: str) -> List[int]:
    # Hors BMP → paire de substitution, comme charCodeAt()
    raw = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(raw[i:i + 2], "little") for i in range(0, len(raw), 2)]


def generate_user_seed(user_id: str, test_id: str) -> int:
    """
    Seed stable pour un couple (utilisateur, test).

    Deux couples différents donnent deux seeds différents avec une forte
    probabilité ; le même couple redonne toujours le même seed.
    """
    h = 0
    for code_unit in _utf16_code_units(f"{user_id}_{test_id}"):
        h = _to_int32((h << 5) - h + code_unit)
    return abs(h)


class SeededRandom:
    """
    Générateur à état : chaque instance produit une séquence unique
    déterminée par son seed. Une instance par appel du randomizer,
    jamais partagée entre utilisateurs.
    """

    def __init__(self, seed: int):
        self.seed = seed

    def next(self) -> float:
        self.seed = (self.seed * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self.seed / LCG_MODULUS

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Fisher-Yates sur une copie, la séquence d'entrée n'est jamais modifiée."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = int(self.next() * (i + 1))
            result[i], result[j] = result[j], result[i]
        return result

    @classmethod
    def for_user(cls, user_id: str, test_id: str) -> "SeededRandom":
        return cls(generate_user_seed(user_id, test_id))
