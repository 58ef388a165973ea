# engine/progress/academic.py
"""
Exigences de tests par profil étudiant.

Psychométrie : 5 tests obligatoires pour tous.
Académique   : dépend du profil (classe + filière pour School, cursus pour UG).

School  classe 10      → 1 test par filière
School  classe 11 / 12 → 2 tests par filière (orientation cursus)
UG      avec cursus    → Academic_Test_UG_{course}
"""
from typing import Dict, List, Optional

from compass.shared.enums import EducationType, Stream
from compass.shared.models import StudentProfile

MANDATORY_PSYCHOMETRIC_TESTS = (
    "Psychometric_Aptitude_Test",
    "Psychometric_Emotional_Quotient_Test",
    "Psychometric_Interest_Test",
    "Psychometric_Personality_Test",
    "Psychometric_Orientation_Style_Test",
)

PSYCHOMETRIC_TOTAL = len(MANDATORY_PSYCHOMETRIC_TESTS)

CLASS_10_TESTS: Dict[str, List[str]] = {
    Stream.SCIENCE.value:  ["Academic_Test_10th_Science"],
    Stream.COMMERCE.value: ["Academic_Test_10th_Commerce"],
    Stream.ARTS.value:     ["Academic_Test_10th_Arts"],
}

CLASS_11_12_TESTS: Dict[str, List[str]] = {
    Stream.SCIENCE.value: [
        "Academic_Test_11th12th_Science_BTech",
        "Academic_Test_11th12th_Science_BCA",
    ],
    Stream.COMMERCE.value: [
        "Academic_Test_11th12th_Commerce_BCom",
        "Academic_Test_11th12th_Commerce_BBA",
    ],
    Stream.ARTS.value: [
        "Academic_Test_11th12th_Arts_BA",
        "Academic_Test_11th12th_Arts_BEd",
    ],
}


def get_academic_tests_for_student(profile: Optional[StudentProfile]) -> List[str]:
    """Clés des tests académiques applicables, dans l'ordre de passage conseillé."""
    if profile is None:
        return []

    tests: List[str] = []

    if profile.education_type == EducationType.SCHOOL and profile.class_level:
        if profile.class_level == "10":
            tests.extend(CLASS_10_TESTS.get(profile.stream or "", []))
        if profile.class_level in ("11", "12"):
            tests.extend(CLASS_11_12_TESTS.get(profile.stream or "", []))

    if profile.education_type == EducationType.UG and profile.course:
        tests.append(f"Academic_Test_UG_{profile.course}")

    return tests


def resolve_academic_total(
    profile: Optional[StudentProfile], academic_completed: int
) -> Optional[int]:
    """
    Nombre de tests académiques requis.

    - profil → N clés > 0         : N
    - aucune clé, mais des tests académiques déjà passés : on conserve ce compte
    - sinon                        : None (ne pas toucher au total stocké)
    """
    calculated = len(get_academic_tests_for_student(profile))
    if calculated > 0:
        return calculated
    if academic_completed > 0:
        return academic_completed
    return None
