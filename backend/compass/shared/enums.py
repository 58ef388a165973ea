# compass/shared/enums.py
"""
Toutes les énumérations du projet Compass.

Source unique de vérité pour les types de tests et de profils étudiants.
Importé par les modèles, schemas, services et engine.
"""

from enum import Enum

class TestType(str, Enum):
    __test__ = False   # pas une classe de test pour pytest

    PSYCHOMETRIC = "psychometric"   # 5 tests obligatoires
    ACADEMIC     = "academic"       # dépend du profil (classe, filière, cursus)


class EducationType(str, Enum):
    SCHOOL = "School"
    UG     = "UG"       # Undergraduate


class Stream(str, Enum):
    SCIENCE  = "Science"
    COMMERCE = "Commerce"
    ARTS     = "Arts"
