# compass/shared/models/__init__.py
"""
Point d'entrée unique pour tous les modèles pydantic du domaine.

TOUJOURS importer les modèles depuis ce fichier :
  from compass.shared.models import Question, CompletedTest, ...

Jamais directement depuis compass.shared.models.Assessment, etc.
"""

from compass.shared.models.Assessment import Option, OptionsIn, Question, ExamSession
from compass.shared.models.Progress   import CompletedTest, StudentProfile

__all__ = [
    # Assessment
    "Option",
    "OptionsIn",
    "Question",
    "ExamSession",
    # Progress
    "CompletedTest",
    "StudentProfile",
]
