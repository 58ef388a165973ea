# tests/conftest.py
"""
Fixtures et factories partagées sur l'ensemble de la suite de tests.

Deux couches :
    1. Engine  : fonctions pures, aucun mock nécessaire (factories de modèles)
    2. Service : store clé-valeur en mémoire ou AsyncMock + repos patchés via pytest-mock
"""
import pytest
from datetime import datetime
from typing import Dict, List, Optional
from unittest.mock import AsyncMock

from compass.engine.progress.academic import MANDATORY_PSYCHOMETRIC_TESTS
from compass.infra.storage import InMemoryKeyValueStore
from compass.shared.enums import EducationType, TestType
from compass.shared.models import CompletedTest, Question, StudentProfile


# ── Banque de questions ───────────────────────────────────────────────────────

def make_question(index: int = 1, correct_answer: str = "B", **kwargs) -> Question:
    """Question à 4 options A-D ; le texte de chaque option est unique."""
    defaults = {
        "question_id": f"Q{index:03d}",
        "question_text": f"Question numéro {index} ?",
        "options": [
            {"option_id": oid, "text": f"Réponse {index}{oid}"}
            for oid in ("A", "B", "C", "D")
        ],
        "correct_answer": correct_answer,
    }
    defaults.update(kwargs)
    return Question.model_validate(defaults)


def make_question_bank(n: int = 10) -> List[Question]:
    return [make_question(i, correct_answer="ABCD"[i % 4]) for i in range(1, n + 1)]


def make_bank_payload(n: int = 10, title: Optional[str] = None) -> Dict:
    """Payload JSON d'un test, au format des fichiers {test_id}.json."""
    payload = {
        "test_category": "Academic",
        "questions": [q.model_dump(by_alias=True) for q in make_question_bank(n)],
    }
    if title:
        payload["title"] = title
    return payload


# ── Progression ───────────────────────────────────────────────────────────────

def make_completed_test(
    test_id: str = "Psychometric_Aptitude_Test",
    percentage: int = 80,
    test_type: Optional[TestType] = None,
    **kwargs,
) -> CompletedTest:
    if test_type is None:
        test_type = TestType.PSYCHOMETRIC if "Psychometric" in test_id else TestType.ACADEMIC
    defaults = {
        "test_id": test_id,
        "title": test_id.replace("_", " "),
        "score": percentage // 5,
        "total_questions": 20,
        "percentage": percentage,
        "completed_at": datetime(2025, 1, 15, 10, 30),
        "test_type": test_type,
    }
    defaults.update(kwargs)
    return CompletedTest(**defaults)


def make_psychometric_set(
    aptitude: int = 80,
    emotional: int = 60,
    interest: int = 40,
    personality: int = 40,
    orientation: int = 40,
) -> List[CompletedTest]:
    """Les 5 tests obligatoires, dans l'ordre canonique."""
    percentages = (aptitude, emotional, interest, personality, orientation)
    return [
        make_completed_test(test_id, pct)
        for test_id, pct in zip(MANDATORY_PSYCHOMETRIC_TESTS, percentages)
    ]


def make_student_profile(**kwargs) -> StudentProfile:
    defaults = {
        "education_type": EducationType.SCHOOL,
        "class_level": "10",
        "stream": "Science",
        "course": None,
    }
    defaults.update(kwargs)
    return StudentProfile(**defaults)


# ── Stores ────────────────────────────────────────────────────────────────────

@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def failing_store() -> AsyncMock:
    """Store dont toutes les opérations lèvent une erreur backend."""
    mock = AsyncMock()
    mock.get_item.side_effect = OSError("disque indisponible")
    mock.set_item.side_effect = OSError("disque indisponible")
    mock.remove_item.side_effect = OSError("disque indisponible")
    return mock
