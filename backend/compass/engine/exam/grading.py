# engine/exam/grading.py
"""
Correction d'un examen randomisé, fonction pure.

Les réponses sont indexées par position dans l'examen (pas par id source),
comparées au correct_answer RECALCULÉ par le randomizer.
"""
from datetime import datetime
from typing import Dict, List, Optional

from compass.shared.enums import TestType
from compass.shared.models import CompletedTest, Question

PSYCHOMETRIC_MARKER = "Psychometric"


def calculate_score(questions: List[Question], answers: Dict[int, str]) -> int:
    """Nombre de réponses exactes. Question sans réponse = fausse."""
    return sum(
        1 for index, question in enumerate(questions)
        if answers.get(index) == question.correct_answer
    )


def infer_test_type(test_id: str) -> TestType:
    if PSYCHOMETRIC_MARKER in test_id:
        return TestType.PSYCHOMETRIC
    return TestType.ACADEMIC


def build_completed_test(
    test_id: str,
    title: str,
    questions: List[Question],
    answers: Dict[int, str],
    completed_at: Optional[datetime] = None,
) -> CompletedTest:
    score = calculate_score(questions, answers)
    return CompletedTest.from_score(
        test_id=test_id,
        title=title,
        score=score,
        total_questions=len(questions),
        test_type=infer_test_type(test_id),
        completed_at=completed_at,
    )
