# compass/shared/models/Progress.py
"""
Modèles de progression étudiant.

CompletedTest est l'unique source de vérité pour la roadmap :
une entrée par test_id et par utilisateur (re-soumission = remplacement).

Format stocké (clé completedTests_{user_id}) :
[
    {
        "testId": "Psychometric_Aptitude_Test",
        "title": "Aptitude Test",
        "score": 16,
        "totalQuestions": 20,
        "percentage": 80,
        "completedAt": "2025-01-15T10:30:00",
        "testType": "psychometric"
    },
    ...
]
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from compass.shared.enums import TestType, EducationType
from compass.shared.numbers import round_half_up, safe_percentage


class CompletedTest(BaseModel):
    test_id: str
    title: str
    score: int = Field(..., ge=0)
    total_questions: int = Field(..., ge=0)
    percentage: int = Field(..., ge=0, le=100)
    completed_at: datetime
    test_type: TestType

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @classmethod
    def from_score(
        cls,
        test_id: str,
        title: str,
        score: int,
        total_questions: int,
        test_type: TestType,
        completed_at: Optional[datetime] = None,
    ) -> "CompletedTest":
        """Construit l'enregistrement en dérivant percentage = round(score/total × 100)."""
        return cls(
            test_id=test_id,
            title=title,
            score=score,
            total_questions=total_questions,
            percentage=round_half_up(safe_percentage(score, total_questions)),
            completed_at=completed_at or datetime.now(timezone.utc),
            test_type=test_type,
        )

    def __repr__(self):
        return f"<CompletedTest test_id={self.test_id} pct={self.percentage}>"


class StudentProfile(BaseModel):
    """
    Profil scolaire, sert uniquement à déterminer les tests académiques applicables.
    """
    education_type: Optional[EducationType] = None
    class_level: Optional[str] = Field(None, alias="class")
    stream: Optional[str] = None
    course: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)
