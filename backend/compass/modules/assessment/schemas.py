# compass/modules/assessment/schemas.py
from pydantic import BaseModel, ConfigDict
from typing import List, Optional


# ── Examen ─────────────────────────────────────────────────

class OptionOut(BaseModel):
    option_id: str
    text: str
    model_config = ConfigDict(from_attributes=True)


class QuestionOut(BaseModel):
    """Question présentée au candidat, correct_answer jamais exposé."""
    id: str
    text: str
    options: List[OptionOut]
    subject: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)


class ExamOut(BaseModel):
    test_id: str
    title: str
    is_deterministic: bool
    total_questions: int
    questions: List[QuestionOut]


# ── Résultat ───────────────────────────────────────────────

class ExamResultOut(BaseModel):
    test_id: str
    title: str
    score: int
    total_questions: int
    percentage: int
    test_type: str
    psychometric_progress: str
    academic_progress: str
    all_completed: bool
