# compass/shared/models/Assessment.py
"""
Modèles de la banque de questions et des sessions d'examen.

Banque (JSON source) → Question → ExamSession (jamais persistée)

Format source d'une question :
{
    "question_id": "ACAD_10ART_001",
    "question_text": "Who wrote the book \"Discovery of India\"?",
    "options": [{"option_id": "A", "text": "Mahatma Gandhi"}, ...],   # ou {"A": "...", "B": "..."}
    "correct_answer": "B"
}
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional, Union


class Option(BaseModel):
    option_id: str
    text: str
    model_config = ConfigDict(from_attributes=True, frozen=True)


# Union taguée par la forme : liste ordonnée OU mapping id → texte.
# L'engine normalise toujours vers List[Option] avant tout mélange.
OptionsIn = Union[List[Option], Dict[str, str]]


class Question(BaseModel):
    id: str = Field(..., alias="question_id")
    text: str = Field(..., alias="question_text")
    options: OptionsIn
    correct_answer: str
    subject: Optional[str] = None
    difficulty: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    def option_text(self, option_id: str) -> Optional[str]:
        """Texte de l'option `option_id`, quelle que soit la forme des options."""
        if isinstance(self.options, dict):
            return self.options.get(option_id)
        for option in self.options:
            if option.option_id == option_id:
                return option.text
        return None

    def __repr__(self):
        return f"<Question id={self.id} correct={self.correct_answer}>"


class ExamSession(BaseModel):
    """
    Examen randomisé pour un couple (utilisateur, test).
    Recréé à chaque démarrage, seul le seed est reproductible, jamais stocké.
    """
    test_id: str
    user_id: Optional[str] = None
    is_deterministic: bool = True
    questions: List[Question] = []

    model_config = ConfigDict(from_attributes=True)

    @property
    def total_questions(self) -> int:
        return len(self.questions)
