# modules/assessment/repository.py
"""
Accès à la banque de questions pour le module assessment.
Toute la lecture de fichiers est ici, les services ne parsent jamais de JSON.

Une banque est :
    - soit un mapping   test_id → payload JSON (dict déjà chargé)
    - soit un dossier   contenant un fichier {test_id}.json par test

Format d'un payload :
{
    "test_category": "Academic",
    "description": "Academic test for 10th grade Arts students",
    "questions": [ {question_id, question_text, options, correct_answer}, ... ]
}
"""
import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from compass.core.config import settings
from compass.core.logging import get_logger
from compass.shared.models import Question

logger = get_logger(__name__)

QuestionBank = Union[Mapping[str, Dict[str, Any]], str, Path]


class QuestionBankRepository:

    # ─────────────────────────────────────────────
    # PAYLOAD BRUT
    # ─────────────────────────────────────────────

    def _resolve_bank(self, bank: Optional[QuestionBank]) -> QuestionBank:
        if bank is not None:
            return bank
        if settings.QUESTION_BANK_DIR:
            return Path(settings.QUESTION_BANK_DIR)
        raise ValueError("Aucune banque de questions configurée.")

    def get_payload(self, bank: Optional[QuestionBank], test_id: str) -> Optional[Dict[str, Any]]:
        """Payload JSON du test, None si le test n'existe pas dans la banque."""
        source = self._resolve_bank(bank)

        if isinstance(source, Mapping):
            return source.get(test_id)

        path = Path(source) / f"{test_id}.json"
        if not path.is_file():
            return None
        with path.open(encoding="utf-8") as fh:
            return json.load(fh)

    def list_test_ids(self, bank: Optional[QuestionBank]) -> List[str]:
        source = self._resolve_bank(bank)
        if isinstance(source, Mapping):
            return list(source.keys())
        return sorted(p.stem for p in Path(source).glob("*.json"))

    # ─────────────────────────────────────────────
    # QUESTIONS
    # ─────────────────────────────────────────────

    def get_questions(self, bank: Optional[QuestionBank], test_id: str) -> Optional[List[Question]]:
        """
        Questions validées du test, dans l'ordre source.
        Une question invalide est ignorée (loggée) plutôt que de bloquer tout l'examen.
        """
        payload = self.get_payload(bank, test_id)
        if payload is None:
            return None

        questions: List[Question] = []
        for raw in payload.get("questions") or []:
            try:
                questions.append(Question.model_validate(raw))
            except ValidationError:
                logger.warning("Question invalide ignorée dans %s : %r", test_id, raw)
        return questions

    def default_title(self, test_id: str) -> str:
        return test_id.replace("_", " ")

    def get_title(self, bank: Optional[QuestionBank], test_id: str) -> str:
        payload = self.get_payload(bank, test_id) or {}
        return payload.get("title") or self.default_title(test_id)
