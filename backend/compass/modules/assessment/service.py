# modules/assessment/service.py
"""
Orchestration du cycle de vie des examens.

Responsabilités :
1. Lire la banque de questions via repository
2. Déléguer la randomisation à engine/exam/randomizer.py
3. Déléguer la correction à engine/exam/grading.py
4. Enregistrer le résultat dans la progression (upsert via ProgressService)

L'examen n'est jamais persisté : le seed (user_id + test_id) suffit à
reconstruire exactement le même examen, donc la même correction.
"""
from __future__ import annotations
from datetime import datetime
from typing import Dict, Optional

from compass.core.config import settings
from compass.core.logging import get_logger
from compass.engine.exam.grading import build_completed_test
from compass.engine.exam.randomizer import normalize_options, randomize_exam_for_user
from compass.engine.progress.aggregator import ProgressAggregator
from compass.infra.storage import KeyValueStore
from compass.modules.assessment.repository import QuestionBank, QuestionBankRepository
from compass.modules.assessment.schemas import ExamOut, ExamResultOut
from compass.modules.progress.service import ProgressService
from compass.shared.models import CompletedTest, ExamSession

logger = get_logger(__name__)

repo = QuestionBankRepository()
progress_service = ProgressService()


class AssessmentService:

    # ── Démarrage ─────────────────────────────────────────────────────────────

    def start_exam(
        self,
        bank: Optional[QuestionBank],
        test_id: str,
        user_id: Optional[str],
        max_questions: Optional[int] = None,
    ) -> ExamSession:
        """
        Examen randomisé pour l'utilisateur.
        max_questions None → settings.DEFAULT_QUESTION_COUNT.
        """
        questions = repo.get_questions(bank, test_id)
        if questions is None:
            raise ValueError("Test introuvable.")

        if max_questions is None:
            max_questions = settings.DEFAULT_QUESTION_COUNT

        randomized = randomize_exam_for_user(questions, user_id, test_id, max_questions)
        return ExamSession(
            test_id=test_id,
            user_id=user_id or None,
            is_deterministic=bool(user_id),
            questions=randomized,
        )

    def to_exam_out(self, bank: Optional[QuestionBank], session: ExamSession) -> ExamOut:
        return ExamOut(
            test_id=session.test_id,
            title=repo.get_title(bank, session.test_id),
            is_deterministic=session.is_deterministic,
            total_questions=session.total_questions,
            questions=[
                {
                    "id": q.id,
                    "text": q.text,
                    "options": [o.model_dump() for o in normalize_options(q.options)],
                    "subject": q.subject,
                }
                for q in session.questions
            ],
        )

    # ── Soumission ────────────────────────────────────────────────────────────

    async def submit_exam(
        self,
        store: KeyValueStore,
        session: ExamSession,
        answers: Dict[int, str],
        title: Optional[str] = None,
        bank: Optional[QuestionBank] = None,
        completed_at: Optional[datetime] = None,
        progress: Optional[ProgressAggregator] = None,
    ) -> ExamResultOut:
        """
        Pipeline de soumission :
        1. Validation des réponses
        2. Correction pure (engine) sur les questions DE LA SESSION
        3. Upsert dans la progression (une seule entrée par test_id)
        """
        if not answers:
            raise ValueError("Aucune réponse fournie.")
        if not session.questions:
            raise ValueError("Examen vide : rien à corriger.")

        if not title:
            title = (
                repo.get_title(bank, session.test_id)
                if bank is not None
                else repo.default_title(session.test_id)
            )

        completed: CompletedTest = build_completed_test(
            test_id=session.test_id,
            title=title,
            questions=session.questions,
            answers=answers,
            completed_at=completed_at,
        )

        progress = await progress_service.add_completed_test(
            store, session.user_id or "", completed, progress
        )

        logger.info(
            "Examen %s soumis : %d/%d (%d%%)",
            completed.test_id, completed.score, completed.total_questions, completed.percentage,
        )

        return ExamResultOut(
            test_id=completed.test_id,
            title=completed.title,
            score=completed.score,
            total_questions=completed.total_questions,
            percentage=completed.percentage,
            test_type=completed.test_type.value,
            psychometric_progress=progress.psychometric_progress,
            academic_progress=progress.academic_progress,
            all_completed=progress.are_all_exams_completed(),
        )
