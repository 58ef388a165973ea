# engine/progress/aggregator.py
"""
Agrégation de la progression d'un étudiant : ZÉRO accès au stockage.

État :
    completed_tests : liste ordonnée de CompletedTest, au plus une entrée par test_id
    academic_total  : nombre de tests académiques requis (0 = pas encore calculé)

Toutes les vues dérivées sont recalculées à chaque accès (aucun cache) :
recalculer avec la même collection redonne toujours le même résultat.

Le chargement / la sauvegarde passent par modules/progress/service.py.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional

from compass.engine.progress.academic import PSYCHOMETRIC_TOTAL
from compass.shared.enums import TestType
from compass.shared.models import CompletedTest
from compass.shared.numbers import safe_percentage


@dataclass
class ProgressSummary:
    """Instantané sérialisable des compteurs (dashboard)."""
    psychometric_completed:  int
    psychometric_total:      int
    psychometric_percentage: float
    academic_completed:      int
    academic_total:          int
    academic_percentage:     float
    total_completed:         int
    total_required:          int
    all_completed:           bool


class ProgressAggregator:

    def __init__(
        self,
        completed_tests: Optional[Iterable[CompletedTest]] = None,
        academic_total: int = 0,
    ):
        self._tests: List[CompletedTest] = []
        self.academic_total = max(int(academic_total or 0), 0)
        for test in completed_tests or []:
            self.add_completed_test(test)

    # ── Mutations ──────────────────────────────────────────

    def add_completed_test(self, test: CompletedTest) -> None:
        """Upsert : l'ancienne entrée du même test_id est retirée, la nouvelle ajoutée en fin."""
        self._tests = [t for t in self._tests if t.test_id != test.test_id]
        self._tests.append(test)

    def update_academic_total(self, total: int) -> None:
        self.academic_total = max(int(total), 0)

    def reset(self) -> None:
        self._tests = []
        self.academic_total = 0

    # ── Lecture ────────────────────────────────────────────

    @property
    def completed_tests(self) -> List[CompletedTest]:
        return list(self._tests)

    def is_test_completed(self, test_id: str) -> bool:
        return any(t.test_id == test_id for t in self._tests)

    def get_test_score(self, test_id: str) -> Optional[CompletedTest]:
        return next((t for t in self._tests if t.test_id == test_id), None)

    def _count(self, test_type: TestType) -> int:
        return sum(1 for t in self._tests if t.test_type == test_type)

    # ── Psychométrie (dénominateur fixe) ──

    @property
    def psychometric_completed(self) -> int:
        return self._count(TestType.PSYCHOMETRIC)

    @property
    def psychometric_total(self) -> int:
        return PSYCHOMETRIC_TOTAL

    @property
    def psychometric_percentage(self) -> float:
        return safe_percentage(self.psychometric_completed, PSYCHOMETRIC_TOTAL)

    @property
    def psychometric_progress(self) -> str:
        return f"{self.psychometric_completed}/{PSYCHOMETRIC_TOTAL}"

    # ── Académique (dénominateur calculé depuis le profil) ──

    @property
    def academic_completed(self) -> int:
        return self._count(TestType.ACADEMIC)

    @property
    def academic_percentage(self) -> float:
        return safe_percentage(self.academic_completed, self.academic_total)

    @property
    def academic_progress(self) -> str:
        return f"{self.academic_completed}/{self.academic_total}"

    # ── Global ──

    @property
    def total_tests_completed(self) -> int:
        return self.psychometric_completed + self.academic_completed

    @property
    def total_tests_required(self) -> int:
        return PSYCHOMETRIC_TOTAL + self.academic_total

    def are_all_exams_completed(self) -> bool:
        # academic_total == 0 signifie "exigence non calculée", jamais "terminé"
        return (
            self.psychometric_completed == PSYCHOMETRIC_TOTAL
            and self.academic_completed == self.academic_total
            and self.academic_total > 0
        )

    def summary(self) -> ProgressSummary:
        return ProgressSummary(
            psychometric_completed=self.psychometric_completed,
            psychometric_total=PSYCHOMETRIC_TOTAL,
            psychometric_percentage=self.psychometric_percentage,
            academic_completed=self.academic_completed,
            academic_total=self.academic_total,
            academic_percentage=self.academic_percentage,
            total_completed=self.total_tests_completed,
            total_required=self.total_tests_required,
            all_completed=self.are_all_exams_completed(),
        )

    def __len__(self) -> int:
        return len(self._tests)

    def __repr__(self):
        return (
            f"<ProgressAggregator psycho={self.psychometric_progress} "
            f"academic={self.academic_progress}>"
        )
