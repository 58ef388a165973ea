# engine/roadmap/analysis.py
"""
Analyse de roadmap, pipeline complet, fonction pure.

┌──────────────────────────────────────────────────────────────────────┐
│  completed_tests (CompletedTest[])                                   │
│        │                                                             │
│  1. GATE         < 5 tests psychométriques → résultat incomplet      │
│        │                                                             │
│  2. PROFIL       build_psychometric_summary / build_academic_strengths│
│        │                                                             │
│  3. SCORING      calculate_field_alignments (une entrée / filière)   │
│        │                                                             │
│  4. CLASSEMENT   tri stable décroissant → top 5                      │
│                  ex-aequo : ordre du catalogue                       │
│        │                                                             │
│  5. SYNTHÈSE     recommandation globale + prochaines étapes          │
└──────────────────────────────────────────────────────────────────────┘

Recalculé intégralement à chaque appel (aucun état incrémental) ;
ne lève jamais d'exception sur des données manquantes.

Appelé par : modules/roadmap/service.py
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from compass.content.career_fields import CAREER_FIELDS, CareerFieldDefinition
from compass.core.logging import get_logger
from compass.engine.progress.academic import PSYCHOMETRIC_TOTAL
from compass.engine.roadmap.alignment import FieldAlignment, calculate_field_alignments
from compass.engine.roadmap.summary import (
    AcademicStrengths,
    PsychometricSummary,
    build_academic_strengths,
    build_psychometric_summary,
)
from compass.shared.enums import TestType
from compass.shared.models import CompletedTest, StudentProfile
from compass.shared.numbers import safe_percentage

logger = get_logger(__name__)

TOP_RECOMMENDATIONS = 5

# --- SEUILS DE SYNTHÈSE ---
THRESHOLD_STRONG_APTITUDE = 70
THRESHOLD_STRONG_EI       = 70

# Filières dont la réussite dépend surtout de l'intelligence émotionnelle
EI_DEPENDENT_FIELDS = ("Medicine", "Education", "Psychology")

INCOMPLETE_RECOMMENDATION = (
    "Complete all mandatory psychometric tests to get your personalized roadmap."
)
INCOMPLETE_NEXT_STEPS = (
    "Complete remaining psychometric assessments",
    "Take academic tests",
    "Review results",
)


@dataclass
class RoadmapAnalysis:
    is_complete:            bool
    completion_percentage:  float
    top_recommendations:    List[FieldAlignment] = field(default_factory=list)
    psychometric_summary:   PsychometricSummary = field(default_factory=PsychometricSummary)
    academic_strengths:     AcademicStrengths = field(default_factory=AcademicStrengths)
    overall_recommendation: str = ""
    next_steps:             List[str] = field(default_factory=list)

    @property
    def top_field(self) -> Optional[FieldAlignment]:
        return self.top_recommendations[0] if self.top_recommendations else None

    def to_dict(self) -> Dict:
        return {
            "isComplete": self.is_complete,
            "completionPercentage": self.completion_percentage,
            "topRecommendations": [r.to_dict() for r in self.top_recommendations],
            "psychometricSummary": self.psychometric_summary.to_dict(),
            "academicStrengths": self.academic_strengths.to_dict(),
            "overallRecommendation": self.overall_recommendation,
            "nextSteps": list(self.next_steps),
        }


# ── Pipeline ──────────────────────────────────────────────────────────────────

def analyze_roadmap(
    completed_tests: List[CompletedTest],
    student_profile: Optional[StudentProfile] = None,
    catalog: Tuple[CareerFieldDefinition, ...] = CAREER_FIELDS,
    top_n: int = TOP_RECOMMENDATIONS,
) -> RoadmapAnalysis:
    """
    Analyse complète : gate psychométrique → profil → scoring → top N → synthèse.

    student_profile est accepté pour la signature publique ; le scoring actuel
    ne l'utilise pas (les tests académiques passés portent déjà la filière).
    """
    completed_tests = list(completed_tests or [])
    psychometric_count = sum(
        1 for t in completed_tests if t.test_type == TestType.PSYCHOMETRIC
    )

    # 1. Gate, seul le psychométrique débloque la roadmap
    if psychometric_count < PSYCHOMETRIC_TOTAL:
        return _incomplete_analysis(psychometric_count)

    # 2. Profil
    psychometric = build_psychometric_summary(completed_tests)
    academic = build_academic_strengths(completed_tests)

    # 3. Scoring
    alignments = calculate_field_alignments(psychometric, academic, catalog)

    # 4. Classement, sorted() est stable : ex-aequo dans l'ordre du catalogue
    top = sorted(alignments, key=lambda a: a.alignment_percentage, reverse=True)[:top_n]

    # 5. Synthèse
    top_field = top[0] if top else None
    logger.debug(
        "Roadmap calculée : %d tests, top=%s",
        len(completed_tests), top_field.field if top_field else None,
    )

    return RoadmapAnalysis(
        is_complete=True,
        completion_percentage=100,
        top_recommendations=top,
        psychometric_summary=psychometric,
        academic_strengths=academic,
        overall_recommendation=generate_overall_recommendation(top_field, psychometric),
        next_steps=generate_next_steps(top_field, psychometric),
    )


def _incomplete_analysis(psychometric_count: int) -> RoadmapAnalysis:
    return RoadmapAnalysis(
        is_complete=False,
        completion_percentage=min(safe_percentage(psychometric_count, PSYCHOMETRIC_TOTAL), 100),
        top_recommendations=[],
        psychometric_summary=PsychometricSummary(),
        academic_strengths=AcademicStrengths(),
        overall_recommendation=INCOMPLETE_RECOMMENDATION,
        next_steps=list(INCOMPLETE_NEXT_STEPS),
    )


# ── Textes de synthèse ────────────────────────────────────────────────────────

def generate_overall_recommendation(
    top_field: Optional[FieldAlignment], psychometric: PsychometricSummary
) -> str:
    if top_field is None:
        return INCOMPLETE_RECOMMENDATION

    primary = (
        "analytical abilities"
        if psychometric.aptitude > THRESHOLD_STRONG_APTITUDE
        else "interpersonal skills"
    )
    secondary = (
        "emotional intelligence"
        if psychometric.emotional_intelligence > THRESHOLD_STRONG_EI
        else "problem-solving skills"
    )
    return (
        f"Based on your comprehensive assessment, {top_field.field} shows the highest "
        f"alignment ({top_field.alignment_percentage}%) with your aptitude and interests. "
        f"Your strong {primary} and {secondary} make you well-suited for this field."
    )


def generate_next_steps(
    top_field: Optional[FieldAlignment], psychometric: PsychometricSummary
) -> List[str]:
    if top_field is None:
        return list(INCOMPLETE_NEXT_STEPS)

    steps = [
        f"Research {top_field.field} career opportunities and requirements",
        f"Connect with professionals in {top_field.field} for mentorship",
    ]
    if top_field.education_path:
        steps.append(f"Consider {top_field.education_path[0]} as your next educational step")

    # Remédiation : sous-score contributeur faible pour la filière recommandée
    if psychometric.aptitude < THRESHOLD_STRONG_APTITUDE and "Engineering" in top_field.field:
        steps.append("Strengthen mathematical and analytical skills")

    if (
        psychometric.emotional_intelligence < THRESHOLD_STRONG_EI
        and any(f in top_field.field for f in EI_DEPENDENT_FIELDS)
    ):
        steps.append("Develop emotional intelligence and interpersonal skills")

    steps.append("Take relevant online courses or certifications")
    steps.append("Build a portfolio of projects in your chosen field")
    return steps
