# engine/roadmap/summary.py
"""
Construction du profil agrégé, pont entre les CompletedTest bruts
et le scoring des filières (qui ne lit jamais le stockage).

PsychometricSummary :
{
    "aptitude": 80,                   # % du test Aptitude, 0 si absent
    "emotionalIntelligence": 72,      # % du test Emotional Quotient, 0 si absent
    "interests": ["Creative", "Analytical", "Technology"],   # ← test Interest
    "personality": "Collaborative, Patient, Analytical",     # ← test Personality
    "learningStyle": "Systematic, Analytical"                # ← test Orientation
}

AcademicStrengths : moyenne des % des tests académiques par filière
(match par sous-chaîne sur test_id), 0 si aucun test de la filière.

Les seuils de bucketing sont repris tels quels pour la compatibilité
des résultats ; ils ne constituent pas un modèle psychométrique validé.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from compass.shared.enums import Stream, TestType
from compass.shared.models import CompletedTest

# --- MARQUEURS DE SOUS-TESTS (sous-chaîne de test_id) ---
APTITUDE_MARKER    = "Aptitude"
EMOTIONAL_MARKER   = "Emotional"
INTEREST_MARKER    = "Interest"
PERSONALITY_MARKER = "Personality"
ORIENTATION_MARKER = "Orientation"

# --- SEUILS ---
THRESHOLD_INTERESTS_HIGH      = 70
THRESHOLD_INTERESTS_MEDIUM    = 50
THRESHOLD_PERSONALITY_HIGH    = 80
THRESHOLD_PERSONALITY_MEDIUM  = 60
THRESHOLD_LEARNING_HIGH       = 70
THRESHOLD_LEARNING_MEDIUM     = 50

UNKNOWN_LABEL = "Unknown"


@dataclass
class PsychometricSummary:
    aptitude:               float = 0
    emotional_intelligence: float = 0
    interests:              List[str] = field(default_factory=list)
    personality:            str = UNKNOWN_LABEL
    learning_style:         str = UNKNOWN_LABEL

    def to_dict(self) -> Dict:
        return {
            "aptitude": self.aptitude,
            "emotionalIntelligence": self.emotional_intelligence,
            "interests": list(self.interests),
            "personality": self.personality,
            "learningStyle": self.learning_style,
        }


@dataclass
class AcademicStrengths:
    science:  float = 0
    commerce: float = 0
    arts:     float = 0

    def to_dict(self) -> Dict:
        return {"science": self.science, "commerce": self.commerce, "arts": self.arts}


# ── Bucketing qualitatif ──────────────────────────────────────────────────────

def derive_interests(score: float) -> List[str]:
    if score > THRESHOLD_INTERESTS_HIGH:
        return ["Creative", "Analytical", "Technology"]
    if score > THRESHOLD_INTERESTS_MEDIUM:
        return ["Helping others", "Teaching"]
    return ["Practical", "Structured"]


def derive_personality(score: float) -> str:
    if score > THRESHOLD_PERSONALITY_HIGH:
        return "Leader, Empathetic, Creative"
    if score > THRESHOLD_PERSONALITY_MEDIUM:
        return "Collaborative, Patient, Analytical"
    return "Independent, Focused, Systematic"


def derive_learning_style(score: float) -> str:
    if score > THRESHOLD_LEARNING_HIGH:
        return "Systematic, Analytical"
    if score > THRESHOLD_LEARNING_MEDIUM:
        return "Visual, Interactive"
    return "Practical, Hands-on"


# ── Agrégation ────────────────────────────────────────────────────────────────

def _find_percentage(tests: List[CompletedTest], marker: str) -> float:
    """% du PREMIER test dont test_id contient `marker`, 0 si aucun."""
    match: Optional[CompletedTest] = next((t for t in tests if marker in t.test_id), None)
    return match.percentage if match else 0


def build_psychometric_summary(completed_tests: List[CompletedTest]) -> PsychometricSummary:
    tests = [t for t in completed_tests if t.test_type == TestType.PSYCHOMETRIC]

    return PsychometricSummary(
        aptitude=_find_percentage(tests, APTITUDE_MARKER),
        emotional_intelligence=_find_percentage(tests, EMOTIONAL_MARKER),
        interests=derive_interests(_find_percentage(tests, INTEREST_MARKER)),
        personality=derive_personality(_find_percentage(tests, PERSONALITY_MARKER)),
        learning_style=derive_learning_style(_find_percentage(tests, ORIENTATION_MARKER)),
    )


def _stream_average(tests: List[CompletedTest], stream: Stream) -> float:
    matching = [t.percentage for t in tests if stream.value in t.test_id]
    return sum(matching) / len(matching) if matching else 0


def build_academic_strengths(completed_tests: List[CompletedTest]) -> AcademicStrengths:
    tests = [t for t in completed_tests if t.test_type == TestType.ACADEMIC]

    return AcademicStrengths(
        science=_stream_average(tests, Stream.SCIENCE),
        commerce=_stream_average(tests, Stream.COMMERCE),
        arts=_stream_average(tests, Stream.ARTS),
    )
