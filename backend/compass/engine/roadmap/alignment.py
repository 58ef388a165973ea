# engine/roadmap/alignment.py
"""
Scoring d'alignement par filière : ZÉRO accès au stockage.

Pour chaque CareerFieldDefinition :

    A_f = clamp₀¹⁰⁰( Σ min(w_k · x_k, cap_k)  +  Σ bonus_t · 𝟙[trigger_t] )

    x_k      ∈ {aptitude, emotional_intelligence, science, commerce, arts}
    trigger  : seuil franchi (x > seuil) ou mot-clé qualitatif
               (intérêt présent dans la liste, sous-chaîne de la
               personnalité ou du style d'apprentissage)

Toutes les contributions sont additives ; le clamp [0, 100] n'intervient
qu'à la fin, jamais en cours de calcul. Le pourcentage est ensuite arrondi
à l'entier (0.5 → supérieur).

Explicabilité : seules les justifications des triggers qui ont
effectivement déclenché sont retournées (un trigger peut valoir 0 point
et n'apporter qu'une justification).

Appelé par : engine/roadmap/analysis.py
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from compass.content.career_fields import CareerFieldDefinition
from compass.engine.roadmap.summary import AcademicStrengths, PsychometricSummary
from compass.shared.numbers import round_half_up

MIN_ALIGNMENT = 0
MAX_ALIGNMENT = 100

# Sources d'un trigger
THRESHOLD      = "threshold"        # métrique numérique > seuil
INTEREST       = "interest"         # libellé présent dans interests
PERSONALITY    = "personality"      # sous-chaîne de personality
LEARNING_STYLE = "learning_style"   # sous-chaîne de learning_style


# ── Définition des règles ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class WeightedTerm:
    metric: str
    weight: float
    cap:    float


@dataclass(frozen=True)
class Trigger:
    source:    str
    target:    str                      # métrique (THRESHOLD) ou mot-clé
    points:    float = 0
    rationale: Optional[str] = None
    threshold: float = 0


@dataclass(frozen=True)
class FieldRule:
    terms:    Tuple[WeightedTerm, ...]
    triggers: Tuple[Trigger, ...]


def _above(metric: str, threshold: float, points: float, rationale: Optional[str] = None) -> Trigger:
    return Trigger(THRESHOLD, metric, points, rationale, threshold)


FIELD_RULES: Dict[str, FieldRule] = {
    "ENGINEERING": FieldRule(
        terms=(
            WeightedTerm("aptitude", 0.4, 40),
            WeightedTerm("science", 0.3, 30),
        ),
        triggers=(
            _above("aptitude", 70, 20, "Strong analytical skills"),
            _above("science", 65, 10, "Good science foundation"),
            Trigger(LEARNING_STYLE, "Systematic", 0, "Systematic learning approach"),
        ),
    ),
    "MEDICINE": FieldRule(
        terms=(
            WeightedTerm("emotional_intelligence", 0.3, 30),
            WeightedTerm("science", 0.3, 30),
            WeightedTerm("aptitude", 0.2, 20),
        ),
        triggers=(
            _above("emotional_intelligence", 75, 15, "High emotional intelligence"),
            _above("science", 70, 5, "Strong science background"),
            Trigger(INTEREST, "Helping others", 0, "Interest in helping others"),
        ),
    ),
    "COMPUTER_SCIENCE": FieldRule(
        terms=(
            WeightedTerm("aptitude", 0.4, 40),
            WeightedTerm("science", 0.2, 20),
        ),
        triggers=(
            _above("aptitude", 75, 25, "Excellent problem-solving skills"),
            Trigger(INTEREST, "Technology", 15, "Strong interest in technology"),
            Trigger(LEARNING_STYLE, "Analytical", 0, "Analytical learning style"),
        ),
    ),
    "BUSINESS_MANAGEMENT": FieldRule(
        terms=(
            WeightedTerm("emotional_intelligence", 0.3, 30),
            WeightedTerm("commerce", 0.25, 25),
            WeightedTerm("aptitude", 0.2, 20),
        ),
        triggers=(
            _above("emotional_intelligence", 65, 5, "Good interpersonal skills"),
            Trigger(PERSONALITY, "Leader", 20, "Natural leadership qualities"),
            _above("commerce", 60, 0, "Business acumen"),
        ),
    ),
    "FINANCE": FieldRule(
        # aptitude compte deux fois (raisonnement + calcul)
        terms=(
            WeightedTerm("aptitude", 0.3, 30),
            WeightedTerm("commerce", 0.3, 30),
            WeightedTerm("aptitude", 0.2, 20),
        ),
        triggers=(
            _above("aptitude", 65, 5, "Strong numerical abilities"),
            _above("commerce", 70, 15, "Excellent commerce foundation"),
            Trigger(INTEREST, "Analytics", 0, "Interest in data analysis"),
        ),
    ),
    "MEDIA_COMMUNICATION": FieldRule(
        terms=(
            WeightedTerm("emotional_intelligence", 0.3, 30),
            WeightedTerm("arts", 0.25, 25),
        ),
        triggers=(
            _above("emotional_intelligence", 70, 15, "Excellent communication skills"),
            Trigger(INTEREST, "Creative", 25, "Creative interests"),
            _above("arts", 65, 5, "Strong arts background"),
        ),
    ),
    "EDUCATION": FieldRule(
        terms=(
            WeightedTerm("emotional_intelligence", 0.4, 40),
            WeightedTerm("arts", 0.2, 20),
        ),
        triggers=(
            _above("emotional_intelligence", 75, 10, "Excellent empathy and patience"),
            Trigger(INTEREST, "Teaching", 25, "Passion for teaching"),
            Trigger(PERSONALITY, "Patient", 5, "Patient personality"),
        ),
    ),
    "PSYCHOLOGY": FieldRule(
        terms=(
            WeightedTerm("emotional_intelligence", 0.5, 50),
            WeightedTerm("arts", 0.15, 15),
        ),
        triggers=(
            _above("emotional_intelligence", 80, 10, "Exceptional emotional intelligence"),
            Trigger(INTEREST, "Human behavior", 20, "Interest in human psychology"),
            Trigger(PERSONALITY, "Empathetic", 5, "Naturally empathetic"),
        ),
    ),
    "DESIGN": FieldRule(
        terms=(
            WeightedTerm("arts", 0.2, 20),
        ),
        triggers=(
            Trigger(INTEREST, "Creative", 40, "Strong creative interests"),
            Trigger(INTEREST, "Visual", 25, "Visual orientation"),
            Trigger(PERSONALITY, "Creative", 10, "Creative personality"),
            _above("arts", 70, 5),
        ),
    ),
}


# ── Résultat ──────────────────────────────────────────────────────────────────

@dataclass
class FieldAlignment:
    field:                str
    category:             str
    alignment_percentage: int
    strengths:            List[str] = field(default_factory=list)
    requirements:         List[str] = field(default_factory=list)
    description:          str = ""
    career_paths:         List[str] = field(default_factory=list)
    education_path:       List[str] = field(default_factory=list)
    skills:               List[str] = field(default_factory=list)
    color:                str = ""

    def to_dict(self) -> Dict:
        return {
            "field": self.field,
            "category": self.category,
            "alignmentPercentage": self.alignment_percentage,
            "strengths": list(self.strengths),
            "requirements": list(self.requirements),
            "description": self.description,
            "careerPaths": list(self.career_paths),
            "educationPath": list(self.education_path),
            "skills": list(self.skills),
            "color": self.color,
        }


# ── Calcul ────────────────────────────────────────────────────────────────────

def _metrics(psychometric: PsychometricSummary, academic: AcademicStrengths) -> Dict[str, float]:
    return {
        "aptitude": psychometric.aptitude or 0,
        "emotional_intelligence": psychometric.emotional_intelligence or 0,
        "science": academic.science or 0,
        "commerce": academic.commerce or 0,
        "arts": academic.arts or 0,
    }


def _fires(trigger: Trigger, metrics: Dict[str, float], psychometric: PsychometricSummary) -> bool:
    if trigger.source == THRESHOLD:
        return metrics.get(trigger.target, 0) > trigger.threshold
    if trigger.source == INTEREST:
        return trigger.target in (psychometric.interests or [])
    if trigger.source == PERSONALITY:
        return trigger.target in (psychometric.personality or "")
    if trigger.source == LEARNING_STYLE:
        return trigger.target in (psychometric.learning_style or "")
    return False


def clamp_alignment(score: float) -> float:
    return max(MIN_ALIGNMENT, min(score, MAX_ALIGNMENT))


def score_field(
    rule: FieldRule,
    psychometric: PsychometricSummary,
    academic: AcademicStrengths,
) -> Tuple[int, List[str]]:
    """
    Score brut d'une filière + justifications déclenchées.

    Returns:
        (pourcentage arrondi ∈ [0, 100], liste ordonnée des justifications)
    """
    metrics = _metrics(psychometric, academic)
    score = 0.0
    strengths: List[str] = []

    for term in rule.terms:
        score += min(metrics.get(term.metric, 0) * term.weight, term.cap)

    for trigger in rule.triggers:
        if not _fires(trigger, metrics, psychometric):
            continue
        score += trigger.points
        if trigger.rationale:
            strengths.append(trigger.rationale)

    return round_half_up(clamp_alignment(score)), strengths


def calculate_field_alignments(
    psychometric: PsychometricSummary,
    academic: AcademicStrengths,
    catalog: Tuple[CareerFieldDefinition, ...],
) -> List[FieldAlignment]:
    """
    Une FieldAlignment par entrée du catalogue, dans l'ordre du catalogue.
    Une filière sans règle connue obtient 0 %.
    """
    alignments: List[FieldAlignment] = []

    for definition in catalog:
        rule = FIELD_RULES.get(definition.key)
        if rule is None:
            percentage, strengths = 0, []
        else:
            percentage, strengths = score_field(rule, psychometric, academic)

        alignments.append(FieldAlignment(
            field=definition.field,
            category=definition.category,
            alignment_percentage=percentage,
            strengths=strengths,
            requirements=list(definition.requirements),
            description=definition.description,
            career_paths=list(definition.career_paths),
            education_path=list(definition.education_path),
            skills=list(definition.skills),
            color=definition.color,
        ))

    return alignments
