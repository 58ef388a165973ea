# tests/engine/roadmap/test_alignment.py
"""
Tests unitaires pour engine.roadmap.alignment

Couverture :
    - Engineering : Aptitude 80 + Science 70 → 32 + 21 + 20 + 10 = 83
    - Triggers qualitatifs (intérêt, personnalité, style d'apprentissage)
    - Trigger à 0 point : justification seule
    - Seuils stricts (x > seuil)
    - Clamp [0, 100] appliqué à la fin uniquement
    - Une entrée par filière du catalogue, dans l'ordre ; clé inconnue → 0 %
"""
import pytest

from compass.content.career_fields import CAREER_FIELDS, CareerFieldDefinition
from compass.engine.roadmap.alignment import (
    FIELD_RULES,
    FieldRule,
    WeightedTerm,
    calculate_field_alignments,
    clamp_alignment,
    score_field,
)
from compass.engine.roadmap.summary import AcademicStrengths, PsychometricSummary

pytestmark = pytest.mark.engine


# ── Helpers ───────────────────────────────────────────────────────────────────

def _psy(**kwargs) -> PsychometricSummary:
    defaults = {
        "aptitude": 0,
        "emotional_intelligence": 0,
        "interests": ["Practical", "Structured"],
        "personality": "Independent, Focused, Systematic",
        "learning_style": "Practical, Hands-on",
    }
    defaults.update(kwargs)
    return PsychometricSummary(**defaults)


def _by_field(alignments):
    return {a.field: a for a in alignments}


# ── score_field ───────────────────────────────────────────────────────────────

class TestEngineering:
    def test_aptitude_80_science_70(self):
        score, strengths = score_field(
            FIELD_RULES["ENGINEERING"], _psy(aptitude=80), AcademicStrengths(science=70)
        )
        assert score == 83
        assert strengths == ["Strong analytical skills", "Good science foundation"]

    def test_seuil_strict(self):
        score, strengths = score_field(
            FIELD_RULES["ENGINEERING"], _psy(aptitude=70), AcademicStrengths(science=60)
        )
        # 28 + 18, aucun bonus
        assert score == 46
        assert strengths == []

    def test_style_systematique_justification_sans_points(self):
        base, _ = score_field(FIELD_RULES["ENGINEERING"], _psy(aptitude=50), AcademicStrengths())
        score, strengths = score_field(
            FIELD_RULES["ENGINEERING"],
            _psy(aptitude=50, learning_style="Systematic, Analytical"),
            AcademicStrengths(),
        )
        assert score == base
        assert strengths == ["Systematic learning approach"]


class TestQualitativeTriggers:
    def test_interet_technologie(self):
        score, strengths = score_field(
            FIELD_RULES["COMPUTER_SCIENCE"],
            _psy(interests=["Creative", "Analytical", "Technology"]),
            AcademicStrengths(),
        )
        assert score == 15
        assert strengths == ["Strong interest in technology"]

    def test_personnalite_leader(self):
        score, strengths = score_field(
            FIELD_RULES["BUSINESS_MANAGEMENT"],
            _psy(personality="Leader, Empathetic, Creative"),
            AcademicStrengths(),
        )
        assert score == 20
        assert strengths == ["Natural leadership qualities"]

    def test_design_bonus_arts_sans_justification(self):
        score, strengths = score_field(FIELD_RULES["DESIGN"], _psy(), AcademicStrengths(arts=80))
        assert score == 21   # 16 + 5
        assert strengths == []

    def test_ordre_des_justifications(self):
        _, strengths = score_field(
            FIELD_RULES["MEDICINE"],
            _psy(emotional_intelligence=80, interests=["Helping others", "Teaching"]),
            AcademicStrengths(science=75),
        )
        assert strengths == [
            "High emotional intelligence",
            "Strong science background",
            "Interest in helping others",
        ]


class TestClamp:
    def test_clamp(self):
        assert clamp_alignment(130) == 100
        assert clamp_alignment(-5) == 0
        assert clamp_alignment(42.5) == 42.5

    def test_score_plafonne_a_100(self):
        rule = FieldRule(terms=(WeightedTerm("aptitude", 2, 500),), triggers=())
        score, _ = score_field(rule, _psy(aptitude=90), AcademicStrengths())
        assert score == 100

    def test_profil_maximal_dans_les_bornes(self):
        psychometric = _psy(
            aptitude=100,
            emotional_intelligence=100,
            interests=["Creative", "Analytical", "Technology"],
            personality="Leader, Empathetic, Creative",
            learning_style="Systematic, Analytical",
        )
        academic = AcademicStrengths(science=100, commerce=100, arts=100)
        for alignment in calculate_field_alignments(psychometric, academic, CAREER_FIELDS):
            assert 0 <= alignment.alignment_percentage <= 100


# ── calculate_field_alignments ────────────────────────────────────────────────

class TestCalculateFieldAlignments:
    def test_une_entree_par_filiere_dans_l_ordre(self):
        alignments = calculate_field_alignments(_psy(), AcademicStrengths(), CAREER_FIELDS)
        assert [a.field for a in alignments] == [f.field for f in CAREER_FIELDS]

    def test_metadonnees_recopiees(self):
        alignments = _by_field(calculate_field_alignments(_psy(), AcademicStrengths(), CAREER_FIELDS))
        medicine = alignments["Medicine"]
        assert medicine.category == "Healthcare"
        assert medicine.education_path[0] == "MBBS"
        assert medicine.color == "#4CAF50"

    def test_cle_inconnue_vaut_zero(self):
        custom = CareerFieldDefinition(
            key="ASTRONAUT", field="Astronaut", category="Space", description="",
            career_paths=(), education_path=(), skills=(), requirements=(), color="#000000",
        )
        [alignment] = calculate_field_alignments(_psy(aptitude=100), AcademicStrengths(), (custom,))
        assert alignment.alignment_percentage == 0
        assert alignment.strengths == []

    def test_to_dict_camel_case(self):
        [first, *_] = calculate_field_alignments(_psy(), AcademicStrengths(), CAREER_FIELDS)
        payload = first.to_dict()
        assert {"alignmentPercentage", "careerPaths", "educationPath"} <= payload.keys()
