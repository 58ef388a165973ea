# tests/engine/progress/test_academic.py
"""
Tests unitaires pour engine.progress.academic

Couverture :
    get_academic_tests_for_student() :
        - School 10 → 1 test de la filière
        - School 11 / 12 → 2 tests de la filière
        - UG avec cursus → Academic_Test_UG_{course}
        - Profil absent / incomplet → []
    resolve_academic_total() :
        - Profil → nombre de clés
        - Aucune clé mais tests passés → compte conservé
        - Sinon None
"""
import pytest

from compass.engine.progress.academic import (
    PSYCHOMETRIC_TOTAL,
    get_academic_tests_for_student,
    resolve_academic_total,
)
from compass.shared.enums import EducationType
from tests.conftest import make_student_profile

pytestmark = pytest.mark.engine


class TestGetAcademicTests:
    def test_classe_10(self):
        profile = make_student_profile(class_level="10", stream="Arts")
        assert get_academic_tests_for_student(profile) == ["Academic_Test_10th_Arts"]

    @pytest.mark.parametrize("class_level", ["11", "12"])
    def test_classe_11_12(self, class_level):
        profile = make_student_profile(class_level=class_level, stream="Commerce")
        assert get_academic_tests_for_student(profile) == [
            "Academic_Test_11th12th_Commerce_BCom",
            "Academic_Test_11th12th_Commerce_BBA",
        ]

    def test_ug_avec_cursus(self):
        profile = make_student_profile(
            education_type=EducationType.UG, class_level=None, stream=None, course="BTech"
        )
        assert get_academic_tests_for_student(profile) == ["Academic_Test_UG_BTech"]

    def test_ug_sans_cursus(self):
        profile = make_student_profile(education_type=EducationType.UG, course=None)
        assert get_academic_tests_for_student(profile) == []

    def test_filiere_inconnue(self):
        assert get_academic_tests_for_student(make_student_profile(stream="Sport")) == []

    def test_profil_absent(self):
        assert get_academic_tests_for_student(None) == []

    def test_alias_class(self):
        from compass.shared.models import StudentProfile
        profile = StudentProfile.model_validate(
            {"education_type": "School", "class": "12", "stream": "Science"}
        )
        assert len(get_academic_tests_for_student(profile)) == 2


class TestResolveAcademicTotal:
    def test_depuis_profil(self):
        assert resolve_academic_total(make_student_profile(class_level="11"), 0) == 2

    def test_repli_sur_tests_passes(self):
        assert resolve_academic_total(None, 3) == 3

    def test_rien_a_calculer(self):
        assert resolve_academic_total(None, 0) is None


def test_cinq_tests_psychometriques():
    assert PSYCHOMETRIC_TOTAL == 5
