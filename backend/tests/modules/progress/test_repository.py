# tests/modules/progress/test_repository.py
"""
Tests unitaires pour modules.progress.repository.ProgressRepository

Couverture :
    - Clés de stockage (completedTests_{user_id}, suffixe _academicTotal)
    - Aller-retour JSON camelCase
    - Lecture : JSON invalide / enregistrement invalide / erreur backend → []
    - Écriture : erreur backend → False, jamais d'exception
"""
import json
import pytest

from compass.modules.progress.repository import ProgressRepository
from tests.conftest import make_completed_test, make_psychometric_set

pytestmark = pytest.mark.service

repo = ProgressRepository()


class TestKeys:
    def test_cle_tests(self):
        assert repo.storage_key("a@x.com") == "completedTests_a@x.com"

    def test_cle_total_academique(self):
        assert repo.academic_total_key("a@x.com") == "completedTests_a@x.com_academicTotal"


class TestCompletedTests:
    @pytest.mark.asyncio
    async def test_aller_retour(self, store):
        tests = make_psychometric_set()
        assert await repo.save_completed_tests(store, "a@x.com", tests) is True
        assert await repo.get_completed_tests(store, "a@x.com") == tests

    @pytest.mark.asyncio
    async def test_format_stocke_camel_case(self, store):
        await repo.save_completed_tests(store, "a@x.com", [make_completed_test()])
        [record] = json.loads(await store.get_item("completedTests_a@x.com"))
        assert record["testId"] == "Psychometric_Aptitude_Test"
        assert record["totalQuestions"] == 20
        assert record["testType"] == "psychometric"

    @pytest.mark.asyncio
    async def test_cle_absente(self, store):
        assert await repo.get_completed_tests(store, "inconnu") == []

    @pytest.mark.asyncio
    async def test_json_invalide(self, store):
        await store.set_item("completedTests_a@x.com", "{pas du json")
        assert await repo.get_completed_tests(store, "a@x.com") == []

    @pytest.mark.asyncio
    async def test_enregistrement_invalide(self, store):
        await store.set_item("completedTests_a@x.com", json.dumps([{"testId": "x"}]))
        assert await repo.get_completed_tests(store, "a@x.com") == []

    @pytest.mark.asyncio
    async def test_enregistrement_invalide_ignore_les_autres_conserves(self, store):
        valid = make_completed_test("Psychometric_Aptitude_Test", 80)
        broken = json.loads(make_completed_test("Academic_Test_10th_Science").model_dump_json(by_alias=True))
        broken["percentage"] = None
        payload = [json.loads(valid.model_dump_json(by_alias=True)), broken]
        await store.set_item("completedTests_a@x.com", json.dumps(payload))

        assert await repo.get_completed_tests(store, "a@x.com") == [valid]

    @pytest.mark.asyncio
    async def test_json_qui_n_est_pas_une_liste(self, store):
        await store.set_item("completedTests_a@x.com", json.dumps({"testId": "x"}))
        assert await repo.get_completed_tests(store, "a@x.com") == []

    @pytest.mark.asyncio
    async def test_erreur_backend_lecture(self, failing_store):
        assert await repo.get_completed_tests(failing_store, "a@x.com") == []

    @pytest.mark.asyncio
    async def test_erreur_backend_ecriture(self, failing_store):
        assert await repo.save_completed_tests(failing_store, "a@x.com", []) is False


class TestAcademicTotal:
    @pytest.mark.asyncio
    async def test_aller_retour(self, store):
        assert await repo.save_academic_total(store, "a@x.com", 2) is True
        assert await store.get_item("completedTests_a@x.com_academicTotal") == "2"
        assert await repo.get_academic_total(store, "a@x.com") == 2

    @pytest.mark.asyncio
    async def test_absent_vaut_zero(self, store):
        assert await repo.get_academic_total(store, "a@x.com") == 0

    @pytest.mark.asyncio
    async def test_valeur_illisible(self, store):
        await store.set_item("completedTests_a@x.com_academicTotal", "beaucoup")
        assert await repo.get_academic_total(store, "a@x.com") == 0

    @pytest.mark.asyncio
    async def test_erreur_backend(self, failing_store):
        assert await repo.get_academic_total(failing_store, "a@x.com") == 0
        assert await repo.save_academic_total(failing_store, "a@x.com", 3) is False


class TestClear:
    @pytest.mark.asyncio
    async def test_supprime_les_deux_cles(self, store):
        await repo.save_completed_tests(store, "a@x.com", [make_completed_test()])
        await repo.save_academic_total(store, "a@x.com", 1)
        assert await repo.clear(store, "a@x.com") is True
        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_erreur_backend(self, failing_store):
        assert await repo.clear(failing_store, "a@x.com") is False
