# modules/progress/repository.py
"""
Accès au stockage clé-valeur pour la progression étudiant.
Toute la (dé)sérialisation est ici, les services ne manipulent jamais de JSON.

Clés :
    completedTests_{user_id}                → liste JSON de CompletedTest (camelCase)
    completedTests_{user_id}_academicTotal  → entier sous forme de chaîne

Politique d'erreur :
    lecture  → erreur loggée, valeur vide retournée (l'app démarre quand même) ;
               un enregistrement invalide est ignoré seul, les autres sont conservés
    écriture → erreur loggée, False retourné (l'état mémoire reste valide)
"""
import json
from typing import List

from pydantic import TypeAdapter, ValidationError

from compass.core.config import settings
from compass.core.logging import get_logger
from compass.infra.storage import KeyValueStore
from compass.shared.models import CompletedTest

logger = get_logger(__name__)

_completed_tests_adapter = TypeAdapter(List[CompletedTest])


class ProgressRepository:

    # ── Clés ──────────────────────────────────────────────────

    def storage_key(self, user_id: str) -> str:
        return f"{settings.STORAGE_KEY_PREFIX}_{user_id}"

    def academic_total_key(self, user_id: str) -> str:
        return f"{self.storage_key(user_id)}_academicTotal"

    # ── Tests complétés ───────────────────────────────────────

    async def get_completed_tests(self, store: KeyValueStore, user_id: str) -> List[CompletedTest]:
        key = self.storage_key(user_id)
        try:
            raw = await store.get_item(key)
            if not raw:
                return []
            records = json.loads(raw)
        except ValueError:
            logger.exception("Progression illisible pour %s, repli sur liste vide", key)
            return []
        except Exception:
            logger.exception("Lecture du stockage impossible pour %s", key)
            return []

        if not isinstance(records, list):
            logger.error("Progression illisible pour %s : liste attendue", key)
            return []

        # Validation enregistrement par enregistrement : un test corrompu est
        # ignoré, les autres restent chargés
        tests: List[CompletedTest] = []
        for record in records:
            try:
                tests.append(CompletedTest.model_validate(record))
            except ValidationError:
                logger.warning("Test complété invalide ignoré dans %s : %r", key, record)
        return tests

    async def save_completed_tests(
        self, store: KeyValueStore, user_id: str, tests: List[CompletedTest]
    ) -> bool:
        key = self.storage_key(user_id)
        payload = _completed_tests_adapter.dump_json(tests, by_alias=True).decode("utf-8")
        try:
            await store.set_item(key, payload)
            return True
        except Exception:
            logger.exception("Écriture du stockage impossible pour %s", key)
            return False

    # ── Total académique ──────────────────────────────────────

    async def get_academic_total(self, store: KeyValueStore, user_id: str) -> int:
        key = self.academic_total_key(user_id)
        try:
            raw = await store.get_item(key)
            return max(int(json.loads(raw)), 0) if raw else 0
        except (TypeError, ValueError):
            logger.exception("Total académique illisible pour %s", key)
            return 0
        except Exception:
            logger.exception("Lecture du stockage impossible pour %s", key)
            return 0

    async def save_academic_total(self, store: KeyValueStore, user_id: str, total: int) -> bool:
        key = self.academic_total_key(user_id)
        try:
            await store.set_item(key, str(int(total)))
            return True
        except Exception:
            logger.exception("Écriture du stockage impossible pour %s", key)
            return False

    # ── Reset ─────────────────────────────────────────────────

    async def clear(self, store: KeyValueStore, user_id: str) -> bool:
        try:
            await store.remove_item(self.storage_key(user_id))
            await store.remove_item(self.academic_total_key(user_id))
            return True
        except Exception:
            logger.exception("Suppression de la progression impossible pour %s", user_id)
            return False
