# modules/progress/service.py
"""
Orchestration de la progression d'un étudiant.

Responsabilités :
1. Charger l'état persistant (tests complétés + total académique) via repository
2. Déléguer les calculs à engine/progress/aggregator.py
3. Persister après chaque mutation (upsert, total, reset)
4. Recalculer le total académique depuis le profil (engine/progress/academic.py)

Règle de séparation :
    - Le service ne touche jamais le stockage directement.
    - Toute la (dé)sérialisation est dans ProgressRepository.

Sans identité utilisateur (user_id vide), aucune lecture ni écriture :
le service retourne un agrégat vide et les mutations restent locales.
"""
from __future__ import annotations
from typing import Optional

from compass.core.logging import get_logger
from compass.engine.progress.academic import resolve_academic_total
from compass.engine.progress.aggregator import ProgressAggregator
from compass.infra.storage import KeyValueStore
from compass.modules.progress.repository import ProgressRepository
from compass.shared.models import CompletedTest, StudentProfile

logger = get_logger(__name__)

repo = ProgressRepository()


class ProgressService:

    # ── Lecture ───────────────────────────────────────────────────────────────

    async def load(self, store: KeyValueStore, user_id: str) -> ProgressAggregator:
        """Agrégat reconstruit depuis le stockage (vide si aucune donnée ou utilisateur inconnu)."""
        if not user_id:
            logger.debug("Aucun utilisateur : progression vide")
            return ProgressAggregator()

        tests = await repo.get_completed_tests(store, user_id)
        academic_total = await repo.get_academic_total(store, user_id)
        return ProgressAggregator(tests, academic_total=academic_total)

    # ── Mutations ─────────────────────────────────────────────────────────────

    async def add_completed_test(
        self,
        store: KeyValueStore,
        user_id: str,
        test: CompletedTest,
        progress: Optional[ProgressAggregator] = None,
    ) -> ProgressAggregator:
        """
        Upsert du résultat puis sauvegarde de la liste complète.
        Un échec d'écriture est loggé par le repository ; l'agrégat retourné
        reflète quand même le nouvel état.
        """
        if progress is None:
            progress = await self.load(store, user_id)

        progress.add_completed_test(test)

        if user_id:
            await repo.save_completed_tests(store, user_id, progress.completed_tests)
        return progress

    async def update_academic_total(
        self,
        store: KeyValueStore,
        user_id: str,
        total: int,
        progress: Optional[ProgressAggregator] = None,
    ) -> ProgressAggregator:
        if progress is None:
            progress = await self.load(store, user_id)

        progress.update_academic_total(total)

        if user_id:
            await repo.save_academic_total(store, user_id, progress.academic_total)
        return progress

    async def sync_academic_total(
        self,
        store: KeyValueStore,
        user_id: str,
        profile: Optional[StudentProfile],
        progress: Optional[ProgressAggregator] = None,
    ) -> ProgressAggregator:
        """
        Recalcule le total académique depuis le profil.
        Profil sans test applicable : on garde le nombre de tests académiques
        déjà passés ; sinon le total stocké n'est pas modifié.
        """
        if progress is None:
            progress = await self.load(store, user_id)

        total = resolve_academic_total(profile, progress.academic_completed)
        if total is None:
            logger.debug("Aucun test académique applicable pour %s", user_id)
            return progress

        return await self.update_academic_total(store, user_id, total, progress)

    async def reset_progress(
        self,
        store: KeyValueStore,
        user_id: str,
        progress: Optional[ProgressAggregator] = None,
    ) -> ProgressAggregator:
        if progress is None:
            progress = ProgressAggregator()
        progress.reset()

        if user_id:
            await repo.clear(store, user_id)
        return progress
