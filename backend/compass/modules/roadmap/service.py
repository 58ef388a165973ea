# modules/roadmap/service.py
"""
Roadmap de carrière d'un étudiant.

Charge la progression (ProgressService) puis délègue tout le calcul à
engine/roadmap/analysis.py. Aucun état : la roadmap est recalculée à
chaque appel depuis les tests complétés.
"""
from __future__ import annotations
from typing import Optional

from compass.core.config import settings
from compass.engine.progress.aggregator import ProgressAggregator
from compass.engine.roadmap.analysis import RoadmapAnalysis, analyze_roadmap
from compass.infra.storage import KeyValueStore
from compass.modules.progress.service import ProgressService
from compass.shared.models import StudentProfile

progress_service = ProgressService()


class RoadmapService:

    async def get_roadmap(
        self,
        store: KeyValueStore,
        user_id: str,
        profile: Optional[StudentProfile] = None,
        progress: Optional[ProgressAggregator] = None,
    ) -> RoadmapAnalysis:
        if progress is None:
            progress = await progress_service.load(store, user_id)

        return analyze_roadmap(
            progress.completed_tests,
            student_profile=profile,
            top_n=settings.TOP_RECOMMENDATIONS,
        )
