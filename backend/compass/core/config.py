# backend/compass/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

class Settings(BaseSettings):

    PROJECT_NAME: str = "Compass"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ── Examens ──────────────────────────────────────────────
    DEFAULT_QUESTION_COUNT: int = 20
    QUESTION_BANK_DIR: Optional[str] = None   # dossier des {test_id}.json

    # ── Stockage clé-valeur ──────────────────────────────────
    STORAGE_KEY_PREFIX: str = "completedTests"

    # ── Roadmap ──────────────────────────────────────────────
    TOP_RECOMMENDATIONS: int = 5


    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding='utf-8',
        extra='ignore'
        )

settings = Settings()
