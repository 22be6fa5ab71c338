# File: backend/app/core/config.py
# Version: v0.1.0
"""
Centralized application settings using Pydantic Settings.

Controls:
- App metadata and API prefix
- CORS origins
- Database URL (SQLAlchemy)
- Prediction limits (max lncRNA length, max scan size) and enrichment timeout
- RNAhybrid web API / local binary used by the "rnahybrid" algorithm
- Seeding of the example miRNA/lncRNA/interaction records
"""
from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from backend.app.core.interaction.constants import (
    DEFAULT_ENRICHMENT_TIMEOUT_S,
    DEFAULT_MAX_SCAN_CELLS,
    DEFAULT_MAX_TARGET_LENGTH,
)


class Settings(BaseSettings):
    # --- App ---
    API_PREFIX: str = "/api"
    APP_NAME: str = "LncMir"
    APP_VERSION: str = "0.1.0"

    # --- CORS ---
    CORS_ORIGINS: str = "*"  # comma-separated or '*' for all

    # --- DB ---
    DB_URL: str = "sqlite:///backend/app/data/lncmir.db"
    SEED_EXAMPLE_DATA: bool = True

    # --- Prediction ---
    MAX_TARGET_LENGTH: int = DEFAULT_MAX_TARGET_LENGTH
    MAX_SCAN_CELLS: int = DEFAULT_MAX_SCAN_CELLS  # 0 disables
    ENRICHMENT_TIMEOUT_S: float = DEFAULT_ENRICHMENT_TIMEOUT_S

    # --- External tools ---
    RNAHYBRID_API_URL: str = "https://bibiserv.cebitec.uni-bielefeld.de/api/v1/rnahybrid"
    RNAHYBRID_BINARY: str = "RNAhybrid"
    RNAHYBRID_DATASET: str = "3utr_human"

    # --- Server ---
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "info"

    model_config = SettingsConfigDict(extra="allow", env_file=".env", env_file_encoding="utf-8")

    @property
    def cors_origins_list(self) -> list[str]:
        raw = self.CORS_ORIGINS.strip()
        if raw == "*":
            return ["*"]
        return [o.strip() for o in raw.split(",") if o.strip()]


settings = Settings()
