from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings

from esg_scoring.methodology import DEFAULT_METHODOLOGY, ScoringMethodology


class Settings(BaseSettings):
    app_name: str = "ESG Composite Scoring API"
    version: str = "1.0.0"
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    # Optional pillar weight overrides; must still sum to 1.0 together.
    environmental_weight: Optional[float] = None
    social_weight: Optional[float] = None
    governance_weight: Optional[float] = None

    class Config:
        env_prefix = "ESG_"
        env_file = ".env"
        env_file_encoding = "utf-8"


def get_settings() -> Settings:
    return Settings()


@lru_cache()
def get_methodology() -> ScoringMethodology:
    """
    Effective methodology for the running service, built once.
    A bad weight override raises MethodologyError at startup.
    """
    settings = get_settings()
    overrides = {
        name: weight
        for name, weight in (
            ("environmental", settings.environmental_weight),
            ("social", settings.social_weight),
            ("governance", settings.governance_weight),
        )
        if weight is not None
    }
    if not overrides:
        return DEFAULT_METHODOLOGY
    return DEFAULT_METHODOLOGY.with_pillar_weights(**overrides)
