"""Engine configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    portion_multiplier: float = 1.5
    min_token_length: int = 3
    analysis_window_days: int = 7
    flare_window_entries: int = 7
    good_protein_g: float = 60.0
    good_fiber_g: float = 20.0
    good_calories_kcal: float = 1500.0
    ibd_fiber_target_g: float = 25.0
    hydration_target_ml: float = 2000.0
    catalog_path: str | None = None
    debug: bool = False
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="IBD_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
