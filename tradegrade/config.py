"""Application configuration with validation."""
from typing import Literal
from functools import lru_cache
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Ambient settings (logging, environment).

    Scoring weights, thresholds and curves are fixed versioned constants in
    tradegrade.scoring.constants and are not configurable here.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TRADEGRADE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "TradeGrade Scoring Engine"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Parameter Version
    SCORING_PARAM_VERSION: Literal["v1.0"] = "v1.0"

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Production must not run in debug mode."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
