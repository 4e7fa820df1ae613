"""
Configuration for the fincore API.

Loaded from FINCORE_* environment variables (or a .env file). The engines
never read these directly: the HTTP layer passes the policy values in.
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fincore.core.settlement import SETTLEMENT_TOLERANCE
from fincore.core.vault import VAULT_CAP_AT_TARGET


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="FINCORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="fincore", description="Service name reported by /api/ping")
    environment: str = Field(default="development", description="Deployment environment")
    debug: bool = Field(default=False, description="Enable Flask debug mode")

    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173",
        description="Comma-separated list of origins allowed to call /api/*",
    )

    # Engine policies
    settlement_tolerance: float = Field(
        default=SETTLEMENT_TOLERANCE,
        gt=0,
        description="Balances within this many currency units of zero count as settled",
    )
    skip_non_positive_expenses: bool = Field(
        default=False,
        description="Ignore zero/negative expenses instead of rejecting the settlement",
    )
    vault_cap_at_target: bool = Field(
        default=VAULT_CAP_AT_TARGET,
        description="Stop vault funding at the item's target amount",
    )
    strict_horizon: bool = Field(
        default=False,
        description="Reject investments whose end date is not after the start date",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_json: bool = Field(default=True, description="Render logs as JSON lines")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level {v!r}")
        return level

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload after changing the environment.
    """
    return Settings()
