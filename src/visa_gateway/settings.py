"""
visa_gateway.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Locate the external eligibility evaluator.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    - Strict env-driven configuration
    - Defaults safe for local dev
    - Single settings object injected across layers
    """

    model_config = SettingsConfigDict(
        env_prefix="VISA_GATEWAY_", case_sensitive=False, populate_by_name=True
    )

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "visa-gateway"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Evaluator base url; requests go to `<backend_url>/evaluate`.
    backend_url: str = Field(
        default="http://localhost:8000",
        validation_alias=AliasChoices("VISA_GATEWAY_BACKEND_URL", "BACKEND_URL", "backend_url"),
    )
    # None disables the client timeout entirely.
    evaluator_timeout_seconds: float | None = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()
