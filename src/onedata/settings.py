"""
onedata.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (e.g., the generation API key).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration:
    - Defaults are safe for local dev (SQLite file, Gemini flash model)
    - A single settings object is injected across layers
    """

    model_config = SettingsConfigDict(
        env_prefix="ONEDATA_", case_sensitive=False, populate_by_name=True
    )

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "onedata-dashboard"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 3000
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./onedata.db"
    # Load the demonstration fixture when the nodes table is empty.
    seed_on_startup: bool = True

    # Generation collaborator
    generation_provider: Literal["gemini", "openai"] = "gemini"
    generation_model: str = "gemini-2.5-flash"
    generation_base_url: str = "https://generativelanguage.googleapis.com"
    generation_api_key: str = Field(
        default="",
        repr=False,
        validation_alias=AliasChoices("ONEDATA_GENERATION_API_KEY", "GEMINI_API_KEY"),
    )
    generation_timeout_s: float = 60.0

    # Label reported by the deployment status updater.
    deploy_target: str = "Dataform"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Switching to a local OpenAI-compatible server (Ollama, vLLM, LM Studio) only needs
# ONEDATA_GENERATION_PROVIDER=openai plus a matching base url and model name.
