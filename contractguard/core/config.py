"""Core configuration for ContractGuard."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CONTRACTGUARD_",
        case_sensitive=False,
        extra="ignore",
    )

    # ── App ──────────────────────────────────────────────────────────────
    app_name: str = "ContractGuard"
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # ── LLM ──────────────────────────────────────────────────────────────
    anthropic_api_key: str = ""
    openai_api_key: str = ""
    primary_llm_model: str = "claude-sonnet-4-20250514"
    fallback_llm_model: str = "gpt-4o"
    llm_fast_model: str = "claude-3-5-haiku-20241022"
    llm_max_tokens: int = 8192
    llm_temperature: float = 0.1  # fallback (OpenAI) calls only
    llm_max_retries: int = 3
    llm_retry_base_delay: float = 1.0

    # ── Prompting ────────────────────────────────────────────────────────
    max_source_chars: int = 100_000


@lru_cache
def get_settings() -> Settings:
    """Return cached settings singleton."""
    return Settings()
