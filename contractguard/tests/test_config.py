"""Tests for contractguard.core.config — settings loading and validation."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from contractguard.core.config import Settings, get_settings


class TestSettings:
    """Verify settings defaults and environment overrides."""

    def test_default_app_env(self):
        s = Settings()
        assert s.app_env == "development"
        assert s.debug is False

    def test_default_log_level(self):
        assert Settings().log_level == "INFO"

    def test_llm_defaults(self):
        s = Settings()
        assert "claude" in s.primary_llm_model
        assert s.fallback_llm_model == "gpt-4o"
        assert "haiku" in s.llm_fast_model
        assert s.llm_max_tokens == 8192
        assert s.llm_temperature == 0.1
        assert s.llm_max_retries == 3

    def test_api_keys_default_empty(self):
        s = Settings()
        assert s.anthropic_api_key == ""
        assert s.openai_api_key == ""

    def test_source_limit_default(self):
        assert Settings().max_source_chars == 100_000

    def test_env_override(self):
        with patch.dict(os.environ, {
            "CONTRACTGUARD_APP_ENV": "production",
            "CONTRACTGUARD_LLM_MAX_RETRIES": "5",
            "CONTRACTGUARD_OPENAI_API_KEY": "sk-test",
        }):
            s = Settings()
        assert s.app_env == "production"
        assert s.llm_max_retries == 5
        assert s.openai_api_key == "sk-test"

    def test_unprefixed_env_is_ignored(self):
        with patch.dict(os.environ, {"LLM_MAX_RETRIES": "9"}):
            assert Settings().llm_max_retries == 3

    def test_invalid_app_env(self):
        with pytest.raises(ValidationError):
            Settings(app_env="qa")


class TestGetSettings:

    def test_cached_singleton(self):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self):
        first = get_settings()
        get_settings.cache_clear()
        with patch.dict(os.environ, {"CONTRACTGUARD_LOG_LEVEL": "DEBUG"}):
            second = get_settings()
        assert second is not first
        assert second.log_level == "DEBUG"
