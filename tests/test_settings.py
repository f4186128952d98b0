"""Tests for environment-driven configuration."""

import pytest

from config.settings import Settings


@pytest.mark.unit
def test_defaults_run_in_fallback_only_mode(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)

    settings = Settings(_env_file=None)
    config = settings.generation_service_config()

    assert config.is_configured is False
    assert config.timeout_seconds == 30.0
    assert settings.allowed_origins == ["*"]
    assert settings.port == 3000


@pytest.mark.unit
def test_environment_values_are_loaded(mock_env_vars):
    mock_env_vars({
        "GEMINI_API_KEY": "abc123",
        "GENERATION_MODEL": "gemini-2.5-flash",
        "GENERATION_TIMEOUT_SECONDS": "12.5",
        "ALLOWED_ORIGINS": "http://localhost:5173, https://mailora.app",
    })

    settings = Settings(_env_file=None)
    config = settings.generation_service_config()

    assert config.is_configured is True
    assert config.model_name == "gemini-2.5-flash"
    assert config.timeout_seconds == 12.5
    assert settings.allowed_origins == ["http://localhost:5173", "https://mailora.app"]


@pytest.mark.unit
def test_placeholder_key_is_not_configured(mock_env_vars):
    mock_env_vars({"GEMINI_API_KEY": "your_gemini_api_key_here"})

    assert Settings(_env_file=None).generation_service_config().is_configured is False


@pytest.mark.unit
@pytest.mark.parametrize(
    "environment, expose, expected",
    [("development", "true", True), ("production", "true", False), ("development", "false", False)],
)
def test_failure_diagnostics_never_enabled_in_production(mock_env_vars, environment, expose, expected):
    mock_env_vars({"ENVIRONMENT": environment, "EXPOSE_FAILURE_DETAILS": expose})

    assert Settings(_env_file=None).include_failure_diagnostics is expected
