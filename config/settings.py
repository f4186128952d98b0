"""Application configuration using Pydantic Settings."""

from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pipeline.models.core import GenerationServiceConfig

# NOTE: logfire.configure() is not called here. Logfire is configured once at
# application startup (main.py via observability/logfire_config.py) or in the
# pytest hooks (conftest.py).


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field has a default so the service can start without any
    configuration; in that case emails are produced by the fallback templates.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    environment: str = Field(default="development", description="Environment: development, staging, production")
    debug: bool = Field(default=False, description="Debug mode")

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, description="Server port")

    # CORS Settings
    allowed_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins"
    )

    # Generation service (Google Gemini through pydantic-ai)
    gemini_api_key: str = Field(default="", description="Gemini API key; empty means fallback-only mode")
    generation_model: str = Field(default="gemini-2.0-flash", description="Gemini model name")
    generation_timeout_seconds: float = Field(default=30.0, gt=0, description="Timeout for a single generation call")

    # Fallback templates
    fallback_humanize: bool = Field(default=False, description="Apply the seeded humanizer to fallback emails")
    fallback_humanize_seed: int = Field(default=0, description="Seed for the fallback humanizer")

    # Diagnostics
    expose_failure_details: bool = Field(
        default=False,
        description="Include generation failure details in response metadata (ignored in production)"
    )

    # Admission control
    rate_limit_max_requests: int = Field(default=30, ge=1, description="Requests allowed per client per window")
    rate_limit_window_seconds: int = Field(default=60, ge=1, description="Rate limit window in seconds")
    trust_proxy_headers: bool = Field(
        default=False,
        description="Key rate limits by X-Forwarded-For (enable only behind a trusted proxy)"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Observability
    logfire_token: str = Field(default="", description="Logfire observability token")

    @field_validator("allowed_origins")
    @classmethod
    def parse_origins(cls, v: str) -> List[str]:
        """Parse comma-separated origins into a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment.lower() == "production"

    @property
    def include_failure_diagnostics(self) -> bool:
        """Failure details are only ever returned outside production."""
        return self.expose_failure_details and not self.is_production

    def generation_service_config(self) -> GenerationServiceConfig:
        """Build the immutable generation service configuration."""
        return GenerationServiceConfig(
            api_key=self.gemini_api_key,
            model_name=self.generation_model,
            timeout_seconds=self.generation_timeout_seconds,
        )


# Create a singleton instance
settings = Settings()


def get_settings() -> "Settings":
    """Return the singleton settings instance."""
    return settings
