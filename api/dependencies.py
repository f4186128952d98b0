"""Shared FastAPI dependencies."""

from functools import lru_cache

from config.settings import settings
from pipeline import create_email_pipeline
from pipeline.core.runner import EmailPipelineRunner


@lru_cache(maxsize=1)
def get_email_pipeline() -> EmailPipelineRunner:
    """
    Build the email pipeline once from settings.

    The runner is read-only after construction, so every request shares it.
    Tests replace it with `app.dependency_overrides[get_email_pipeline]`.
    """
    return create_email_pipeline(
        settings.generation_service_config(),
        include_diagnostics=settings.include_failure_diagnostics,
        humanize_seed=settings.fallback_humanize_seed if settings.fallback_humanize else None,
    )
