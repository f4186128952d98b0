"""
Logfire configuration and initialization.

Logfire provides structured logging and tracing for the API, the pipeline
and the pydantic-ai generation calls.

Environment Variables:
    LOGFIRE_TOKEN: Logfire project token (optional; without it logs stay local)
    ENVIRONMENT: deployment environment (development, staging, production)
"""
import os
from typing import Optional

import logfire


class LogfireConfig:
    """
    Logfire configuration singleton.

    Ensures Logfire is initialized only once. A missing token is not an
    error: logfire is then configured for local console output only.
    """

    _initialized = False

    @classmethod
    def initialize(cls, token: Optional[str] = None, environment: Optional[str] = None) -> None:
        """
        Initialize Logfire.

        Args:
            token: Logfire project token (or set LOGFIRE_TOKEN env var)
            environment: Deployment environment name (or set ENVIRONMENT env var)
        """
        if cls._initialized:
            return

        token = token or os.getenv("LOGFIRE_TOKEN") or None

        logfire.configure(
            token=token,
            service_name="mailora-api",
            environment=environment or os.getenv("ENVIRONMENT", "development"),
            send_to_logfire=token is not None,
        )

        # Record prompts, responses and token usage of generation calls
        logfire.instrument_pydantic_ai()

        cls._initialized = True

    @classmethod
    def is_initialized(cls) -> bool:
        """
        Check if Logfire has been initialized.

        Returns:
            True if initialized, False otherwise
        """
        return cls._initialized
