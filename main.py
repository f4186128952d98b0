"""
Main FastAPI application entry point.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
import logfire

from config import settings
from observability.logfire_config import LogfireConfig
from api.middleware.rate_limiter import RateLimiter
from api.routes import email_router, health_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    # Initialize Logfire first so we can use structured logging
    LogfireConfig.initialize(token=settings.logfire_token, environment=settings.environment)

    generation_config = settings.generation_service_config()

    # Startup logging
    logfire.info(
        "Starting Mailora API Server",
        environment=settings.environment,
        debug=settings.debug,
        port=settings.port,
        allowed_origins=settings.allowed_origins,
    )

    if generation_config.is_configured:
        logfire.info(
            "Generation service configured",
            model=generation_config.model_name,
            timeout=generation_config.timeout_seconds,
        )
    else:
        logfire.warning(
            "Generation service not configured, serving fallback emails only",
            hint="Set GEMINI_API_KEY in .env file",
        )

    logfire.info("Mailora API Server startup complete")

    yield

    # Shutdown
    logfire.info("Shutting down Mailora API Server")


# Initialize FastAPI app
app = FastAPI(
    title="Mailora API",
    description="Email generation with deterministic template fallback",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
)

logfire.instrument_fastapi(app)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials="*" not in settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=500)

app.add_middleware(
    RateLimiter,
    max_requests=settings.rate_limit_max_requests,
    window_seconds=settings.rate_limit_window_seconds,
    trust_forwarded_for=settings.trust_proxy_headers,
)


# ============================================================================
# API Routers
# ============================================================================

# Health check and service banner
app.include_router(health_router)

# Email generation (falls back to templates when generation is unavailable)
app.include_router(email_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
