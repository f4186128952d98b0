"""Health check and service information endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter

from config.settings import settings


router = APIRouter()

SERVICE_NAME = "Mailora API"
SERVICE_VERSION = "1.0.0"


@router.get("/health", tags=["Health"])
async def health_check() -> Dict[str, Any]:
    """
    Health check endpoint for load balancers and monitoring.

    The service is healthy even without a generation key; it then serves
    fallback emails only.
    """
    return {
        "status": "OK",
        "message": f"{SERVICE_NAME} is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "generation_configured": settings.generation_service_config().is_configured,
        "environment": settings.environment,
    }


@router.get("/", tags=["Root"])
async def root() -> Dict[str, str]:
    """
    Root endpoint - API information.

    Returns:
        dict: Basic API information
    """
    return {
        "name": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "description": "Email generation with template fallback",
        "status": "running",
        "docs": "/docs",
        "health": "/health",
    }
