"""
API route handlers.
"""

from api.routes.email import router as email_router
from api.routes.health import router as health_router

__all__ = ["email_router", "health_router"]
