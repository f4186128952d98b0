"""
HTTP middleware.
"""

from api.middleware.rate_limiter import RateLimiter

__all__ = ["RateLimiter"]
