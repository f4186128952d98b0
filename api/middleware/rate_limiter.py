"""
Admission control middleware.

Sliding-window request limit per client IP. Each generation request may
trigger a billable call to the generation service, so limiting happens
here, before the pipeline runs.
"""

import time
from collections import deque
from typing import Callable, Deque, Dict, Optional

import logfire
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.status import HTTP_429_TOO_MANY_REQUESTS
from starlette.types import ASGIApp

SKIPPED_PATHS = frozenset({"/", "/health", "/docs", "/redoc", "/openapi.json"})


class RateLimiter(BaseHTTPMiddleware):
    """
    Rate limiting middleware.

    Args:
        app: ASGI application
        max_requests: Requests allowed per client within the window
        window_seconds: Window length in seconds
        trust_forwarded_for: Key clients by the first X-Forwarded-For hop.
            Only enable behind a proxy that sets this header itself.
        clock: Monotonic time source (injectable for tests)
    """

    def __init__(
        self,
        app: ASGIApp,
        max_requests: int = 30,
        window_seconds: int = 60,
        trust_forwarded_for: bool = False,
        clock: Optional[Callable[[], float]] = None,
    ):
        super().__init__(app)
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.trust_forwarded_for = trust_forwarded_for
        self.clock = clock or time.monotonic
        self.client_requests: Dict[str, Deque[float]] = {}
        self._last_sweep = self.clock()

        logfire.info(
            "Rate limiter initialized",
            max_requests=max_requests,
            window_seconds=window_seconds,
            trust_forwarded_for=trust_forwarded_for,
        )

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in SKIPPED_PATHS:
            return await call_next(request)

        client_id = self._get_client_identifier(request)
        now = self.clock()
        window_start = now - self.window_seconds

        if now - self._last_sweep >= self.window_seconds:
            self._sweep(window_start)
            self._last_sweep = now

        timestamps = self.client_requests.setdefault(client_id, deque())
        while timestamps and timestamps[0] <= window_start:
            timestamps.popleft()

        if len(timestamps) >= self.max_requests:
            retry_after = max(1, int(timestamps[0] + self.window_seconds - now) + 1)
            logfire.warning(
                "Rate limit exceeded",
                client_id=client_id,
                path=request.url.path,
                retry_after=retry_after,
            )
            return JSONResponse(
                status_code=HTTP_429_TOO_MANY_REQUESTS,
                content={
                    "success": False,
                    "error": "Too many requests. Please try again later.",
                },
                headers={
                    "Retry-After": str(retry_after),
                    "X-RateLimit-Limit": str(self.max_requests),
                    "X-RateLimit-Remaining": "0",
                },
            )

        timestamps.append(now)
        response = await call_next(request)

        response.headers["X-RateLimit-Limit"] = str(self.max_requests)
        response.headers["X-RateLimit-Remaining"] = str(self.max_requests - len(timestamps))
        return response

    def _sweep(self, window_start: float) -> None:
        """Forget clients with no requests inside the current window."""
        stale = [
            client_id
            for client_id, timestamps in self.client_requests.items()
            if not timestamps or timestamps[-1] <= window_start
        ]
        for client_id in stale:
            del self.client_requests[client_id]

    def _get_client_identifier(self, request: Request) -> str:
        """Client IP; the first X-Forwarded-For hop when proxy headers are trusted."""
        if self.trust_forwarded_for:
            forwarded = request.headers.get("X-Forwarded-For")
            if forwarded:
                return forwarded.split(",")[0].strip()
        if request.client:
            return request.client.host
        return "unknown"
