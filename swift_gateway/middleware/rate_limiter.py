"""
Rate Limiting Middleware for the MT799 Gateway

Per-client, per-endpoint request limits using in-memory fixed windows
(single instance only; counters are not shared between workers).

Configuration via settings / environment variables:
    MT799_RATE_LIMIT_ENABLED: Enable/disable rate limiting (default: true)
    MT799_RATE_LIMIT_REQUESTS_PER_MINUTE: Default max requests/minute (default: 120)
    MT799_RATE_LIMIT_BURST: Burst allowance above the per-minute rate (default: 20)
"""

import time
from collections import defaultdict
from typing import Dict, Optional, Tuple

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from ..config import settings

WINDOW_SECONDS = 60
CLEANUP_INTERVAL_SECONDS = 300

# Endpoint-specific overrides (path prefix -> requests per minute)
ENDPOINT_LIMITS: Dict[str, int] = {
    "/api/message/upload": 60,     # Parses and writes to the store
    "/api/message/parse": 120,     # Parse only
    "/api/message/messages": 120,
    "/health": 300,
}

# Exempt paths (never rate limited)
EXEMPT_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}


class WindowCounter:
    """Fixed window request counter keyed by client and endpoint."""

    def __init__(self, window: int = WINDOW_SECONDS):
        self.window = window
        # key -> (window_start, request_count)
        self._windows: Dict[str, Tuple[float, int]] = defaultdict(lambda: (0.0, 0))

    def is_allowed(self, key: str, limit: int, now: Optional[float] = None) -> Tuple[bool, int, int]:
        """
        Count one request against `key`.

        Returns: (allowed, remaining, reset_seconds)
        """
        now = time.time() if now is None else now
        window_start, count = self._windows[key]

        if now - window_start >= self.window:
            self._windows[key] = (now, 1)
            return True, limit - 1, self.window

        reset_at = max(1, int(self.window - (now - window_start)))
        if count >= limit:
            return False, 0, reset_at

        self._windows[key] = (window_start, count + 1)
        return True, max(0, limit - count - 1), reset_at

    def cleanup(self, max_age: float = CLEANUP_INTERVAL_SECONDS, now: Optional[float] = None):
        """Remove entries whose window started more than max_age seconds ago."""
        now = time.time() if now is None else now
        stale = [k for k, (ws, _) in self._windows.items() if now - ws > max_age]
        for k in stale:
            del self._windows[k]

    def __len__(self) -> int:
        return len(self._windows)


def get_client_ip(request: Request) -> str:
    """Client IP, respecting X-Forwarded-For for proxied requests."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client:
        return request.client.host
    return "unknown"


def limit_for_path(path: str, default: int) -> Tuple[str, int]:
    """Return (matched prefix, requests per minute) for a request path."""
    for prefix, limit in ENDPOINT_LIMITS.items():
        if path.startswith(prefix):
            return prefix, limit
    return "default", default


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Adds standard rate limit headers to every limited response:
    - X-RateLimit-Limit: Maximum requests allowed
    - X-RateLimit-Remaining: Requests remaining in window
    - X-RateLimit-Reset: Seconds until window reset
    - Retry-After: Seconds to wait (only on 429)
    """

    def __init__(
        self,
        app,
        enabled: Optional[bool] = None,
        requests_per_minute: Optional[int] = None,
        burst: Optional[int] = None,
    ):
        super().__init__(app)
        self.enabled = settings.rate_limit_enabled if enabled is None else enabled
        self.requests_per_minute = (
            settings.rate_limit_requests_per_minute if requests_per_minute is None else requests_per_minute
        )
        self.burst = settings.rate_limit_burst if burst is None else burst
        self.counter = WindowCounter()
        self._last_cleanup = time.time()

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        if not self.enabled or path in EXEMPT_PATHS:
            return await call_next(request)

        now = time.time()
        if now - self._last_cleanup > CLEANUP_INTERVAL_SECONDS:
            self.counter.cleanup(now=now)
            self._last_cleanup = now

        prefix, path_limit = limit_for_path(path, self.requests_per_minute)
        effective_limit = path_limit + self.burst
        rate_key = f"{get_client_ip(request)}:{prefix}"

        allowed, remaining, reset = self.counter.is_allowed(rate_key, effective_limit, now=now)

        if not allowed:
            return JSONResponse(
                status_code=429,
                content={
                    "error": "RATE_LIMIT_EXCEEDED",
                    "message": f"Too many requests. Maximum {effective_limit} requests per {WINDOW_SECONDS} seconds.",
                    "retryAfter": reset,
                    "limit": effective_limit,
                },
                headers={
                    "X-RateLimit-Limit": str(effective_limit),
                    "X-RateLimit-Remaining": "0",
                    "X-RateLimit-Reset": str(reset),
                    "Retry-After": str(reset),
                },
            )

        response = await call_next(request)

        response.headers["X-RateLimit-Limit"] = str(effective_limit)
        response.headers["X-RateLimit-Remaining"] = str(remaining)
        response.headers["X-RateLimit-Reset"] = str(reset)

        return response
