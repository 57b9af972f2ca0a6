"""Logging setup and the per-request access log middleware."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from starlette.middleware.base import BaseHTTPMiddleware

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

access_logger = logging.getLogger("clients_api.access")


def setup_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the root logger."""
    root = logging.getLogger()
    if not any(getattr(h, "_clients_api", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._clients_api = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.setLevel(getattr(logging, (level or "INFO").upper(), logging.INFO))


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log timestamp, method and path of every request before it is handled."""

    async def dispatch(self, request, call_next):
        timestamp = datetime.now(timezone.utc).isoformat()
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        access_logger.info("[%s] %s %s", timestamp, request.method, target)
        return await call_next(request)
