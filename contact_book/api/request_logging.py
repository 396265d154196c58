"""Request Logging — HTTP middleware that logs people requests with the person id.

Invariants:
    - Only paths under /api/v1/people are logged; health probes stay quiet
    - person_id is taken from the numeric path segment when present
    - Logging never alters the response
"""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

PEOPLE_PREFIX = "/api/v1/people"


def person_id_from_path(path: str) -> int | None:
    """Extract the id from /api/v1/people/{id}; None for collection routes."""
    if not path.startswith(PEOPLE_PREFIX):
        return None
    tail = path[len(PEOPLE_PREFIX):].strip("/")
    return int(tail) if tail.isdigit() else None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of every people request."""

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if not path.startswith(PEOPLE_PREFIX):
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000

        person_id = person_id_from_path(path)
        logger.info(
            f"{request.method} {path} → {response.status_code} ({duration_ms:.1f}ms)",
            extra={
                "method": request.method,
                "path": path,
                "person_id": person_id,
                "status_code": response.status_code,
            },
        )
        return response
