"""
CareBook Backend — Access Log Middleware
==========================================

What:  Writes one "carebook.access" record per HTTP request.
When:  Inside RequestIDMiddleware, so the request ID is already set.

Line format:
    [a1b2c3d4] GET /patients/pat9 → 404 in 0.8ms (127.0.0.1, curl/8.5.0)

The structured fields (request_id, method, path, status, duration_ms,
client, user_agent) ride along in `extra` for JSON log handlers.
Request bodies are never logged: they carry patient details.
"""

import logging
import time
from typing import Any, Dict

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from carebook.middleware.request_id import request_id_var

logger = logging.getLogger("carebook.access")

# Polled every few seconds by orchestrators
QUIET_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


def _describe(request: Request) -> Dict[str, Any]:
    return {
        "request_id": request_id_var.get(""),
        "method": request.method,
        "path": request.url.path,
        "client": request.client.host if request.client else "-",
        "user_agent": request.headers.get("user-agent", "-"),
    }


def _emit(fields: Dict[str, Any], status: int, started: float) -> None:
    fields["status"] = status
    fields["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
    logger.log(
        level_for_status(status),
        "[%(request_id)s] %(method)s %(path)s → %(status)d in %(duration_ms).1fms "
        "(%(client)s, %(user_agent)s)",
        fields,
        extra=fields,
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log per request; an exception escaping the app is logged as a 500."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        fields = _describe(request)
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            _emit(fields, 500, started)
            raise

        _emit(fields, response.status_code, started)
        return response
