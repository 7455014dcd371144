"""
HTTP middleware for local frontend development:
CORS allow-all headers and per-request logging.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)

ALLOWED_METHODS = "GET, POST, PUT, PATCH, DELETE, OPTIONS"


class CORSAllowAllMiddleware(BaseHTTPMiddleware):
    """
    Allows every origin to call the API.

    Pre-flight ``OPTIONS`` requests are answered directly with 200 and an
    empty body; every other response gets the ``Access-Control-Allow-*``
    headers added.
    """

    def _cors_headers(self, request: Request) -> dict:
        return {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": ALLOWED_METHODS,
            "Access-Control-Allow-Headers": request.headers.get(
                "access-control-request-headers", "*"
            ),
        }

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=self._cors_headers(request))

        response = await call_next(request)
        response.headers.update(self._cors_headers(request))
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of every request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        logger.info(f"{request.method} {path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
        return response
