"""HTTP middleware."""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with status and latency.

    Level follows the status: INFO below 400, WARNING for 4xx and ERROR for
    5xx or an exception escaping the handler.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start = time.perf_counter()
        client_ip = request.client.host if request.client else "-"

        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                "%s %s | 500 | %.2fms | %s | unhandled exception",
                request.method,
                request.url.path,
                (time.perf_counter() - start) * 1000,
                client_ip,
            )
            raise

        latency_ms = (time.perf_counter() - start) * 1000
        status_code = response.status_code
        if status_code >= 500:
            level = logging.ERROR
        elif status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO

        logger.log(
            level,
            "%s %s | %d | %.2fms | %s",
            request.method,
            request.url.path,
            status_code,
            latency_ms,
            client_ip,
        )
        return response
