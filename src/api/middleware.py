"""Request logging middleware"""

import logging
import time
import uuid
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with an ID and logs method, path, status and duration

    An incoming X-Request-ID is reused; otherwise a new one is generated.
    The ID is echoed back in the response headers.
    """

    async def dispatch(self, request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                f"[{request_id}] {request.method} {request.url.path} failed"
            )
            raise

        elapsed_ms = int((time.perf_counter() - started) * 1000)
        logger.info(
            f"[{request_id}] {request.method} {request.url.path} -> {response.status_code} ({elapsed_ms}ms)"
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
