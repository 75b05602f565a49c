import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

REQUEST_ID_HEADER = "X-Request-ID"

logger = structlog.get_logger()


class CorrelationIdMiddleware:
    """Middleware that tags every request with a correlation ID and logs it.

    Reads the X-Request-ID header from the incoming request. If absent,
    generates a new UUID4. The ID is bound into structlog's context
    variables so every log line emitted while serving the request carries
    it, and is returned to the client via the X-Request-ID response header.
    One ``request_started`` and one ``request_finished`` line (with status
    and duration) are written per request.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        logger.info(
            "request_started",
            method=request.method,
            path=request.get_full_path(),
        )
        started = time.monotonic()

        response = self.get_response(request)

        logger.info(
            "request_finished",
            method=request.method,
            path=request.get_full_path(),
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - started) * 1000, 2),
        )

        response[REQUEST_ID_HEADER] = cid
        return response
