import time
import uuid
from typing import Callable

import structlog
from django.http import HttpRequest, HttpResponse

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


class CorrelationIdMiddleware:
    """Tag every request with a correlation ID and log its outcome.

    The ID comes from the ``X-Request-ID`` header or a fresh UUID4.  It is
    bound into structlog's contextvars so every log line emitted while
    serving the request carries it, and echoed back on the response.
    Logging here is observation only; it never alters the response.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        log = logger.bind(method=request.method, path=request.get_full_path())
        log.info("request_started")
        start = time.monotonic()

        response = self.get_response(request)

        log.info(
            "request_finished",
            status_code=response.status_code,
            duration_ms=round((time.monotonic() - start) * 1000, 2),
        )

        response[REQUEST_ID_HEADER] = cid
        return response
