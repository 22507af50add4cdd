import time
from typing import Any, Dict

import structlog
from django.db import connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

from modules.core.exceptions import error_payload

logger = structlog.get_logger()


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    # Check database
    try:
        start = time.monotonic()
        conn = connections["default"]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        services["database"] = {
            "status": "up",
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except Exception:
        services["database"] = {"status": "down"}
        overall_healthy = False
        logger.error("health_check_db_failure", exc_info=True)

    status_code = 200 if overall_healthy else 503

    logger.info(
        "health_check_completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return JsonResponse(
        {
            "status": "healthy" if overall_healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=status_code,
    )


def page_not_found(request: HttpRequest, exception: Exception) -> JsonResponse:
    """``handler404`` for URLs no view matched."""
    logger.info("request.no_route", path=request.path)
    return JsonResponse(
        error_payload(
            404,
            "Resource not found",
            f"No endpoint {request.method} {request.path}",
            request.path,
        ),
        status=404,
    )


def server_error(request: HttpRequest) -> JsonResponse:
    """``handler500`` for failures raised outside DRF views."""
    return JsonResponse(
        error_payload(
            500,
            "An unexpected error occurred",
            "Internal server error",
            request.path,
        ),
        status=500,
    )
