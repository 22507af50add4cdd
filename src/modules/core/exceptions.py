"""Cross-cutting exceptions and the API error envelope.

Every failure that escapes a view is rendered as::

    {"status": 404, "message": "...", "details": "...",
     "timestamp": "2026-01-01T12:00:00Z", "path": "/api/products/1"}

``api_exception_handler`` is registered as DRF's ``EXCEPTION_HANDLER``;
``modules.core.views`` reuses ``error_payload`` for the Django-level
404/500 handlers.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Dict, Mapping, Optional

import structlog
from django.http import Http404
from django.utils import timezone
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import set_rollback

logger = structlog.get_logger(__name__)


class NotFound(Exception):
    """The referenced identifier has no corresponding record."""


class ValidationFailed(Exception):
    """One or more request fields violate a declared constraint.

    ``field_errors`` maps the wire name of each offending field to its
    message.
    """

    def __init__(self, field_errors: Mapping[str, str]) -> None:
        self.field_errors = dict(field_errors)
        super().__init__(format_field_errors(self.field_errors))


def format_field_errors(field_errors: Mapping[str, str]) -> str:
    return "; ".join(f"{field}: {message}" for field, message in field_errors.items())


def error_payload(
    status_code: int, message: str, details: str, path: str
) -> Dict[str, Any]:
    return {
        "status": status_code,
        "message": message,
        "details": details,
        "timestamp": timezone.now(),
        "path": path,
    }


def _request_path(context: Mapping[str, Any]) -> str:
    request = context.get("request")
    return request.path if request is not None else ""


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """Translate any exception raised inside a DRF view into the envelope."""
    path = _request_path(context)

    if isinstance(exc, ValidationFailed):
        logger.warning("request.validation_failed", path=path, errors=exc.field_errors)
        status_code = status.HTTP_400_BAD_REQUEST
        body = error_payload(status_code, "Validation failed", str(exc), path)

    elif isinstance(exc, (NotFound, Http404)):
        logger.info("request.not_found", path=path, detail=str(exc))
        status_code = status.HTTP_404_NOT_FOUND
        body = error_payload(status_code, "Resource not found", str(exc), path)

    elif isinstance(exc, APIException):
        logger.warning(
            "request.rejected",
            path=path,
            status_code=exc.status_code,
            detail=str(exc.detail),
        )
        status_code = exc.status_code
        body = error_payload(
            status_code, HTTPStatus(status_code).phrase, str(exc.detail), path
        )

    else:
        logger.error("request.unexpected_error", path=path, exc_info=exc)
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        body = error_payload(
            status_code,
            "An unexpected error occurred",
            f"{type(exc).__name__}: {exc}",
            path,
        )

    set_rollback()
    return Response(body, status=status_code)
