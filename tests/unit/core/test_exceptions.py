"""Unit tests for the API exception handler."""

from __future__ import annotations

import pytest
from django.http import Http404
from rest_framework.exceptions import MethodNotAllowed
from rest_framework.test import APIRequestFactory

from modules.core.exceptions import (
    NotFound,
    ValidationFailed,
    api_exception_handler,
    format_field_errors,
)

pytestmark = pytest.mark.unit


@pytest.fixture()
def context():
    return {"request": APIRequestFactory().get("/api/products/5"), "view": None}


class TestFormatFieldErrors:
    def test_joins_fields_in_order(self):
        rendered = format_field_errors({"name": "too short", "price": "must be > 0"})
        assert rendered == "name: too short; price: must be > 0"

    def test_validation_failed_message(self):
        exc = ValidationFailed({"quantity": "Quantity cannot be negative"})
        assert str(exc) == "quantity: Quantity cannot be negative"
        assert exc.field_errors == {"quantity": "Quantity cannot be negative"}


class TestApiExceptionHandler:
    def test_validation_failed_is_400(self, context):
        response = api_exception_handler(ValidationFailed({"price": "bad"}), context)
        assert response.status_code == 400
        assert response.data["message"] == "Validation failed"
        assert response.data["details"] == "price: bad"
        assert response.data["path"] == "/api/products/5"

    @pytest.mark.parametrize("exc", [NotFound("gone"), Http404("gone")])
    def test_not_found_is_404(self, context, exc):
        response = api_exception_handler(exc, context)
        assert response.status_code == 404
        assert response.data["details"] == "gone"

    def test_api_exception_keeps_status(self, context):
        response = api_exception_handler(MethodNotAllowed("PATCH"), context)
        assert response.status_code == 405
        assert response.data["message"] == "Method Not Allowed"

    def test_anything_else_is_500(self, context):
        response = api_exception_handler(KeyError("boom"), context)
        assert response.status_code == 500
        assert response.data["message"] == "An unexpected error occurred"
        assert response.data["details"].startswith("KeyError")

    def test_envelope_keys(self, context):
        response = api_exception_handler(NotFound("x"), context)
        assert set(response.data) == {"status", "message", "details", "timestamp", "path"}
