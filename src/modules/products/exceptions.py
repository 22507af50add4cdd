"""Product domain exceptions.

Raised by the Service Layer; the API error handler in
``modules.core.exceptions`` translates them into HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import NotFound


class ProductNotFound(NotFound):
    """No product is stored under the requested ID."""

    def __init__(self, product_id) -> None:
        self.product_id = product_id
        super().__init__(f"Product not found with ID: {product_id}")
