"""Inventory domain exceptions.

Raised by the service and repository layers when a business rule is
violated. Each adapter catches ``InventoryError`` and converts it to its own
representation (HTTP 400 body, console error with a non-zero exit code).
"""

from __future__ import annotations


class InventoryError(Exception):
    """Base class for every inventory rule violation."""


class InvalidArgument(InventoryError):
    """An operation received an argument it cannot act on."""


class NotFound(InventoryError):
    """No product exists with the requested id."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class InsufficientStock(InventoryError):
    """A decrement would take a product's quantity below zero."""

    def __init__(self, product_id: int, available: int, requested: int) -> None:
        super().__init__(
            f"Insufficient stock for product {product_id}: "
            f"{available} available, {requested} requested"
        )
        self.product_id = product_id
        self.available = available
        self.requested = requested
