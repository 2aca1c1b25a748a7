"""Entity: Product."""

from typing import Any

from pydantic import Field

from stockroom.entities.core._base import Entity

# Largest value a signed 64-bit INTEGER column can hold
MAX_QUANTITY = 2**63 - 1


class Product(Entity):
    """Product entity representing an inventory record.

    This is the domain model handed to adapters. The quantity can never be
    negative.
    """

    name: str = Field(description="Product name")
    quantity: int = Field(
        default=0, ge=0, le=MAX_QUANTITY, description="Units in stock"
    )

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.quantity == other.quantity
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.quantity))
