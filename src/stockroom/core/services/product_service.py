"""Product service: the only place inventory rules are enforced."""

from __future__ import annotations

from loguru import logger
from sqlmodel import Session

from stockroom.core.exceptions import InsufficientStock, InvalidArgument, NotFound
from stockroom.entities.service.product import (
    MAX_QUANTITY,
    Product,
    ProductRepository,
)


class ProductService:
    """Validate and orchestrate product operations.

    Rules:
    - adjustment amounts must be positive
    - a product's quantity never goes below zero
    - quantities and amounts never exceed MAX_QUANTITY

    The service does not commit; adapters own the transaction boundary.
    """

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    @classmethod
    def from_session(cls, session: Session) -> ProductService:
        return cls(ProductRepository(session))

    def add_product(self, name: str, quantity: int = 0) -> Product:
        if not name or not name.strip():
            raise InvalidArgument("Product name must not be blank")
        if quantity < 0:
            raise InvalidArgument(
                f"Initial quantity must not be negative, got {quantity}"
            )
        if quantity > MAX_QUANTITY:
            raise InvalidArgument(
                f"Initial quantity must not exceed {MAX_QUANTITY}, got {quantity}"
            )

        product = self._repository.add(name, quantity)
        logger.info(
            "Added product {} ({!r}) with quantity {}",
            product.id,
            product.name,
            product.quantity,
        )
        return product

    def list_products(self) -> list[Product]:
        return self._repository.list_all()

    def get_product(self, product_id: int) -> Product:
        if not _is_storable_id(product_id):
            raise NotFound(product_id)
        product = self._repository.get_by_id(product_id)
        if product is None:
            raise NotFound(product_id)
        return product

    def increment_quantity(self, product_id: int, amount: int) -> Product:
        """Add ``amount`` units to a product's stock."""
        self._require_positive(amount)
        current = self._locked(product_id)

        if current.quantity > MAX_QUANTITY - amount:
            logger.warning(
                "Rejected increment of product {} by {}: limit is {}",
                product_id,
                amount,
                MAX_QUANTITY,
            )
            raise InvalidArgument(
                f"Incrementing product {product_id} by {amount} would exceed "
                f"the maximum quantity of {MAX_QUANTITY}"
            )

        product = self._repository.set_quantity(product_id, current.quantity + amount)
        logger.info(
            "Incremented product {} by {}: {} -> {}",
            product_id,
            amount,
            current.quantity,
            product.quantity,
        )
        return product

    def decrement_quantity(self, product_id: int, amount: int) -> Product:
        """Remove ``amount`` units from a product's stock.

        Raises:
            InvalidArgument: amount is not positive
            NotFound: no product with ``product_id``
            InsufficientStock: fewer than ``amount`` units are in stock
        """
        self._require_positive(amount)
        current = self._locked(product_id)

        if current.quantity < amount:
            logger.warning(
                "Rejected decrement of product {} by {}: only {} in stock",
                product_id,
                amount,
                current.quantity,
            )
            raise InsufficientStock(product_id, current.quantity, amount)

        product = self._repository.set_quantity(product_id, current.quantity - amount)
        logger.info(
            "Decremented product {} by {}: {} -> {}",
            product_id,
            amount,
            current.quantity,
            product.quantity,
        )
        return product

    def _locked(self, product_id: int) -> Product:
        product = None
        if _is_storable_id(product_id):
            product = self._repository.get_by_id(product_id, for_update=True)
        if product is None:
            logger.warning("Product {} not found", product_id)
            raise NotFound(product_id)
        return product

    @staticmethod
    def _require_positive(amount: int) -> None:
        if amount <= 0:
            raise InvalidArgument(f"Quantity must be a positive integer, got {amount}")
        if amount > MAX_QUANTITY:
            raise InvalidArgument(
                f"Quantity must not exceed {MAX_QUANTITY}, got {amount}"
            )


def _is_storable_id(product_id: int) -> bool:
    return -MAX_QUANTITY - 1 <= product_id <= MAX_QUANTITY
