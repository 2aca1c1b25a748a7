"""Product repository."""

from sqlmodel import Session, col, select

from stockroom.core.exceptions import NotFound
from stockroom.entities.core._base import utc_now

from .entity import Product
from .table import ProductTable


class ProductRepository:
    """Data-access layer for products.

    A thin translation between ``Product`` entities and ``ProductTable`` rows.
    It flushes but never commits; the caller owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, name: str, quantity: int) -> Product:
        row = ProductTable(name=name, quantity=quantity)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)

    def list_all(self) -> list[Product]:
        statement = select(ProductTable).order_by(col(ProductTable.id))
        rows = self._session.exec(statement).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def get_by_id(self, product_id: int, *, for_update: bool = False) -> Product | None:
        """Look a product up by primary key.

        With ``for_update`` the row stays locked until the transaction ends on
        backends that support ``SELECT ... FOR UPDATE``.
        """
        if for_update:
            statement = (
                select(ProductTable)
                .where(ProductTable.id == product_id)
                .with_for_update()
            )
            row = self._session.exec(statement).first()
        else:
            row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def set_quantity(self, product_id: int, quantity: int) -> Product:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            raise NotFound(product_id)

        row.quantity = quantity
        row.updated_at = utc_now()
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)
