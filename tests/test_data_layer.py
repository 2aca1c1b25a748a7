"""Data layer tests.

Covers the Product entity, the ProductTable mapping, and ProductRepository
against an in-memory SQLite database.
"""

from datetime import datetime

import pytest
from sqlmodel import Session, select

from stockroom.core.exceptions import NotFound
from stockroom.entities.service.product import Product, ProductRepository, ProductTable


class TestProductEntity:
    """Test Product domain entity."""

    def test_product_creation_defaults(self):
        product = Product(name="Widget")

        assert product.name == "Widget"
        assert product.quantity == 0
        assert product.id is None
        assert isinstance(product.created_at, datetime)
        assert isinstance(product.updated_at, datetime)

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValueError):
            Product(name="Widget", quantity=-1)

    def test_serializes_with_camel_case_aliases(self):
        product = Product(id=1, name="Widget", quantity=3)

        data = product.model_dump(by_alias=True)

        assert set(data) == {"id", "name", "quantity", "createdAt", "updatedAt"}

    def test_accepts_alias_or_field_name(self):
        stamp = datetime(2024, 1, 1, 12, 0, 0)

        by_alias = Product.model_validate({"name": "A", "createdAt": stamp})
        by_name = Product.model_validate({"name": "A", "created_at": stamp})

        assert by_alias.created_at == stamp
        assert by_name.created_at == stamp

    def test_product_equality(self):
        """Should compare products by business attributes, ignoring timestamps."""
        product1 = Product(id=1, name="Widget", quantity=5)
        product2 = Product(id=1, name="Widget", quantity=5)
        product3 = Product(id=2, name="Gadget", quantity=5)

        assert product1 == product2
        assert product1 != product3
        assert hash(product1) == hash(product2)


class TestProductRepository:
    """Test ProductRepository against a real database."""

    def test_add_assigns_id_and_timestamps(self, repository: ProductRepository):
        product = repository.add("Widget", 5)

        assert product.id is not None
        assert product.name == "Widget"
        assert product.quantity == 5
        assert product.created_at is not None
        assert product.updated_at is not None

    def test_add_assigns_distinct_ids(self, repository: ProductRepository):
        first = repository.add("Widget", 1)
        second = repository.add("Gadget", 2)

        assert first.id != second.id

    def test_add_persists_row(self, repository: ProductRepository, session: Session):
        product = repository.add("Widget", 5)

        row = session.exec(select(ProductTable).where(ProductTable.id == product.id)).one()
        assert row.name == "Widget"
        assert row.quantity == 5

    def test_list_all_empty(self, repository: ProductRepository):
        assert repository.list_all() == []

    def test_list_all_ordered_by_id(self, repository: ProductRepository):
        widget = repository.add("Widget", 1)
        gadget = repository.add("Gadget", 2)

        products = repository.list_all()

        assert [p.id for p in products] == [widget.id, gadget.id]
        assert all(isinstance(p, Product) for p in products)

    def test_get_by_id_round_trip(self, repository: ProductRepository):
        created = repository.add("X", 10)

        found = repository.get_by_id(created.id)

        assert found is not None
        assert found.name == "X"
        assert found.quantity == 10

    def test_get_by_id_for_update(self, repository: ProductRepository):
        created = repository.add("X", 10)

        found = repository.get_by_id(created.id, for_update=True)

        assert found == created

    def test_get_by_id_missing(self, repository: ProductRepository):
        assert repository.get_by_id(999) is None
        assert repository.get_by_id(999, for_update=True) is None

    def test_set_quantity_overwrites(self, repository: ProductRepository):
        created = repository.add("Widget", 5)

        updated = repository.set_quantity(created.id, 42)

        assert updated.quantity == 42
        assert repository.get_by_id(created.id).quantity == 42

    def test_set_quantity_bumps_updated_at(self, repository: ProductRepository):
        created = repository.add("Widget", 5)

        updated = repository.set_quantity(created.id, 6)

        assert updated.updated_at >= created.updated_at
        assert updated.created_at == created.created_at

    def test_set_quantity_missing_raises_not_found(self, repository: ProductRepository):
        with pytest.raises(NotFound) as exc_info:
            repository.set_quantity(999, 1)

        assert exc_info.value.product_id == 999
