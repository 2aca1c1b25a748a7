"""Entity package: Product."""

from .entity import MAX_QUANTITY, Product
from .repository import ProductRepository
from .table import ProductTable

__all__ = ["MAX_QUANTITY", "Product", "ProductRepository", "ProductTable"]
