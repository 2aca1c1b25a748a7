"""Product API router."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from sqlmodel import Session

from stockroom.api.http.deps import get_db_session, get_product_service
from stockroom.core.services import ProductService
from stockroom.entities.service.product import MAX_QUANTITY, Product

router = APIRouter(prefix="/products", tags=["products"])


class ProductCreate(BaseModel):
    model_config = ConfigDict(strict=True)

    name: str = Field(description="Product name")
    quantity: int = Field(
        default=0, le=MAX_QUANTITY, description="Initial units in stock"
    )


class QuantityChange(BaseModel):
    model_config = ConfigDict(strict=True)

    quantity: int = Field(le=MAX_QUANTITY, description="Units to add or remove")


@router.post("", response_model=Product, status_code=201)
def create_product(
    payload: ProductCreate,
    session: Session = Depends(get_db_session),
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Create a new product."""
    product = service.add_product(payload.name, payload.quantity)
    session.commit()
    return product


@router.get("", response_model=list[Product])
def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[Product]:
    """List all products."""
    return service.list_products()


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Get a product by ID."""
    return service.get_product(product_id)


@router.patch("/{product_id}/increment", response_model=Product)
def increment_product(
    product_id: int,
    payload: QuantityChange,
    session: Session = Depends(get_db_session),
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Add stock to a product."""
    product = service.increment_quantity(product_id, payload.quantity)
    session.commit()
    return product


@router.patch("/{product_id}/decrement", response_model=Product)
def decrement_product(
    product_id: int,
    payload: QuantityChange,
    session: Session = Depends(get_db_session),
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Remove stock from a product."""
    product = service.decrement_quantity(product_id, payload.quantity)
    session.commit()
    return product
