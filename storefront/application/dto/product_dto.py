"""
Product DTO
===========

Pydantic models for product API requests and responses.
Business rules are not encoded here; the service layer owns them.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from storefront.domain.models.product import Product


class ProductCreateRequest(BaseModel):
    """DTO for registering a product or replacing one."""
    name: str = Field(..., description="Product name")
    price: float = Field(..., description="Unit price, must be greater than zero")
    stock: int = Field(0, description="Units in stock, must not be negative")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Phone", "price": 1000.0, "stock": 0}
        }
    )

    def to_entity(self, product_id: Optional[int] = None) -> Product:
        return Product(id=product_id, name=self.name, price=self.price, stock=self.stock)


class StockAdjustRequest(BaseModel):
    """DTO for adding to (or removing from) a product's stock."""
    delta: int = Field(..., description="Units to add; negative to remove")


class StockSetRequest(BaseModel):
    """DTO for overwriting a product's stock."""
    quantity: int = Field(..., description="New stock quantity")


class PriceUpdateRequest(BaseModel):
    """DTO for changing a product's price."""
    price: float = Field(..., description="New unit price")


class ProductResponse(BaseModel):
    """DTO for product data."""
    id: int
    name: str
    price: float
    stock: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"id": 1, "name": "Phone", "price": 1000.0, "stock": 50}
        }
    )

    @classmethod
    def from_entity(cls, product: Product) -> "ProductResponse":
        return cls(id=product.id, name=product.name, price=product.price, stock=product.stock)


class DeleteResponse(BaseModel):
    """DTO for deletion outcome. ``deleted`` is False for any failure."""
    id: int
    deleted: bool
