from .product_dto import (
    DeleteResponse,
    PriceUpdateRequest,
    ProductCreateRequest,
    ProductResponse,
    StockAdjustRequest,
    StockSetRequest,
)
from .user_dto import UserCreateRequest, UserResponse, UserUpdateRequest

__all__ = [
    "ProductCreateRequest",
    "ProductResponse",
    "StockAdjustRequest",
    "StockSetRequest",
    "PriceUpdateRequest",
    "DeleteResponse",
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserResponse",
]
