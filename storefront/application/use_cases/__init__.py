from .product_use_cases import (
    DeleteProductUseCase,
    GetProductUseCase,
    RegisterProductUseCase,
    SetProductStockUseCase,
)
from .user_use_cases import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
)

__all__ = [
    "RegisterProductUseCase",
    "GetProductUseCase",
    "SetProductStockUseCase",
    "DeleteProductUseCase",
    "GetUserUseCase",
    "CreateUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
]
