"""
Dependency Container
====================

Dependency accessors for FastAPI ``Depends``.
Each returns the singleton registered in the DI container.
"""
from storefront.application.services.product_service import ProductService
from storefront.application.services.user_service import UserService
from storefront.application.use_cases.product_use_cases import (
    DeleteProductUseCase,
    GetProductUseCase,
    RegisterProductUseCase,
    SetProductStockUseCase,
)
from storefront.application.use_cases.user_use_cases import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
)
from storefront.di.container import get_container


def get_product_service() -> ProductService:
    return get_container().get(ProductService)


def get_register_product_use_case() -> RegisterProductUseCase:
    return get_container().get(RegisterProductUseCase)


def get_get_product_use_case() -> GetProductUseCase:
    return get_container().get(GetProductUseCase)


def get_set_product_stock_use_case() -> SetProductStockUseCase:
    return get_container().get(SetProductStockUseCase)


def get_delete_product_use_case() -> DeleteProductUseCase:
    return get_container().get(DeleteProductUseCase)


def get_user_service() -> UserService:
    return get_container().get(UserService)


def get_get_user_use_case() -> GetUserUseCase:
    return get_container().get(GetUserUseCase)


def get_create_user_use_case() -> CreateUserUseCase:
    return get_container().get(CreateUserUseCase)


def get_update_user_use_case() -> UpdateUserUseCase:
    return get_container().get(UpdateUserUseCase)


def get_delete_user_use_case() -> DeleteUserUseCase:
    return get_container().get(DeleteUserUseCase)
