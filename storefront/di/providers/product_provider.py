from typing import TYPE_CHECKING

from ...application.services.product_service import ProductService
from ...application.use_cases.product_use_cases import (
    DeleteProductUseCase,
    GetProductUseCase,
    RegisterProductUseCase,
    SetProductStockUseCase,
)
from ...domain.repositories.product_repository import ProductRepository
from ...utils.key_lock import KeyedLock

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProductProvider:
    """Product provider - registers the product service and its use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        service = ProductService(
            product_repository=container.get(ProductRepository),
            lock=container.get(KeyedLock),
        )
        container.register_singleton(ProductService, service)

        container.register_singleton(RegisterProductUseCase, RegisterProductUseCase(service))
        container.register_singleton(GetProductUseCase, GetProductUseCase(service))
        container.register_singleton(SetProductStockUseCase, SetProductStockUseCase(service))
        container.register_singleton(DeleteProductUseCase, DeleteProductUseCase(service))
