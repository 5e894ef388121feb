"""
Product Use Cases
=================

Controller-level product operations. Each use case performs its own
checks on top of ProductService, with adapter-facing messages.
"""
import logging

from storefront.application.services.product_service import ProductService
from storefront.core.exceptions import InvalidArgumentError
from storefront.domain.models.product import Product

logger = logging.getLogger(__name__)


class RegisterProductUseCase:
    """
    Use case for registering a product.

    Price and name are checked here first, then again by
    ProductService.save with its own wording.
    """

    def __init__(self, product_service: ProductService):
        """
        Initialize use case with service.

        Args:
            product_service: Service holding the product rules
        """
        self._service = product_service

    def execute(self, product: Product) -> Product:
        """
        Execute the register product use case.

        Raises:
            InvalidArgumentError: If price <= 0 or name is blank, or if the
                service rejects the product
        """
        if product.price is None or not product.price > 0:
            raise InvalidArgumentError("Cannot register a product with zero or negative price")
        if not isinstance(product.name, str) or not product.name.strip():
            raise InvalidArgumentError("Product name is required")

        return self._service.save(product)


class GetProductUseCase:
    """Use case for fetching one product."""

    def __init__(self, product_service: ProductService):
        self._service = product_service

    def execute(self, product_id: int) -> Product:
        return self._service.get_by_id(product_id)


class SetProductStockUseCase:
    """Use case for overwriting a product's stock with an absolute quantity."""

    def __init__(self, product_service: ProductService):
        self._service = product_service

    def execute(self, product_id: int, quantity: int) -> Product:
        """
        Execute the set stock use case.

        Args:
            product_id: Product to update
            quantity: New absolute stock

        Raises:
            InvalidArgumentError: If quantity is negative
            NotFoundError: If the product does not exist
        """
        if quantity is None or quantity < 0:
            raise InvalidArgumentError("Stock quantity cannot be negative")

        product = self._service.get_by_id(product_id)
        product.stock = quantity
        return self._service.save(product)


class DeleteProductUseCase:
    """
    Use case for deleting a product.

    Reports the outcome as a boolean; every failure, storage errors included,
    maps to False.
    """

    def __init__(self, product_service: ProductService):
        self._service = product_service

    def execute(self, product_id: int) -> bool:
        try:
            self._service.get_by_id(product_id)
            self._service.delete(product_id)
            return True
        except Exception as e:
            logger.warning(f"Delete of product {product_id} failed: {e}")
            return False
