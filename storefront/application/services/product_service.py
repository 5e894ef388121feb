"""
Product Service
===============

Application service holding the product business rules.
Every rule is checked here before a product reaches storage.
"""
import logging
from typing import List, Optional

from storefront.core.exceptions import InvalidArgumentError, NotFoundError
from storefront.domain.models.product import Product
from storefront.domain.repositories.product_repository import ProductRepository
from storefront.utils.key_lock import KeyedLock

logger = logging.getLogger(__name__)


class ProductService:
    """
    Application service for product operations.

    Read-modify-write operations on one product run under that product's
    lock, so two concurrent stock adjustments cannot both read the same
    starting stock.
    """

    def __init__(self, product_repository: ProductRepository, lock: Optional[KeyedLock] = None):
        """
        Initialize service with repository.

        Args:
            product_repository: Repository for product persistence
            lock: Per-key lock registry; a private one is created when omitted
        """
        self._repository = product_repository
        self._lock = lock or KeyedLock()

    @staticmethod
    def _key(product_id: int) -> tuple:
        return ("product", product_id)

    def get_by_id(self, product_id: int) -> Product:
        """
        Get a product by ID.

        Raises:
            NotFoundError: If no product has this ID
        """
        product = self._repository.find_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product not found with ID: {product_id}")
        return product

    def get_all(self) -> List[Product]:
        return self._repository.find_all()

    def get_by_price_range(self, min_price: float, max_price: float) -> List[Product]:
        """
        List products priced within [min_price, max_price].

        The bounds are not validated; an inverted range yields an empty list.
        """
        return self._repository.find_by_price_between(min_price, max_price)

    def get_low_stock(self, threshold: int) -> List[Product]:
        """List products whose stock is strictly below ``threshold``."""
        return self._repository.find_by_stock_less_than(threshold)

    def save(self, product: Product) -> Product:
        """
        Validate and persist a product (create when it has no id, replace otherwise).

        Args:
            product: Product to save

        Returns:
            Persisted product, with an id assigned on creation

        Raises:
            InvalidArgumentError: If name is blank, price is not above zero (NaN included) or stock < 0
        """
        if not isinstance(product.name, str) or not product.name.strip():
            raise InvalidArgumentError("Product name is required")
        if product.price is None or not product.price > 0:
            raise InvalidArgumentError("Price must be greater than zero")
        if product.stock is None or product.stock < 0:
            raise InvalidArgumentError("Stock quantity cannot be negative")

        if product.is_new():
            saved = self._repository.save(product)
            logger.info(f"Product {saved.id} created")
            return saved

        with self._lock.hold(self._key(product.id)):
            return self._repository.save(product)

    def delete(self, product_id: int) -> None:
        """
        Delete a product.

        Raises:
            NotFoundError: If no product has this ID
        """
        with self._lock.hold(self._key(product_id)):
            self.get_by_id(product_id)
            self._repository.delete_by_id(product_id)
        logger.info(f"Product {product_id} deleted")

    def adjust_stock(self, product_id: int, delta: int) -> Product:
        """
        Add ``delta`` (possibly negative) to a product's stock.

        Raises:
            NotFoundError: If no product has this ID
            InvalidArgumentError: If the resulting stock would be negative
        """
        with self._lock.hold(self._key(product_id)):
            product = self.get_by_id(product_id)
            new_stock = product.stock + delta
            if new_stock < 0:
                logger.warning(
                    f"Rejected stock adjustment of {delta} on product {product_id} (stock {product.stock})"
                )
                raise InvalidArgumentError(
                    f"Operation would result in negative stock. Current stock: {product.stock}"
                )
            product.stock = new_stock
            return self._repository.save(product)

    def set_price(self, product_id: int, new_price: float) -> Product:
        """
        Replace a product's price.

        Raises:
            InvalidArgumentError: If ``new_price`` is not above zero (checked before the lookup)
            NotFoundError: If no product has this ID
        """
        if new_price is None or not new_price > 0:
            raise InvalidArgumentError("Price must be greater than zero")

        with self._lock.hold(self._key(product_id)):
            product = self.get_by_id(product_id)
            product.price = new_price
            return self._repository.save(product)
