"""
Product Repository Interface
============================

Abstract interface for product data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from storefront.domain.models.product import Product


class ProductRepository(ABC):
    """
    Abstract repository for product persistence operations.

    Implementations own identity assignment and durability. Lookups
    return copies, so callers may mutate results freely.
    """

    @abstractmethod
    def find_by_id(self, product_id: int) -> Optional[Product]:
        """
        Find a product by its ID.

        Args:
            product_id: Unique product identifier

        Returns:
            Product entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> List[Product]:
        """
        Find all products.

        Returns:
            List of product entities ordered by id
        """
        pass

    @abstractmethod
    def find_by_price_between(self, min_price: float, max_price: float) -> List[Product]:
        """
        Find products whose price lies in the inclusive range [min_price, max_price].

        An inverted range (min_price > max_price) matches nothing.

        Args:
            min_price: Lower bound
            max_price: Upper bound

        Returns:
            List of matching product entities
        """
        pass

    @abstractmethod
    def find_by_stock_less_than(self, threshold: int) -> List[Product]:
        """
        Find products whose stock is strictly below ``threshold``.

        Args:
            threshold: Exclusive upper bound for stock

        Returns:
            List of matching product entities
        """
        pass

    @abstractmethod
    def save(self, product: Product) -> Product:
        """
        Create or fully replace a product.

        Args:
            product: Product entity; an id is assigned when absent

        Returns:
            Persisted product entity
        """
        pass

    @abstractmethod
    def delete_by_id(self, product_id: int) -> None:
        """
        Delete a product.

        Args:
            product_id: Unique product identifier
        """
        pass
