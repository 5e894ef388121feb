"""
In-Memory Product Repository
============================

Dictionary-backed implementation of ProductRepository.
Used by tests and by the default "memory" storage backend.
"""
import threading
from itertools import count
from typing import Dict, List, Optional

from storefront.domain.models.product import Product
from storefront.domain.repositories.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):
    """
    Thread-safe in-memory product store.

    Every read returns a copy, so nothing outside the repository can
    change stored state without going through ``save``.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._items: Dict[int, Product] = {}
        self._ids = count(1)

    def find_by_id(self, product_id: int) -> Optional[Product]:
        with self._lock:
            product = self._items.get(product_id)
            return product.copy() if product else None

    def find_all(self) -> List[Product]:
        with self._lock:
            return [self._items[key].copy() for key in sorted(self._items)]

    def find_by_price_between(self, min_price: float, max_price: float) -> List[Product]:
        return [p for p in self.find_all() if min_price <= p.price <= max_price]

    def find_by_stock_less_than(self, threshold: int) -> List[Product]:
        return [p for p in self.find_all() if p.stock < threshold]

    def save(self, product: Product) -> Product:
        stored = product.copy()
        with self._lock:
            if stored.id is None:
                stored.id = next(self._ids)
            self._items[stored.id] = stored
        return stored.copy()

    def delete_by_id(self, product_id: int) -> None:
        with self._lock:
            self._items.pop(product_id, None)
