"""
Product Model
=============

Domain model representing a product in the catalog.
This is a pure domain object with no infrastructure dependencies.
"""
from dataclasses import dataclass, replace
from typing import Optional


@dataclass
class Product:
    """
    Product domain model.

    ``id`` is None until storage assigns one on first save.
    Business rules (non-blank name, positive price, non-negative stock)
    are enforced by ProductService, not here.
    """
    name: str
    price: float
    stock: int = 0
    id: Optional[int] = None

    def is_new(self) -> bool:
        """Check if product has not been persisted yet."""
        return self.id is None

    def copy(self) -> "Product":
        return replace(self)
