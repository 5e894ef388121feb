from .in_memory_product_repository import InMemoryProductRepository
from .in_memory_user_repository import InMemoryUserRepository

__all__ = ["InMemoryProductRepository", "InMemoryUserRepository"]
