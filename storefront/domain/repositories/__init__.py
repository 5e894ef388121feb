from .product_repository import ProductRepository
from .user_repository import UserRepository

__all__ = ["ProductRepository", "UserRepository"]
