from .mongo_connection import MongoClientManager, get_mongo_client
from .mongo_product_repository import MongoProductRepository
from .mongo_user_repository import MongoUserRepository

__all__ = [
    "MongoClientManager",
    "get_mongo_client",
    "MongoProductRepository",
    "MongoUserRepository",
]
