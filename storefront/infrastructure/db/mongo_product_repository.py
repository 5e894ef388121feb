"""
MongoDB Product Repository
==========================

Concrete implementation of ProductRepository using MongoDB.
"""
from typing import List, Optional

from pymongo import ASCENDING

from storefront.core.config import get_settings
from storefront.domain.constants.product_fields import ProductFields
from storefront.domain.models.product import Product
from storefront.domain.repositories.product_repository import ProductRepository
from storefront.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client


class MongoProductRepository(ProductRepository):
    """
    MongoDB implementation of ProductRepository.

    Integer ids come from the shared counters collection.
    """

    SEQUENCE_NAME = "products"

    def __init__(self, client: Optional[MongoClientManager] = None):
        """Initialize repository with MongoDB client."""
        self._client = client or get_mongo_client()
        self._collection = self._client.get_collection(get_settings().products_collection)

    def _to_entity(self, doc: dict) -> Product:
        """Convert MongoDB document to Product entity."""
        return Product(
            id=doc[ProductFields.ID],
            name=doc.get(ProductFields.NAME, ""),
            price=float(doc.get(ProductFields.PRICE, 0.0)),
            stock=int(doc.get(ProductFields.STOCK, 0)),
        )

    def _to_document(self, product: Product) -> dict:
        """Convert Product entity to MongoDB document."""
        return {
            ProductFields.ID: product.id,
            ProductFields.NAME: product.name,
            ProductFields.PRICE: product.price,
            ProductFields.STOCK: product.stock,
        }

    def find_by_id(self, product_id: int) -> Optional[Product]:
        doc = self._collection.find_one({ProductFields.ID: product_id})
        if not doc:
            return None
        return self._to_entity(doc)

    def find_all(self) -> List[Product]:
        docs = self._collection.find().sort(ProductFields.ID, ASCENDING)
        return [self._to_entity(doc) for doc in docs]

    def find_by_price_between(self, min_price: float, max_price: float) -> List[Product]:
        docs = self._collection.find(
            {ProductFields.PRICE: {"$gte": min_price, "$lte": max_price}}
        ).sort(ProductFields.ID, ASCENDING)
        return [self._to_entity(doc) for doc in docs]

    def find_by_stock_less_than(self, threshold: int) -> List[Product]:
        docs = self._collection.find(
            {ProductFields.STOCK: {"$lt": threshold}}
        ).sort(ProductFields.ID, ASCENDING)
        return [self._to_entity(doc) for doc in docs]

    def save(self, product: Product) -> Product:
        stored = product.copy()
        if stored.id is None:
            stored.id = self._client.next_sequence(self.SEQUENCE_NAME)
        self._collection.replace_one(
            {ProductFields.ID: stored.id},
            self._to_document(stored),
            upsert=True,
        )
        return stored

    def delete_by_id(self, product_id: int) -> None:
        self._collection.delete_one({ProductFields.ID: product_id})
