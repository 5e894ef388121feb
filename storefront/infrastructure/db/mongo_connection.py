"""
MongoDB Connection
==================

Single entry-point for the MongoDB client used by all repositories.

Config:
- MONGO_URI, DB_NAME (see storefront.core.config)
"""
import logging
from typing import Optional

from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database

from storefront.core.config import get_settings

logger = logging.getLogger(__name__)


class MongoClientManager:
    """Lazily connects and hands out collections from the configured database."""

    def __init__(self, uri: str, database_name: str):
        self._uri = uri
        self._database_name = database_name
        self._client: Optional[MongoClient] = None

    @property
    def database(self) -> Database:
        if self._client is None:
            self._client = MongoClient(self._uri)
            logger.info(f"Connected to MongoDB database '{self._database_name}'")
        return self._client[self._database_name]

    def get_collection(self, name: str) -> Collection:
        return self.database[name]

    def next_sequence(self, name: str) -> int:
        """
        Atomically increment and return the counter ``name``.

        Counters live in the configured counters collection and start at 1.
        """
        counters = self.get_collection(get_settings().counters_collection)
        doc = counters.find_one_and_update(
            {"_id": name},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(doc["seq"])

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None


# Global client manager (singleton pattern)
_mongo_client: Optional[MongoClientManager] = None


def get_mongo_client() -> MongoClientManager:
    """
    Get the MongoDB client manager (singleton pattern)

    Returns:
        MongoClientManager bound to MONGO_URI / DB_NAME
    """
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = MongoClientManager(settings.mongo_uri, settings.mongo_database_name)
    return _mongo_client
