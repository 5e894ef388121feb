"""
MongoDB User Repository
=======================

Concrete implementation of UserRepository using MongoDB.

A unique index on ``email`` backs the uniqueness rule at the storage
boundary, so concurrent creations from separate processes cannot both land.
"""
import logging
import re
from typing import List, Optional

from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from storefront.core.config import get_settings
from storefront.core.exceptions import InvalidArgumentError
from storefront.domain.constants.user_fields import UserFields
from storefront.domain.models.user import User
from storefront.domain.repositories.user_repository import UserRepository
from storefront.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository."""

    SEQUENCE_NAME = "users"

    def __init__(self, client: Optional[MongoClientManager] = None):
        self._client = client or get_mongo_client()
        self._collection = self._client.get_collection(get_settings().users_collection)
        self._collection.create_index([(UserFields.EMAIL, ASCENDING)], unique=True)

    def _to_entity(self, doc: dict) -> User:
        """Convert MongoDB document to User entity."""
        return User(
            id=doc[UserFields.ID],
            name=doc.get(UserFields.NAME, ""),
            email=doc.get(UserFields.EMAIL, ""),
        )

    def _to_document(self, user: User) -> dict:
        """Convert User entity to MongoDB document."""
        return {
            UserFields.ID: user.id,
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
        }

    def find_by_id(self, user_id: int) -> Optional[User]:
        doc = self._collection.find_one({UserFields.ID: user_id})
        if not doc:
            return None
        return self._to_entity(doc)

    def find_all(self) -> List[User]:
        docs = self._collection.find().sort(UserFields.ID, ASCENDING)
        return [self._to_entity(doc) for doc in docs]

    def find_by_email(self, email: str) -> Optional[User]:
        doc = self._collection.find_one({UserFields.EMAIL: email})
        if not doc:
            return None
        return self._to_entity(doc)

    def find_by_name_containing(self, fragment: str) -> List[User]:
        docs = self._collection.find(
            {UserFields.NAME: {"$regex": re.escape(fragment)}}
        ).sort(UserFields.ID, ASCENDING)
        return [self._to_entity(doc) for doc in docs]

    def save(self, user: User) -> User:
        stored = user.copy()
        if stored.id is None:
            stored.id = self._client.next_sequence(self.SEQUENCE_NAME)
        try:
            self._collection.replace_one(
                {UserFields.ID: stored.id},
                self._to_document(stored),
                upsert=True,
            )
        except DuplicateKeyError as e:
            logger.warning(f"Rejected duplicate email for user {stored.id}: {e}")
            raise InvalidArgumentError("Email already in use") from e
        return stored

    def delete_by_id(self, user_id: int) -> None:
        self._collection.delete_one({UserFields.ID: user_id})
