import logging
from typing import TYPE_CHECKING

from ...core.config import Settings
from ...domain.repositories.product_repository import ProductRepository
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.memory import InMemoryProductRepository, InMemoryUserRepository
from ...utils.key_lock import KeyedLock

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer", settings: Settings) -> None:
        """
        Register repository implementations for the configured backend,
        plus the shared per-key lock that serializes access in front of them.
        """
        backend = settings.storage_backend

        if backend == "mongo":
            from ...infrastructure.db import MongoProductRepository, MongoUserRepository

            mongo_client = container.get("mongo_client")
            container.register_singleton(ProductRepository, MongoProductRepository(mongo_client))
            container.register_singleton(UserRepository, MongoUserRepository(mongo_client))
        elif backend == "memory":
            container.register_singleton(ProductRepository, InMemoryProductRepository())
            container.register_singleton(UserRepository, InMemoryUserRepository())
        else:
            raise ValueError(f"Unknown storage backend '{backend}' (expected 'memory' or 'mongo')")

        container.register_singleton(KeyedLock, KeyedLock())
        logger.info(f"Registered '{backend}' repositories")
