from typing import TYPE_CHECKING

from ...core.config import Settings

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer", settings: Settings) -> None:
        """
        Register database connections for the configured storage backend.
        The in-memory backend needs none.
        """
        if settings.storage_backend == "mongo":
            # Imported lazily so the memory backend never touches pymongo
            from ...infrastructure.db.mongo_connection import get_mongo_client

            container.register_singleton("mongo_client", get_mongo_client())
