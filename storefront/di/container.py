from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    ProductProvider,
    RepositoryProvider,
    UserProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories and the shared key lock (RepositoryProvider) - depends on database
    3. Services and use cases (ProductProvider, UserProvider) - depend on repositories
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        DatabaseProvider.register(self, self.settings)
        RepositoryProvider.register(self, self.settings)
        ProductProvider.register(self)
        UserProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def init_container(settings: Optional[Settings] = None) -> DIContainer:
    """
    Build a fresh global container from ``settings`` and install it.

    Returns:
        The newly installed DIContainer
    """
    global _container
    _container = DIContainer(settings)
    return _container


def reset_container() -> None:
    """Discard the global container; the next lookup builds a fresh one."""
    global _container
    _container = None
