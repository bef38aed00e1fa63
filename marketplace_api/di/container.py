# Standard library imports
import logging

# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    FavoriteProvider,
    RepositoryProvider,
    UserProvider,
)

logger = logging.getLogger(__name__)


class DIContainer(BaseContainer):
    """
    Dependency injection container for the marketplace API.

    Providers register in dependency order: collections, then the Mongo
    repositories bound to them, then the auth, user and favorite use cases.
    Repositories and the deletion service are singletons; use cases are
    built per request by factories.
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """Compose all providers (database → repositories → use cases)"""
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)

        AuthProvider.register(self)
        UserProvider.register(self)
        FavoriteProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance, building it on first use

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
        logger.debug("DI container built")
    return _container


def reset_container() -> None:
    """
    Drop the global container.

    Called after the MongoDB client is closed so the next request rebuilds
    repositories against a fresh connection instead of the closed one.
    """
    global _container
    _container = None
