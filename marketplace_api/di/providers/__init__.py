from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .user_provider import UserProvider
from .favorite_provider import FavoriteProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "AuthProvider",
    "UserProvider",
    "FavoriteProvider",
]
