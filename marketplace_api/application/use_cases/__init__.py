from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
)
from .user import (
    ListUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)
from .favorite import (
    ListFavoritesUseCase,
    AddFavoriteUseCase,
    RemoveFavoriteUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "ListUsersUseCase",
    "GetUserUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "ListFavoritesUseCase",
    "AddFavoriteUseCase",
    "RemoveFavoriteUseCase",
]
