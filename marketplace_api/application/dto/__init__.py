from .auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse, TokenClaims
from .user_dto import (
    UserResponse,
    UserDetailResponse,
    UserUpdateRequest,
    DeletionSummary,
    DeleteUserResponse,
)
from .favorite_dto import FavoriteAddRequest, FavoritesResponse, ProductResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "AuthResponse",
    "TokenClaims",
    "UserResponse",
    "UserDetailResponse",
    "UserUpdateRequest",
    "DeletionSummary",
    "DeleteUserResponse",
    "FavoriteAddRequest",
    "FavoritesResponse",
    "ProductResponse",
]
