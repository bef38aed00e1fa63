# Standard library imports
import logging
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse, TokenClaims
from ...application.dto.user_dto import (
    UserResponse,
    UserDetailResponse,
    UserUpdateRequest,
    DeleteUserResponse,
)
from ...application.dto.favorite_dto import FavoriteAddRequest, FavoritesResponse, ProductResponse
from ...application.exceptions import (
    AuthenticationError,
    InvalidTokenError,
    MarketplaceError,
    NotFoundError,
)
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.update_user import UpdateUserUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase
from ...application.use_cases.favorite.list_favorites import ListFavoritesUseCase
from ...application.use_cases.favorite.add_favorite import AddFavoriteUseCase
from ...application.use_cases.favorite.remove_favorite import RemoveFavoriteUseCase
from ...di.container import get_container
from .dependencies import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


def _to_http_exception(
    exception: Exception,
    unexpected_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
) -> HTTPException:
    """
    Map a use case error to an HTTPException.

    Storage failures keep their original message and use ``unexpected_status``.
    """
    if isinstance(exception, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exception, InvalidTokenError):
        status_code = status.HTTP_403_FORBIDDEN
    elif isinstance(exception, AuthenticationError):
        status_code = status.HTTP_401_UNAUTHORIZED
    elif isinstance(exception, (MarketplaceError, ValueError)):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        logger.error(f"Unexpected error handling users request: {exception}", exc_info=exception)
        status_code = unexpected_status
    return HTTPException(status_code=status_code, detail=str(exception))


@router.get("", response_model=List[UserResponse])
async def list_users(
    current_user: TokenClaims = Depends(get_current_user),
) -> List[UserResponse]:
    """
    List all users (password hashes are never included)

    Args:
        current_user: Caller's token claims (from dependency)
    """
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)

    try:
        return await list_users_use_case.execute()
    except Exception as exception:
        raise _to_http_exception(exception)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> AuthResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        AuthResponse with the created user and a bearer token
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    try:
        return await register_use_case.execute(request)
    except Exception as exception:
        raise _to_http_exception(exception, unexpected_status=status.HTTP_400_BAD_REQUEST)


@router.post("/login", response_model=AuthResponse)
async def login_user(request: UserLoginRequest) -> AuthResponse:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        AuthResponse with the user and a bearer token
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    try:
        return await login_use_case.execute(request)
    except Exception as exception:
        raise _to_http_exception(exception)


@router.get("/{user_id}", response_model=UserDetailResponse)
async def get_user(user_id: str) -> UserDetailResponse:
    """
    Get a public user profile by application ID or MongoDB _id

    Returns:
        UserDetailResponse including donacionesCount
    """
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)

    try:
        return await get_user_use_case.execute(user_id)
    except Exception as exception:
        raise _to_http_exception(exception)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(user_id: str, request: Optional[UserUpdateRequest] = None) -> UserResponse:
    """
    Partially update a user; only fields present in the body are changed.
    A request without a body leaves the user unchanged.
    """
    container = get_container()
    update_user_use_case = container.get(UpdateUserUseCase)

    try:
        return await update_user_use_case.execute(user_id, request or UserUpdateRequest())
    except Exception as exception:
        raise _to_http_exception(exception, unexpected_status=status.HTTP_400_BAD_REQUEST)


@router.delete("/{user_id}", response_model=DeleteUserResponse)
async def delete_user(user_id: str) -> DeleteUserResponse:
    """
    Delete a user together with its products and donations

    Returns:
        DeleteUserResponse with the cascade summary
    """
    container = get_container()
    delete_user_use_case = container.get(DeleteUserUseCase)

    try:
        return await delete_user_use_case.execute(user_id)
    except Exception as exception:
        raise _to_http_exception(exception)


@router.get("/{user_id}/favoritos", response_model=List[ProductResponse])
async def list_favorites(
    user_id: str,
    current_user: TokenClaims = Depends(get_current_user),
) -> List[ProductResponse]:
    """
    List a user's favorite products
    """
    container = get_container()
    list_favorites_use_case = container.get(ListFavoritesUseCase)

    try:
        return await list_favorites_use_case.execute(user_id)
    except Exception as exception:
        raise _to_http_exception(exception)


@router.post("/{user_id}/favoritos", response_model=FavoritesResponse)
async def add_favorite(
    user_id: str,
    request: FavoriteAddRequest,
    current_user: TokenClaims = Depends(get_current_user),
) -> FavoritesResponse:
    """
    Add a product to a user's favorites

    Args:
        user_id: Application ID of the user
        request: Body with productId (MongoDB _id of the product)
    """
    container = get_container()
    add_favorite_use_case = container.get(AddFavoriteUseCase)

    try:
        return await add_favorite_use_case.execute(user_id, request.product_id)
    except Exception as exception:
        raise _to_http_exception(exception)


@router.delete("/{user_id}/favoritos/{product_id}", response_model=FavoritesResponse)
async def remove_favorite(
    user_id: str,
    product_id: str,
    current_user: TokenClaims = Depends(get_current_user),
) -> FavoritesResponse:
    """
    Remove a product from a user's favorites; removing an absent product succeeds
    """
    container = get_container()
    remove_favorite_use_case = container.get(RemoveFavoriteUseCase)

    try:
        return await remove_favorite_use_case.execute(user_id, product_id)
    except Exception as exception:
        raise _to_http_exception(exception)
