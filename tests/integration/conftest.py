"""
Fixtures for API integration tests.
Uses TestClient with mocked use cases (no real DB); bearer tokens are real JWTs.
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from marketplace_api.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from marketplace_api.application.use_cases.auth.login_user import LoginUserUseCase
from marketplace_api.application.use_cases.auth.register_user import RegisterUserUseCase
from marketplace_api.application.use_cases.favorite.add_favorite import AddFavoriteUseCase
from marketplace_api.application.use_cases.favorite.list_favorites import ListFavoritesUseCase
from marketplace_api.application.use_cases.favorite.remove_favorite import RemoveFavoriteUseCase
from marketplace_api.application.use_cases.user.delete_user import DeleteUserUseCase
from marketplace_api.application.use_cases.user.get_user import GetUserUseCase
from marketplace_api.application.use_cases.user.list_users import ListUsersUseCase
from marketplace_api.application.use_cases.user.update_user import UpdateUserUseCase

MOCKED_USE_CASES = [
    RegisterUserUseCase,
    LoginUserUseCase,
    ListUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
    ListFavoritesUseCase,
    AddFavoriteUseCase,
    RemoveFavoriteUseCase,
]


@pytest.fixture
def use_cases():
    """One AsyncMock per use case class, keyed by class."""
    return {cls: AsyncMock(spec=cls) for cls in MOCKED_USE_CASES}


@pytest.fixture
def mock_container(use_cases):
    registry = dict(use_cases)
    registry[GetCurrentUserUseCase] = GetCurrentUserUseCase()
    container = MagicMock()
    container.get.side_effect = lambda cls: registry.get(cls, None)
    return container


@pytest.fixture
def client(mock_container, mock_settings):
    """Create test client with mocked container."""
    from marketplace_api.main import app

    with patch("marketplace_api.api.v1.users_controller.get_container", return_value=mock_container), patch(
        "marketplace_api.api.v1.dependencies.get_container", return_value=mock_container
    ):
        with TestClient(app) as c:
            yield c


@pytest.fixture
def auth_headers(mock_settings):
    from marketplace_api.core.security import create_access_token

    token = create_access_token("usr-1", "ana@example.com")
    return {"Authorization": f"Bearer {token}"}
