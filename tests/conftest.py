"""
Shared pytest fixtures for marketplace tests.
"""
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_marketplace_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 1440
    mock.cors_origins = ["http://localhost:5173"]
    mock.uploads_dir = "uploads"
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("marketplace_api.core.config.get_settings", return_value=mock), patch(
        "marketplace_api.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock()


@pytest.fixture
def mock_product_repo():
    """Mock ProductRepository with async methods."""
    return AsyncMock()


@pytest.fixture
def mock_donation_repo():
    """Mock DonationRepository with async methods."""
    return AsyncMock()


@pytest.fixture
def user_with_password():
    """Stored user whose password is 'validpass123'."""
    from marketplace_api.core.security import hash_password
    from tests.factories import make_user

    return make_user(hashed_password=hash_password("validpass123"))
