"""
Smoke test - verifies the package imports and the application wires its routes.
Run: pytest tests/test_smoke.py -v
"""


def test_import_app():
    """Verify marketplace_api package can be imported."""
    from marketplace_api.core.config import get_settings

    settings = get_settings()
    assert settings is not None
    assert hasattr(settings, "mongo_uri")
    assert settings.access_token_expire_minutes > 0


def test_application_registers_user_routes(mock_settings):
    """create_application mounts the users router and the health check."""
    from marketplace_api.main import create_application

    paths = {route.path for route in create_application().routes}
    assert "/api/health" in paths
    assert "/api/users/register" in paths
    assert "/api/users/login" in paths
    assert "/api/users/{user_id}/favoritos" in paths
    assert "/api/users/{user_id}/favoritos/{product_id}" in paths
