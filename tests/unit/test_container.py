"""
Unit tests for the dependency injection container.
"""
import pytest

from marketplace_api.di.base_container import BaseContainer


class _Service:
    pass


def test_singleton_returns_same_instance():
    container = BaseContainer()
    service = _Service()
    container.register_singleton(_Service, service)
    assert container.get(_Service) is service
    assert container.has(_Service)


def test_factory_builds_new_instance_each_time():
    container = BaseContainer()
    container.register_factory(_Service, _Service)
    assert container.get(_Service) is not container.get(_Service)


def test_factory_replaces_singleton():
    container = BaseContainer()
    container.register_singleton(_Service, _Service())
    container.register_factory("service", lambda: "built")
    container.register_factory(_Service, lambda: "fresh")
    assert container.get(_Service) == "fresh"
    assert container.get("service") == "built"


def test_unknown_key_raises():
    with pytest.raises(ValueError, match="_Service"):
        BaseContainer().get(_Service)


def test_get_container_is_cached_until_reset():
    from unittest.mock import patch

    from marketplace_api.di import container as container_module

    container_module.reset_container()
    with patch.object(container_module.DIContainer, "setup") as setup:
        first = container_module.get_container()
        assert container_module.get_container() is first
        container_module.reset_container()
        assert container_module.get_container() is not first
        assert setup.call_count == 2
    container_module.reset_container()
