# Standard library imports
from typing import Any, Callable, Dict, Hashable


class BaseContainer:
    """
    Minimal dependency injection container.
    
    Singletons are stored instances; factories build a fresh instance on
    every ``get``. Keys are usually the interface or use case class, or a
    string for infrastructure objects such as collections.
    """
    
    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}
    
    def register_singleton(self, key: Hashable, instance: Any) -> None:
        """Register a shared instance under ``key``"""
        self._factories.pop(key, None)
        self._singletons[key] = instance
    
    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        """Register a factory called on each ``get``"""
        self._singletons.pop(key, None)
        self._factories[key] = factory
    
    def get(self, key: Hashable) -> Any:
        """
        Resolve a dependency
        
        Raises:
            ValueError: If nothing is registered under ``key``
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", key)
        raise ValueError(f"No dependency registered for {name}")
    
    def has(self, key: Hashable) -> bool:
        return key in self._singletons or key in self._factories
