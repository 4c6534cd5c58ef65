# Standard library imports
from typing import Any, Callable, Dict, Hashable


class BaseContainer:
    """
    Minimal dependency registry.

    Keys are usually classes (interfaces or use cases); plain strings name
    infrastructure handles such as collections. Singletons are stored
    instances, factories build a new instance on every get().
    """

    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}

    def register_singleton(self, key: Hashable, instance: Any) -> None:
        self._singletons[key] = instance

    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        self._factories[key] = factory

    def has(self, key: Hashable) -> bool:
        return key in self._singletons or key in self._factories

    def get(self, key: Hashable) -> Any:
        """
        Resolve a dependency

        Raises:
            ValueError: If nothing is registered under key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        raise ValueError(f"No dependency registered for {key!r}")
