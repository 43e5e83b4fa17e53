"""
Service container for shelfctl.

Holds one dependency-injector provider per collaborator interface
(settings, logger, environment, process runner, service manager).
bootstrap() fills it; resolve_or_default() reads from it.
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """
    Process-wide registry of shelfctl collaborators.

    Usage:
        container = get_container()
        container.register_singleton(ILogger, factory=lambda: ShelfLogger())
        logger = container.resolve(ILogger)
    """

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        """Return the shared container, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the shared container so the next bootstrap starts empty."""
        cls._instance = None

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Bind interface to one shared object.

        Args:
            interface: Key the object is resolved by
            implementation: Ready-made object (e.g. loaded ShelfSettings)
            factory: Builds the object on first resolve

        Raises:
            ValueError: If neither implementation nor factory is given
        """
        if implementation is not None:
            self._providers[interface] = providers.Object(implementation)
        elif factory is not None:
            self._providers[interface] = providers.Singleton(factory)
        else:
            raise ValueError(f"No implementation or factory given for {interface.__name__}")

    def register_class(self, interface: type[T], implementation: type[T]) -> None:
        """Bind interface to a lazily constructed instance of implementation."""
        self._providers[interface] = providers.Singleton(implementation)

    def resolve(self, interface: type[T]) -> T:
        """
        Return the object bound to interface.

        Raises:
            KeyError: If bootstrap() has not registered interface
        """
        provider = self._providers.get(interface)
        if provider is None:
            raise KeyError(f"Nothing registered for {interface.__name__}")
        return provider()

    def try_resolve(self, interface: type[T]) -> T | None:
        """Like resolve(), but None when interface is unregistered."""
        provider = self._providers.get(interface)
        return provider() if provider is not None else None


def get_container() -> ServiceContainer:
    """Return the shared ServiceContainer."""
    return ServiceContainer.get_instance()
