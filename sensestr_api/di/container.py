# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    EventsProvider,
    RepositoryProvider,
    ResourceProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Token verification (AuthProvider)
    4. Event API client (EventsProvider)
    5. Resource use cases (ResourceProvider) - depend on repositories and events
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → auth/events → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        AuthProvider.register(self)
        EventsProvider.register(self)
        ResourceProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
