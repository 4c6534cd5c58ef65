from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .events_provider import EventsProvider
from .resource_provider import ResourceProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "AuthProvider",
    "EventsProvider",
    "ResourceProvider",
]
