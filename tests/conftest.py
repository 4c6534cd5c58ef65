"""
Shared pytest fixtures for sensestr-api tests.
"""
import dataclasses
import os
from typing import Dict, List, Optional, Tuple
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId

from sensestr_api.domain.models.identity import Identity
from sensestr_api.domain.models.resource import Resource
from sensestr_api.domain.repositories.resource_repository import ResourceFilter, ResourceRepository
from sensestr_api.domain.services.event_publisher import EventPublisher


class InMemoryResourceRepository(ResourceRepository):
    """Dict-backed repository keeping insertion order, like an unsorted Mongo find."""

    def __init__(self) -> None:
        self.documents: Dict[str, Resource] = {}

    async def find_page(self, resource_filter: ResourceFilter, skip: int, limit: int) -> Tuple[int, List[Resource]]:
        matches = [r for r in self.documents.values() if self._matches(r, resource_filter)]
        return len(matches), [dataclasses.replace(r) for r in matches[skip:skip + limit]]

    async def find_by_id(self, resource_id: str) -> Optional[Resource]:
        resource = self.documents.get(resource_id)
        return dataclasses.replace(resource) if resource is not None else None

    async def insert(self, resource: Resource) -> Resource:
        saved = dataclasses.replace(resource, id=str(ObjectId()))
        self.documents[saved.id] = saved
        return dataclasses.replace(saved)

    async def update(self, resource: Resource) -> bool:
        if resource.id not in self.documents:
            return False
        self.documents[resource.id] = dataclasses.replace(resource)
        return True

    async def delete(self, resource_id: str) -> bool:
        return self.documents.pop(resource_id, None) is not None

    @staticmethod
    def _matches(resource: Resource, resource_filter: ResourceFilter) -> bool:
        if resource_filter.owner_id and resource.owner_id != resource_filter.owner_id:
            return False
        if resource_filter.session_id:
            if hasattr(resource, "sessions"):
                return resource_filter.session_id in resource.sessions
            if hasattr(resource, "session_id"):
                return resource.session_id == resource_filter.session_id
        return True


class RecordingEventPublisher(EventPublisher):
    """Collects published events instead of sending them."""

    def __init__(self) -> None:
        self.events: List[Tuple[str, Resource]] = []

    async def publish(self, event_name: str, resource: Resource) -> None:
        self.events.append((event_name, dataclasses.replace(resource)))

    def names(self) -> List[str]:
        return [name for name, _ in self.events]


@pytest.fixture
def memory_repository():
    return InMemoryResourceRepository()


@pytest.fixture
def event_publisher():
    return RecordingEventPublisher()


@pytest.fixture
def user_identity():
    """Human caller u1 with no scopes."""
    return Identity(user_id="u1", is_machine=False, scopes=frozenset())


@pytest.fixture
def other_user_identity():
    return Identity(user_id="u2", is_machine=False, scopes=frozenset())


@pytest.fixture
def machine_identity():
    """Service principal allowed to impersonate users."""
    return Identity(
        user_id="svc@clients",
        is_machine=True,
        scopes=frozenset({"impersonate_user"}),
    )


@pytest.fixture
def unscoped_machine_identity():
    return Identity(user_id="svc@clients", is_machine=True, scopes=frozenset())


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_sensestr",
        "MONGO_STARTUP_CHECK": "false",
        "AUTH_SHARED_SECRET": "test_secret_key_for_testing_only",
        "AUTH_AUDIENCE": "https://api.test.local",
        "AUTH_ISSUER": "https://issuer.test.local/",
        "EVENT_API_BASE": "",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_startup_check = False
    mock.enabled_resources = ["devices", "sessions", "viewers"]
    mock.event_resources = ["viewers"]
    mock.auth_jwks_uri = "https://issuer.test.local/.well-known/jwks.json"
    mock.auth_audience = "https://api.test.local"
    mock.auth_issuer = "https://issuer.test.local/"
    mock.auth_algorithms = ["RS256"]
    mock.auth_shared_secret = "test_jwt_secret"
    mock.auth_token_url = "https://issuer.test.local/oauth/token"
    mock.client_id = "client-id"
    mock.client_secret = "client-secret"
    mock.event_api_base = "https://events.test.local"
    mock.event_api_socket_path = "/events"
    mock.event_token_refresh_seconds = 3600.0
    mock.event_reconnect_seconds = 0.01

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("sensestr_api.core.config.get_settings", return_value=mock), patch(
        "sensestr_api.core.security.get_settings", return_value=mock
    ), patch(
        "sensestr_api.infrastructure.notifications.event_api_client.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def memory_repositories():
    """One in-memory repository per collection name."""
    return {name: InMemoryResourceRepository() for name in ("devices", "sessions", "viewers")}
