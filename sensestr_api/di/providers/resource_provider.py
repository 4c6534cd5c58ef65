from typing import TYPE_CHECKING, Optional, Type

from ...core.config import get_settings
from ...domain.models.device import Device
from ...domain.models.resource import Resource
from ...domain.models.session import Session
from ...domain.models.viewer import Viewer
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.resource_repository import ResourceRepository
from ...domain.repositories.session_repository import SessionRepository
from ...domain.repositories.viewer_repository import ViewerRepository
from ...domain.services.event_publisher import EventPublisher
from ...application.use_cases.resource import (
    CreateResourceUseCase,
    DeleteResourceUseCase,
    GetResourceUseCase,
    ListResourcesUseCase,
    UpdateResourceUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer

# (resource type, repository interface)
RESOURCE_BINDINGS = (
    (Device, DeviceRepository),
    (Session, SessionRepository),
    (Viewer, ViewerRepository),
)


class ResourceProvider:
    """
    Resource use case provider - registers lifecycle use cases for every resource.

    Use cases are keyed by (use case class, collection name), e.g.
    (CreateResourceUseCase, "viewers"). Only the collections listed in
    EVENT_RESOURCES get an event publisher.
    """

    @staticmethod
    def register(container: "BaseContainer") -> None:
        event_resources = set(get_settings().event_resources)
        for resource_type, repository_key in RESOURCE_BINDINGS:
            ResourceProvider._register_resource(
                container,
                resource_type,
                repository_key,
                notify=resource_type.collection_name in event_resources,
            )

    @staticmethod
    def _register_resource(
        container: "BaseContainer",
        resource_type: Type[Resource],
        repository_key: Type[ResourceRepository],
        notify: bool,
    ) -> None:
        name = resource_type.collection_name

        def publisher() -> Optional[EventPublisher]:
            return container.get(EventPublisher) if notify else None

        container.register_factory(
            (ListResourcesUseCase, name),
            lambda: ListResourcesUseCase(repository=container.get(repository_key)),
        )

        container.register_factory(
            (GetResourceUseCase, name),
            lambda: GetResourceUseCase(
                repository=container.get(repository_key),
                resource_type=resource_type,
            ),
        )

        container.register_factory(
            (CreateResourceUseCase, name),
            lambda: CreateResourceUseCase(
                repository=container.get(repository_key),
                resource_type=resource_type,
                event_publisher=publisher(),
            ),
        )

        container.register_factory(
            (UpdateResourceUseCase, name),
            lambda: UpdateResourceUseCase(
                repository=container.get(repository_key),
                resource_type=resource_type,
                event_publisher=publisher(),
            ),
        )

        container.register_factory(
            (DeleteResourceUseCase, name),
            lambda: DeleteResourceUseCase(
                repository=container.get(repository_key),
                resource_type=resource_type,
                event_publisher=publisher(),
            ),
        )
