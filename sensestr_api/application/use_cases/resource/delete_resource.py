# Standard library imports
import logging
from typing import Generic, Optional, Type

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.models.identity import Identity
from ....domain.repositories.resource_repository import ResourceRepository, ResourceT
from ....domain.services.event_publisher import EventPublisher

logger = logging.getLogger(__name__)


class DeleteResourceUseCase(Generic[ResourceT]):
    """Use case for deleting a resource"""

    def __init__(
        self,
        repository: ResourceRepository[ResourceT],
        resource_type: Type[ResourceT],
        event_publisher: Optional[EventPublisher] = None,
    ) -> None:
        self.repository = repository
        self.resource_type = resource_type
        self.event_publisher = event_publisher

    async def execute(self, resource_id: str, identity: Identity) -> ResourceT:
        """
        Delete a resource

        Returns:
            The resource as it was just before deletion

        Raises:
            NotFoundError: If the resource does not exist
        """
        resource_name = self.resource_type.resource_name
        not_found = NotFoundError(f"{resource_name.capitalize()} with id {resource_id} not found.")

        resource = await self.repository.find_by_id(resource_id)
        if resource is None:
            raise not_found

        if not await self.repository.delete(resource_id):
            raise not_found
        logger.info(f"Deleted {resource_name} {resource_id} by {identity.user_id}")

        if self.event_publisher is not None:
            await self.event_publisher.publish(f"{resource_name} deleted", resource)

        return resource
