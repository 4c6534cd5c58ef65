# Standard library imports
from typing import Generic, Type

# Local application imports
from ....core.exceptions import NotFoundError
from ....domain.repositories.resource_repository import ResourceRepository, ResourceT


class GetResourceUseCase(Generic[ResourceT]):
    """Use case for getting a resource by ID"""

    def __init__(
        self,
        repository: ResourceRepository[ResourceT],
        resource_type: Type[ResourceT],
    ) -> None:
        self.repository = repository
        self.resource_type = resource_type

    async def execute(self, resource_id: str) -> ResourceT:
        """
        Get a resource by ID

        Raises:
            NotFoundError: If no resource has this ID
        """
        resource = await self.repository.find_by_id(resource_id)
        if resource is None:
            raise NotFoundError(
                f"{self.resource_type.resource_name.capitalize()} with id {resource_id} not found."
            )
        return resource
