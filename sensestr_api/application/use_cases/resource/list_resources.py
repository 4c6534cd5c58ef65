# Standard library imports
from dataclasses import dataclass, field
from typing import Generic, List

# Local application imports
from ....core.exceptions import ValidationError
from ....domain.repositories.resource_repository import ResourceFilter, ResourceRepository, ResourceT

DEFAULT_LIMIT = 25
MAX_LIMIT = 100


@dataclass
class ResourcePage(Generic[ResourceT]):
    """One page of a resource listing"""
    skip: int
    limit: int
    total: int
    items: List[ResourceT] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.items)


class ListResourcesUseCase(Generic[ResourceT]):
    """Use case for listing one page of resources"""

    def __init__(self, repository: ResourceRepository[ResourceT]) -> None:
        self.repository = repository

    async def execute(
        self,
        resource_filter: ResourceFilter,
        skip: int = 0,
        limit: int = DEFAULT_LIMIT,
    ) -> ResourcePage[ResourceT]:
        """
        List resources matching the filter, in store order

        Args:
            resource_filter: Optional owner and session filters
            skip: Number of matches to skip (>= 0)
            limit: Page size (1-100)

        Returns:
            ResourcePage with the page items and the total match count

        Raises:
            ValidationError: If skip or limit is out of range
        """
        if skip < 0:
            raise ValidationError("skip must be greater than or equal to 0")
        if not 1 <= limit <= MAX_LIMIT:
            raise ValidationError(f"limit must be between 1 and {MAX_LIMIT}")

        total, items = await self.repository.find_page(resource_filter, skip=skip, limit=limit)
        return ResourcePage(skip=skip, limit=limit, total=total, items=items)
