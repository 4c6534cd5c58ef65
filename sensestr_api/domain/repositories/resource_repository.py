from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, List, Optional, Tuple, TypeVar

from ..models.resource import Resource

ResourceT = TypeVar("ResourceT", bound=Resource)


@dataclass(frozen=True)
class ResourceFilter:
    """List filter: owner and parent session reference, both optional"""
    owner_id: Optional[str] = None
    session_id: Optional[str] = None


class ResourceRepository(ABC, Generic[ResourceT]):
    """Repository interface - defines contract for owned resource data access"""

    @abstractmethod
    async def find_page(
        self,
        resource_filter: ResourceFilter,
        skip: int,
        limit: int,
    ) -> Tuple[int, List[ResourceT]]:
        """Find one page of resources matching the filter, with the total match count"""
        pass

    @abstractmethod
    async def find_by_id(self, resource_id: str) -> Optional[ResourceT]:
        """Find resource by ID"""
        pass

    @abstractmethod
    async def insert(self, resource: ResourceT) -> ResourceT:
        """Insert a new resource and return it with its assigned ID"""
        pass

    @abstractmethod
    async def update(self, resource: ResourceT) -> bool:
        """Persist the mutable fields of an existing resource. False if it no longer exists"""
        pass

    @abstractmethod
    async def delete(self, resource_id: str) -> bool:
        """Delete resource by ID. False if it did not exist"""
        pass
