# Standard library imports
import dataclasses
import logging
from typing import Any, Dict, Generic, Optional, Type

# Local application imports
from ....core.exceptions import NotFoundError, ValidationError
from ....domain.models.identity import Identity
from ....domain.policies.ownership_policy import resolve_owner
from ....domain.repositories.resource_repository import ResourceRepository, ResourceT
from ....domain.services.event_publisher import EventPublisher
from ....utils.datetime_utils import next_timestamp

logger = logging.getLogger(__name__)


class UpdateResourceUseCase(Generic[ResourceT]):
    """
    Use case for updating an existing resource.

    Resource-specific fields are replaced wholesale: a field missing from the
    payload is cleared to its default. id, createdDate and creatorId never
    change.
    """

    def __init__(
        self,
        repository: ResourceRepository[ResourceT],
        resource_type: Type[ResourceT],
        event_publisher: Optional[EventPublisher] = None,
    ) -> None:
        self.repository = repository
        self.resource_type = resource_type
        self.event_publisher = event_publisher

    def _cleared_value(self, name: str) -> Any:
        field = next(f for f in dataclasses.fields(self.resource_type) if f.name == name)
        if field.default_factory is not dataclasses.MISSING:
            return field.default_factory()
        if field.default is not dataclasses.MISSING:
            return field.default
        return None

    async def execute(
        self,
        resource_id: str,
        fields: Dict[str, Any],
        identity: Identity,
        requested_owner_id: Optional[str] = None,
    ) -> ResourceT:
        """
        Update a resource

        Args:
            resource_id: ID of the resource
            fields: Resource-specific field values from the payload
            identity: Verified caller identity
            requested_owner_id: ownerId from the payload, if any

        Returns:
            The existing resource merged with the update

        Raises:
            NotFoundError: If the resource does not exist
            UnauthorizedError: Owner change to another user without impersonation rights
            BadRequestError: Machine principal naming itself as owner
            ValidationError: If the result fails domain validation
        """
        resource_name = self.resource_type.resource_name
        not_found = NotFoundError(f"{resource_name.capitalize()} with id {resource_id} not found.")

        existing = await self.repository.find_by_id(resource_id)
        if existing is None:
            raise not_found

        owner_id = resolve_owner(
            identity,
            resource_name,
            requested_owner_id,
            current_owner_id=existing.owner_id,
        )

        replacement = {
            name: fields[name] if name in fields else self._cleared_value(name)
            for name in self.resource_type.payload_fields()
        }
        try:
            updated = dataclasses.replace(
                existing,
                updated_date=next_timestamp(existing.updated_date),
                updator_id=identity.user_id,
                owner_id=owner_id,
                **replacement,
            )
        except ValueError as exception:
            raise ValidationError(str(exception))

        if not await self.repository.update(updated):
            # Deleted between the read and the write
            raise not_found
        logger.info(f"Updated {resource_name} {resource_id} by {identity.user_id}")

        if self.event_publisher is not None:
            await self.event_publisher.publish(f"{resource_name} updated", updated)

        return updated
