# Standard library imports
import logging
from typing import Any, Dict, Generic, Optional, Type

# Local application imports
from ....core.exceptions import ValidationError
from ....domain.models.identity import Identity
from ....domain.policies.ownership_policy import resolve_owner
from ....domain.repositories.resource_repository import ResourceRepository, ResourceT
from ....domain.services.event_publisher import EventPublisher
from ....utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)


class CreateResourceUseCase(Generic[ResourceT]):
    """Use case for creating a new resource"""

    def __init__(
        self,
        repository: ResourceRepository[ResourceT],
        resource_type: Type[ResourceT],
        event_publisher: Optional[EventPublisher] = None,
    ) -> None:
        self.repository = repository
        self.resource_type = resource_type
        self.event_publisher = event_publisher

    async def execute(
        self,
        fields: Dict[str, Any],
        identity: Identity,
        requested_owner_id: Optional[str] = None,
    ) -> ResourceT:
        """
        Create a new resource owned by the caller or, with impersonation, another user

        Args:
            fields: Resource-specific field values from the payload
            identity: Verified caller identity
            requested_owner_id: ownerId from the payload, if any

        Returns:
            The created resource, with its assigned ID

        Raises:
            UnauthorizedError: Owner set to another user without impersonation rights
            BadRequestError: Machine principal naming itself as owner
            ValidationError: If the resource fails domain validation
        """
        resource_name = self.resource_type.resource_name
        owner_id = resolve_owner(identity, resource_name, requested_owner_id)

        now = utc_now()
        try:
            new_resource = self.resource_type(
                id=None,
                created_date=now,
                updated_date=now,
                creator_id=identity.user_id,
                updator_id=identity.user_id,
                owner_id=owner_id,
                **{name: fields.get(name) for name in self.resource_type.payload_fields() if name in fields},
            )
        except ValueError as exception:
            raise ValidationError(str(exception))

        saved_resource = await self.repository.insert(new_resource)
        logger.info(f"Created {resource_name} {saved_resource.id} for owner {owner_id} by {identity.user_id}")

        if self.event_publisher is not None:
            await self.event_publisher.publish(f"{resource_name} created", saved_resource)

        return saved_resource
