# Standard library imports
import dataclasses
import logging
from typing import Any, Dict, Generic, List, Optional, Tuple, Type

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import StoreUnavailableError
from ...domain.constants import ResourceFields
from ...domain.repositories.resource_repository import ResourceFilter, ResourceT
from ...utils.datetime_utils import ensure_utc

logger = logging.getLogger(__name__)


def to_object_id(value: Optional[str]) -> Optional[ObjectId]:
    """Parse a 24-hex string into an ObjectId, None when it is not one"""
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class MongoResourceRepository(Generic[ResourceT]):
    """
    MongoDB implementation shared by every resource repository.

    Documents are keyed by ObjectId `_id` and carry the lifecycle fields
    under their camelCase names. Subclasses map their resource-specific
    fields and name the field holding session references, if any.
    """

    resource_type: Type[ResourceT]
    session_ref_field: Optional[str] = None

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self.collection = collection

    async def find_page(
        self,
        resource_filter: ResourceFilter,
        skip: int,
        limit: int,
    ) -> Tuple[int, List[ResourceT]]:
        """Find one page of resources matching the filter, with the total match count"""
        query = self._build_query(resource_filter)
        try:
            total = await self.collection.count_documents(query)
            cursor = self.collection.find(query).skip(max(0, int(skip))).limit(max(1, int(limit)))
            items = []
            async for document in cursor:
                items.append(self._document_to_resource(document))
            return total, items
        except PyMongoError as e:
            raise self._store_error("listing", e)

    async def find_by_id(self, resource_id: str) -> Optional[ResourceT]:
        """Find resource by ID"""
        object_id = to_object_id(resource_id)
        if object_id is None:
            return None

        try:
            document = await self.collection.find_one({ResourceFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise self._store_error("finding", e)

        if document is None:
            return None
        return self._document_to_resource(document)

    async def insert(self, resource: ResourceT) -> ResourceT:
        """Insert a new resource and return it with its assigned ID"""
        document = self._resource_to_document(resource)
        document[ResourceFields.MONGO_ID] = ObjectId()
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as e:
            raise self._store_error("inserting", e)
        return dataclasses.replace(resource, id=str(result.inserted_id))

    async def update(self, resource: ResourceT) -> bool:
        """Persist the mutable fields of an existing resource"""
        object_id = to_object_id(resource.id)
        if object_id is None:
            return False

        document = self._resource_to_document(resource)
        # Immutable after creation
        for immutable in (ResourceFields.CREATED_DATE, ResourceFields.CREATOR_ID):
            document.pop(immutable, None)

        try:
            update_result = await self.collection.update_one(
                {ResourceFields.MONGO_ID: object_id},
                {"$set": document},
            )
        except PyMongoError as e:
            raise self._store_error("updating", e)
        return update_result.matched_count > 0

    async def delete(self, resource_id: str) -> bool:
        """Delete resource by ID"""
        object_id = to_object_id(resource_id)
        if object_id is None:
            return False

        try:
            delete_result = await self.collection.delete_one({ResourceFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise self._store_error("deleting", e)
        return delete_result.deleted_count > 0

    def _build_query(self, resource_filter: ResourceFilter) -> Dict[str, Any]:
        query: Dict[str, Any] = {}
        if resource_filter.owner_id:
            query[ResourceFields.OWNER_ID] = resource_filter.owner_id
        if resource_filter.session_id and self.session_ref_field:
            # An equality match on an array field matches any element
            query[self.session_ref_field] = to_object_id(resource_filter.session_id)
        return query

    def _store_error(self, action: str, error: PyMongoError) -> StoreUnavailableError:
        name = self.resource_type.resource_name
        logger.error(f"MongoDB error while {action} {name}: {error}")
        return StoreUnavailableError(f"Error {action} {name}: {str(error)}")

    def _document_to_resource(self, document: Dict[str, Any]) -> ResourceT:
        """Convert MongoDB document to domain model"""
        if not document:
            raise ValueError("Invalid document: document is None or empty")

        return self.resource_type(
            id=str(document[ResourceFields.MONGO_ID]),
            created_date=ensure_utc(document.get(ResourceFields.CREATED_DATE)),
            updated_date=ensure_utc(document.get(ResourceFields.UPDATED_DATE)),
            creator_id=document.get(ResourceFields.CREATOR_ID, ""),
            updator_id=document.get(ResourceFields.UPDATOR_ID, ""),
            owner_id=document.get(ResourceFields.OWNER_ID, ""),
            **self._fields_from_document(document),
        )

    def _resource_to_document(self, resource: ResourceT) -> Dict[str, Any]:
        """Convert domain model to MongoDB document (without _id)"""
        document: Dict[str, Any] = {
            ResourceFields.CREATED_DATE: resource.created_date,
            ResourceFields.UPDATED_DATE: resource.updated_date,
            ResourceFields.CREATOR_ID: resource.creator_id,
            ResourceFields.UPDATOR_ID: resource.updator_id,
            ResourceFields.OWNER_ID: resource.owner_id,
        }
        document.update(self._fields_to_document(resource))
        return document

    def _fields_from_document(self, document: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

    def _fields_to_document(self, resource: ResourceT) -> Dict[str, Any]:
        raise NotImplementedError
