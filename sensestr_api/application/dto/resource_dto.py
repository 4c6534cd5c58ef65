from dataclasses import asdict
from datetime import datetime
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from ...domain.models.resource import Resource

OBJECT_ID_PATTERN = r"^[0-9a-fA-F]{24}$"

ObjectIdStr = Annotated[str, StringConstraints(pattern=OBJECT_ID_PATTERN)]
OwnerIdStr = Annotated[str, StringConstraints(min_length=1)]


class CamelModel(BaseModel):
    """Base DTO: camelCase on the wire, snake_case in Python"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResourcePayload(CamelModel):
    """Base DTO for create/update request bodies"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    owner_id: Optional[OwnerIdStr] = None

    def resource_fields(self) -> Dict[str, Any]:
        """Resource-specific values, every field present (absent ones at their default)"""
        return self.model_dump(exclude={"owner_id"})


class ResourceResponse(CamelModel):
    """Base DTO for a resource in responses"""
    id: str
    created_date: datetime
    updated_date: datetime
    creator_id: str
    updator_id: str
    owner_id: str

    @classmethod
    def from_domain(cls, resource: Resource) -> "ResourceResponse":
        return cls.model_validate(asdict(resource))


class ListMetadata(BaseModel):
    """DTO for list pagination metadata"""
    count: int
    skip: int
    limit: int
    total: int


class DevicePayload(ResourcePayload):
    """DTO for device create/update request"""
    name: str = Field(min_length=1, max_length=256)
    description: Optional[str] = Field(default=None, max_length=2000)
    sessions: List[ObjectIdStr] = Field(default_factory=list)


class DeviceResponse(ResourceResponse):
    """DTO for device response"""
    name: str
    description: Optional[str] = None
    sessions: List[str] = Field(default_factory=list)


class DeviceListResponse(BaseModel):
    """DTO for device list response"""
    metadata: ListMetadata
    results: List[DeviceResponse] = Field(default_factory=list)


class SessionPayload(ResourcePayload):
    """DTO for session create/update request"""
    name: str = Field(min_length=1, max_length=256)
    description: Optional[str] = Field(default=None, max_length=2000)


class SessionResponse(ResourceResponse):
    """DTO for session response"""
    name: str
    description: Optional[str] = None


class SessionListResponse(BaseModel):
    """DTO for session list response"""
    metadata: ListMetadata
    results: List[SessionResponse] = Field(default_factory=list)


class ViewerPayload(ResourcePayload):
    """DTO for viewer create/update request"""
    session_id: Optional[ObjectIdStr] = None


class ViewerResponse(ResourceResponse):
    """DTO for viewer response"""
    session_id: Optional[str] = None


class ViewerListResponse(BaseModel):
    """DTO for viewer list response"""
    metadata: ListMetadata
    results: List[ViewerResponse] = Field(default_factory=list)
