from .resource_dto import (
    OBJECT_ID_PATTERN,
    ListMetadata,
    ResourcePayload,
    ResourceResponse,
    DevicePayload,
    DeviceResponse,
    DeviceListResponse,
    SessionPayload,
    SessionResponse,
    SessionListResponse,
    ViewerPayload,
    ViewerResponse,
    ViewerListResponse,
)

__all__ = [
    "OBJECT_ID_PATTERN",
    "ListMetadata",
    "ResourcePayload",
    "ResourceResponse",
    "DevicePayload",
    "DeviceResponse",
    "DeviceListResponse",
    "SessionPayload",
    "SessionResponse",
    "SessionListResponse",
    "ViewerPayload",
    "ViewerResponse",
    "ViewerListResponse",
]
