from .resource_repository import ResourceFilter, ResourceRepository
from .device_repository import DeviceRepository
from .session_repository import SessionRepository
from .viewer_repository import ViewerRepository

__all__ = [
    "ResourceFilter",
    "ResourceRepository",
    "DeviceRepository",
    "SessionRepository",
    "ViewerRepository",
]
