# Standard library imports
from typing import Any, Dict, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.constants import DeviceFields
from ...domain.models.device import Device
from ...domain.repositories.device_repository import DeviceRepository
from .mongo_connection import get_device_collection
from .mongo_resource_repository import MongoResourceRepository, to_object_id


class MongoDeviceRepository(MongoResourceRepository[Device], DeviceRepository):
    """MongoDB implementation of DeviceRepository"""

    resource_type = Device
    session_ref_field = DeviceFields.SESSIONS

    def __init__(self, device_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        super().__init__(device_collection if device_collection is not None else get_device_collection())

    def _fields_from_document(self, document: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "name": document.get(DeviceFields.NAME, ""),
            "description": document.get(DeviceFields.DESCRIPTION),
            "sessions": [str(session_id) for session_id in document.get(DeviceFields.SESSIONS) or []],
        }

    def _fields_to_document(self, device: Device) -> Dict[str, Any]:
        return {
            DeviceFields.NAME: device.name,
            DeviceFields.DESCRIPTION: device.description,
            DeviceFields.SESSIONS: [to_object_id(session_id) for session_id in device.sessions],
        }
