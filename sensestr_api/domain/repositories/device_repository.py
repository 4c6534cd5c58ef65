from ..models.device import Device
from .resource_repository import ResourceRepository


class DeviceRepository(ResourceRepository[Device]):
    """Repository interface - defines contract for device data access"""
