# Local application imports
from ...application.dto.resource_dto import DeviceListResponse, DevicePayload, DeviceResponse
from ...domain.models.device import Device
from .resource_routes import create_resource_router


# GET /devices accepts sessionId: devices referencing that session
router = create_resource_router(
    resource_type=Device,
    payload_model=DevicePayload,
    response_model=DeviceResponse,
    list_response_model=DeviceListResponse,
    filter_by_session=True,
)
