# Local application imports
from ...application.dto.resource_dto import ViewerListResponse, ViewerPayload, ViewerResponse
from ...domain.models.viewer import Viewer
from .resource_routes import create_resource_router


# GET /viewers accepts sessionId: viewers watching that session
router = create_resource_router(
    resource_type=Viewer,
    payload_model=ViewerPayload,
    response_model=ViewerResponse,
    list_response_model=ViewerListResponse,
    filter_by_session=True,
)
