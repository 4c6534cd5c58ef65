# Local application imports
from ...application.dto.resource_dto import SessionListResponse, SessionPayload, SessionResponse
from ...domain.models.session import Session
from .resource_routes import create_resource_router


router = create_resource_router(
    resource_type=Session,
    payload_model=SessionPayload,
    response_model=SessionResponse,
    list_response_model=SessionListResponse,
)
