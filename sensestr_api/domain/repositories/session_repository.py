from ..models.session import Session
from .resource_repository import ResourceRepository


class SessionRepository(ResourceRepository[Session]):
    """Repository interface - defines contract for session data access"""
