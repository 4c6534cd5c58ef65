# Standard library imports
from typing import Any, Dict, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.constants import SessionFields
from ...domain.models.session import Session
from ...domain.repositories.session_repository import SessionRepository
from .mongo_connection import get_session_collection
from .mongo_resource_repository import MongoResourceRepository


class MongoSessionRepository(MongoResourceRepository[Session], SessionRepository):
    """MongoDB implementation of SessionRepository"""

    resource_type = Session

    def __init__(self, session_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        super().__init__(session_collection if session_collection is not None else get_session_collection())

    def _fields_from_document(self, document: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "name": document.get(SessionFields.NAME, ""),
            "description": document.get(SessionFields.DESCRIPTION),
        }

    def _fields_to_document(self, session: Session) -> Dict[str, Any]:
        return {
            SessionFields.NAME: session.name,
            SessionFields.DESCRIPTION: session.description,
        }
