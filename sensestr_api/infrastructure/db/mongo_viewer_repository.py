# Standard library imports
from typing import Any, Dict, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection

# Local application imports
from ...domain.constants import ViewerFields
from ...domain.models.viewer import Viewer
from ...domain.repositories.viewer_repository import ViewerRepository
from .mongo_connection import get_viewer_collection
from .mongo_resource_repository import MongoResourceRepository, to_object_id


class MongoViewerRepository(MongoResourceRepository[Viewer], ViewerRepository):
    """MongoDB implementation of ViewerRepository"""

    resource_type = Viewer
    session_ref_field = ViewerFields.SESSION_ID

    def __init__(self, viewer_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        super().__init__(viewer_collection if viewer_collection is not None else get_viewer_collection())

    def _fields_from_document(self, document: Dict[str, Any]) -> Dict[str, Any]:
        session_id = document.get(ViewerFields.SESSION_ID)
        return {"session_id": str(session_id) if session_id is not None else None}

    def _fields_to_document(self, viewer: Viewer) -> Dict[str, Any]:
        return {ViewerFields.SESSION_ID: to_object_id(viewer.session_id)}
