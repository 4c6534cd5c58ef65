from ..models.viewer import Viewer
from .resource_repository import ResourceRepository


class ViewerRepository(ResourceRepository[Viewer]):
    """Repository interface - defines contract for viewer data access"""
