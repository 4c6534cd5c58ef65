from typing import TYPE_CHECKING
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.repositories.session_repository import SessionRepository
from ...domain.repositories.viewer_repository import ViewerRepository
from ...infrastructure.db.mongo_device_repository import MongoDeviceRepository
from ...infrastructure.db.mongo_session_repository import MongoSessionRepository
from ...infrastructure.db.mongo_viewer_repository import MongoViewerRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        container.register_singleton(
            DeviceRepository,
            MongoDeviceRepository(device_collection=container.get("device_collection"))
        )

        container.register_singleton(
            SessionRepository,
            MongoSessionRepository(session_collection=container.get("session_collection"))
        )

        container.register_singleton(
            ViewerRepository,
            MongoViewerRepository(viewer_collection=container.get("viewer_collection"))
        )
