from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    get_database,
    get_device_collection,
    get_session_collection,
    get_viewer_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the database and every resource collection in the container.
        The Motor client connects lazily, so registration does no I/O.
        """
        container.register_singleton("database", get_database())
        container.register_singleton("device_collection", get_device_collection())
        container.register_singleton("session_collection", get_session_collection())
        container.register_singleton("viewer_collection", get_viewer_collection())
