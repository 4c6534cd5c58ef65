from .mongo_connection import (
    get_database,
    ping_database,
    close_database,
    get_device_collection,
    get_session_collection,
    get_viewer_collection,
)
from .mongo_device_repository import MongoDeviceRepository
from .mongo_session_repository import MongoSessionRepository
from .mongo_viewer_repository import MongoViewerRepository

__all__ = [
    "get_database",
    "ping_database",
    "close_database",
    "get_device_collection",
    "get_session_collection",
    "get_viewer_collection",
    "MongoDeviceRepository",
    "MongoSessionRepository",
    "MongoViewerRepository",
]
