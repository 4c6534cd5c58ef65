# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import get_settings

logger = logging.getLogger(__name__)

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    The client connects lazily; no I/O happens until the first operation.

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(
        settings.mongo_uri,
        tz_aware=True,
        maxPoolSize=10,
        retryWrites=True,
        serverSelectionTimeoutMS=5000,
    )
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


async def ping_database() -> None:
    """
    Check that MongoDB is reachable.

    Raises:
        pymongo.errors.PyMongoError: If the server cannot be reached
    """
    await get_database().command("ping")
    logger.info("MongoDB is reachable")


def close_database() -> None:
    """Close the MongoDB client (call on application shutdown)."""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
        _mongo_database = None
        logger.info("Closed MongoDB client")


def get_device_collection() -> AsyncIOMotorCollection:
    """
    Get devices collection from MongoDB

    Returns:
        MongoDB collection for devices
    """
    return get_database()["devices"]


def get_session_collection() -> AsyncIOMotorCollection:
    """
    Get sessions collection from MongoDB

    Returns:
        MongoDB collection for sessions
    """
    return get_database()["sessions"]


def get_viewer_collection() -> AsyncIOMotorCollection:
    """
    Get viewers collection from MongoDB

    Returns:
        MongoDB collection for viewers
    """
    return get_database()["viewers"]
