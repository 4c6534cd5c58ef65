"""Constants for resource document field names"""


class ResourceFields:
    """Field name constants shared by every resource document"""
    ID = "id"
    CREATED_DATE = "createdDate"
    UPDATED_DATE = "updatedDate"
    CREATOR_ID = "creatorId"
    UPDATOR_ID = "updatorId"
    OWNER_ID = "ownerId"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field


class DeviceFields(ResourceFields):
    """Field name constants for Device documents"""
    NAME = "name"
    DESCRIPTION = "description"
    SESSIONS = "sessions"


class SessionFields(ResourceFields):
    """Field name constants for Session documents"""
    NAME = "name"
    DESCRIPTION = "description"


class ViewerFields(ResourceFields):
    """Field name constants for Viewer documents"""
    SESSION_ID = "sessionId"
