"""Constants for domain model field names"""

from .resource_fields import ResourceFields, DeviceFields, SessionFields, ViewerFields
from .scopes import Scopes, Claims

__all__ = [
    "ResourceFields",
    "DeviceFields",
    "SessionFields",
    "ViewerFields",
    "Scopes",
    "Claims",
]
