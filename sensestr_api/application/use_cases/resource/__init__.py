from .list_resources import ListResourcesUseCase, ResourcePage, DEFAULT_LIMIT, MAX_LIMIT
from .get_resource import GetResourceUseCase
from .create_resource import CreateResourceUseCase
from .update_resource import UpdateResourceUseCase
from .delete_resource import DeleteResourceUseCase

__all__ = [
    "ListResourcesUseCase",
    "ResourcePage",
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "GetResourceUseCase",
    "CreateResourceUseCase",
    "UpdateResourceUseCase",
    "DeleteResourceUseCase",
]
