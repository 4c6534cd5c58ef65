from .auth import ResolveIdentityUseCase
from .resource import (
    ListResourcesUseCase,
    GetResourceUseCase,
    CreateResourceUseCase,
    UpdateResourceUseCase,
    DeleteResourceUseCase,
)

__all__ = [
    "ResolveIdentityUseCase",
    "ListResourcesUseCase",
    "GetResourceUseCase",
    "CreateResourceUseCase",
    "UpdateResourceUseCase",
    "DeleteResourceUseCase",
]
