"""
CRUD routes shared by every resource collection.

create_resource_router() builds the five lifecycle endpoints for one
resource type from its DTOs; the per-resource controllers only choose the
models and the list filters.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Optional, Type

# -----------------------------------------------------------------------------
# Third-party
# -----------------------------------------------------------------------------
from fastapi import APIRouter, Depends, Path, Query, status
from pydantic import BaseModel

# -----------------------------------------------------------------------------
# Application
# -----------------------------------------------------------------------------
from ...application.dto.resource_dto import (
    OBJECT_ID_PATTERN,
    ListMetadata,
    ResourcePayload,
    ResourceResponse,
)
from ...application.use_cases.resource import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    CreateResourceUseCase,
    DeleteResourceUseCase,
    GetResourceUseCase,
    ListResourcesUseCase,
    ResourcePage,
    UpdateResourceUseCase,
)
from ...di.container import get_container
from ...domain.models.identity import Identity
from ...domain.models.resource import Resource
from ...domain.repositories.resource_repository import ResourceFilter

from .dependencies import get_identity


def create_resource_router(
    resource_type: Type[Resource],
    payload_model: Type[ResourcePayload],
    response_model: Type[ResourceResponse],
    list_response_model: Type[BaseModel],
    filter_by_session: bool = False,
) -> APIRouter:
    """
    Build the CRUD router for one resource collection

    Args:
        resource_type: Domain model class of the collection
        payload_model: Request body DTO for create and update
        response_model: Response DTO for a single resource
        list_response_model: Response DTO for a page of resources
        filter_by_session: Whether GET / accepts a sessionId filter

    Returns:
        APIRouter to mount at /{collection}
    """
    name = resource_type.collection_name
    router = APIRouter(tags=[name])

    def use_case(use_case_class: type):
        return get_container().get((use_case_class, name))

    def to_list_response(page: ResourcePage) -> BaseModel:
        return list_response_model(
            metadata=ListMetadata(count=page.count, skip=page.skip, limit=page.limit, total=page.total),
            results=[response_model.from_domain(resource) for resource in page.items],
        )

    if filter_by_session:
        @router.get("", response_model=list_response_model)
        async def list_resources(
            skip: int = Query(0, ge=0),
            limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
            owner_id: Optional[str] = Query(None, alias="ownerId", min_length=1),
            session_id: Optional[str] = Query(None, alias="sessionId", pattern=OBJECT_ID_PATTERN),
            identity: Identity = Depends(get_identity),
        ):
            page = await use_case(ListResourcesUseCase).execute(
                ResourceFilter(owner_id=owner_id, session_id=session_id),
                skip=skip,
                limit=limit,
            )
            return to_list_response(page)
    else:
        @router.get("", response_model=list_response_model)
        async def list_resources(
            skip: int = Query(0, ge=0),
            limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
            owner_id: Optional[str] = Query(None, alias="ownerId", min_length=1),
            identity: Identity = Depends(get_identity),
        ):
            page = await use_case(ListResourcesUseCase).execute(
                ResourceFilter(owner_id=owner_id),
                skip=skip,
                limit=limit,
            )
            return to_list_response(page)

    @router.post("", response_model=response_model, status_code=status.HTTP_201_CREATED)
    async def create_resource(
        payload: payload_model,
        identity: Identity = Depends(get_identity),
    ):
        resource = await use_case(CreateResourceUseCase).execute(
            fields=payload.resource_fields(),
            identity=identity,
            requested_owner_id=payload.owner_id,
        )
        return response_model.from_domain(resource)

    @router.get("/{resource_id}", response_model=response_model)
    async def get_resource(
        resource_id: str = Path(..., pattern=OBJECT_ID_PATTERN),
        identity: Identity = Depends(get_identity),
    ):
        resource = await use_case(GetResourceUseCase).execute(resource_id)
        return response_model.from_domain(resource)

    @router.put("/{resource_id}", response_model=response_model)
    async def update_resource(
        payload: payload_model,
        resource_id: str = Path(..., pattern=OBJECT_ID_PATTERN),
        identity: Identity = Depends(get_identity),
    ):
        resource = await use_case(UpdateResourceUseCase).execute(
            resource_id=resource_id,
            fields=payload.resource_fields(),
            identity=identity,
            requested_owner_id=payload.owner_id,
        )
        return response_model.from_domain(resource)

    @router.delete("/{resource_id}", response_model=response_model)
    async def delete_resource(
        resource_id: str = Path(..., pattern=OBJECT_ID_PATTERN),
        identity: Identity = Depends(get_identity),
    ):
        resource = await use_case(DeleteResourceUseCase).execute(resource_id, identity)
        return response_model.from_domain(resource)

    return router
