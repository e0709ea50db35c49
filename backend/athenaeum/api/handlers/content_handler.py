"""
Content Handler

Builds the CRUD router every content type exposes.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model

Handlers only parse the request, call the service and shape the response.

Endpoints (per content type):
=============================
    GET    /<prefix>                 → paginated list (?page&limit&sortBy&sortOrder&is_published)
    GET    /<prefix>/id/{record_id}  → by id
    GET    /<prefix>/slug/{slug}     → by slug (slugged types only)
    POST   /<prefix>                 → create          (admin token)
    PATCH  /<prefix>/{record_id}     → partial update  (admin token)
    DELETE /<prefix>/{record_id}     → delete, returns the deleted record (admin token)

Type-specific lookups (by title, term, ...) are added by each type's module
on the router returned here.
"""

from typing import Any, Callable, Optional, Type

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from athenaeum.api.dependencies.auth import CurrentAdmin
from athenaeum.api.dependencies.pagination import Pagination
from athenaeum.shared.repositories.base import Page
from athenaeum.shared.schemas.common import ErrorResponse, PaginatedResponse


# Documented in OpenAPI; bodies follow {"error": {code, message, details}}
ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
}


def paginated(page: Page, response_schema: Type[BaseModel]) -> PaginatedResponse:
    """Serialize a repository Page into the public envelope."""
    return PaginatedResponse[response_schema](
        data=[response_schema.model_validate(record) for record in page.data],
        pagination=page.pagination,
    )


def build_content_router(
    *,
    get_service: Callable[..., Any],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    response_schema: Type[BaseModel],
    slugged: bool = True,
) -> APIRouter:
    """
    Create the standard CRUD router for one content type.

    Args:
        get_service: Dependency returning the type's service
        create_schema: POST body schema
        update_schema: PATCH body schema (read with exclude_unset)
        response_schema: Schema records are serialized with
        slugged: Whether the type has slugs (adds /slug/{slug} and ?is_published)

    Returns:
        APIRouter to mount under the type's prefix
    """
    router = APIRouter(responses=ERROR_RESPONSES)

    if slugged:

        @router.get("", response_model=PaginatedResponse[response_schema])
        async def list_records(
            pagination: Pagination,
            is_published: Optional[bool] = Query(None, description="Filter by publish state"),
            service=Depends(get_service),
        ):
            """Paginated listing."""
            page = await service.get_all(pagination, is_published=is_published)
            return paginated(page, response_schema)

        @router.get("/slug/{slug}", response_model=response_schema)
        async def get_by_slug(slug: str, service=Depends(get_service)):
            """Fetch one record by its slug."""
            return await service.get_by_slug(slug)

    else:

        @router.get("", response_model=PaginatedResponse[response_schema])
        async def list_records(pagination: Pagination, service=Depends(get_service)):
            """Paginated listing."""
            page = await service.get_all(pagination)
            return paginated(page, response_schema)

    @router.get("/id/{record_id}", response_model=response_schema)
    async def get_by_id(record_id: int, service=Depends(get_service)):
        """Fetch one record by id."""
        return await service.get_by_id(record_id)

    @router.post("", response_model=response_schema, status_code=status.HTTP_201_CREATED)
    async def create_record(
        payload: create_schema,
        admin_id: CurrentAdmin,
        service=Depends(get_service),
    ):
        """
        Create a record owned by the calling admin.

        Slug and SEO meta are derived when not supplied.
        """
        return await service.create(payload, admin_id)

    @router.patch("/{record_id}", response_model=response_schema)
    async def update_record(
        record_id: int,
        payload: update_schema,
        admin_id: CurrentAdmin,
        service=Depends(get_service),
    ):
        """
        Partially update a record.

        Only fields present in the body are changed; sending a meta field
        as null re-derives it.
        """
        return await service.update_by_id(record_id, payload)

    @router.delete("/{record_id}", response_model=response_schema)
    async def delete_record(
        record_id: int,
        admin_id: CurrentAdmin,
        service=Depends(get_service),
    ):
        """Delete a record and return it."""
        return await service.delete_by_id(record_id)

    return router
