"""
Catalog Item Handler
"""

from fastapi import Depends

from athenaeum.api.dependencies.services import get_catalog_item_service
from athenaeum.api.handlers.content_handler import build_content_router
from athenaeum.shared.schemas.catalog_item import (
    CatalogItemCreate,
    CatalogItemResponse,
    CatalogItemUpdate,
)
from athenaeum.shared.services.catalog_item_service import CatalogItemService


router = build_content_router(
    get_service=get_catalog_item_service,
    create_schema=CatalogItemCreate,
    update_schema=CatalogItemUpdate,
    response_schema=CatalogItemResponse,
)


@router.get("/title/{title}", response_model=CatalogItemResponse)
async def get_by_title(
    title: str,
    service: CatalogItemService = Depends(get_catalog_item_service),
):
    """Fetch a catalog item by its exact title."""
    return await service.get_by_title(title)
