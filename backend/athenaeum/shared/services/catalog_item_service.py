"""
Catalog Item Service

The image is optional for catalog items.
"""

from athenaeum.shared.models.catalog_item import CatalogItem
from athenaeum.shared.repositories.catalog_item_repository import CatalogItemRepository
from athenaeum.shared.services.content_service import ContentService


class CatalogItemService(ContentService[CatalogItem]):
    """Service for catalog items."""

    repository_class = CatalogItemRepository
    resource = "CatalogItem"
    required_fields = ("title", "desc", "category", "price", "stock", "link")

    async def get_by_title(self, title: str) -> CatalogItem:
        return await self._get_by_field("title", title)
