"""
Article Service

Articles need an image (URL from the upload collaborator) in addition to
their title, content, author and date.
"""

from athenaeum.shared.models.article import Article
from athenaeum.shared.repositories.article_repository import ArticleRepository
from athenaeum.shared.services.content_service import ContentService


class ArticleService(ContentService[Article]):
    """Service for articles."""

    repository_class = ArticleRepository
    resource = "Article"
    required_fields = ("title", "content", "author", "date")
    requires_image = True

    async def get_by_title(self, title: str) -> Article:
        return await self._get_by_field("title", title)
