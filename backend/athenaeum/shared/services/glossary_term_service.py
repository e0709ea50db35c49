"""
Glossary Term Service
"""

from athenaeum.shared.models.glossary_term import GlossaryTerm
from athenaeum.shared.repositories.glossary_term_repository import GlossaryTermRepository
from athenaeum.shared.services.content_service import ContentService


class GlossaryTermService(ContentService[GlossaryTerm]):
    """Service for glossary terms."""

    repository_class = GlossaryTermRepository
    resource = "GlossaryTerm"
    required_fields = ("term", "definition")

    async def get_by_term(self, term: str) -> GlossaryTerm:
        return await self._get_by_field("term", term)

    async def get_by_definition(self, definition: str) -> GlossaryTerm:
        return await self._get_by_field("definition", definition)
