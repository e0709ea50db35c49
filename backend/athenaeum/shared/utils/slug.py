"""
Slug Utilities

Turns human titles into URL-safe identifiers that are unique within one
content type's table.

Components:
===========
- SlugNormalizer          → pure: "Immanuel   Kant!!" → "immanuel-kant"
- SlugUniquenessResolver  → per table: "immanuel-kant" → "immanuel-kant-3"

Suffix Scheme:
==============
    attempt 1   →  immanuel-kant
    attempt 2   →  immanuel-kant-2
    attempt n   →  immanuel-kant-n        (n ≤ SLUG_MAX_ATTEMPTS)

The resolver's check is a read; it can race with a concurrent insert. The
unique index on ``slug`` settles the race and ContentRepository retries from
the next attempt when the index rejects a write.

Usage:
======
    normalizer = SlugNormalizer()
    fragment = normalizer.normalize("Immanuel Kant")

    resolver = SlugUniquenessResolver(session, Article)
    slug = await resolver.resolve(fragment, exclude_id=article.id)
"""

from typing import NamedTuple, Optional, Type

from slugify import slugify
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from athenaeum.config.settings import settings
from athenaeum.shared.core.exceptions import InvalidTitleError, SlugExhaustedError
from athenaeum.shared.core.logging import get_logger


log = get_logger("athenaeum.slug")


class SlugCandidate(NamedTuple):
    """A free slug and the attempt number that produced it."""

    attempt: int
    slug: str


class SlugNormalizer:
    """
    Stateless title → slug fragment converter.

    Lower-cases, transliterates to ASCII letters/digits, collapses every run
    of whitespace or punctuation into one hyphen, trims hyphens and caps the
    length at a word boundary. One instance is shared by all repositories.
    """

    def __init__(self, max_length: Optional[int] = None) -> None:
        self.max_length = max_length or settings.SLUG_MAX_LENGTH

    def normalize(self, title: Optional[str]) -> str:
        """
        Normalize a title into a slug fragment.

        Args:
            title: Free text title

        Returns:
            Slug fragment, never empty

        Raises:
            InvalidTitleError: If nothing representable is left

        Example:
            normalize("Immanuel Kant")      → "immanuel-kant"
            normalize("immanuel   kant!!")  → "immanuel-kant"
            normalize("Nietzsche: Übermensch") → "nietzsche-ubermensch"
        """
        if title is None or not title.strip():
            raise InvalidTitleError(title)

        fragment = slugify(
            title,
            max_length=self.max_length,
            word_boundary=True,
            save_order=True,
        )
        if not fragment:
            raise InvalidTitleError(title)
        return fragment


class SlugUniquenessResolver:
    """
    Finds the first free slug for a fragment inside one table.

    Attributes:
        session: Request-scoped async session
        model: Content model whose table is the namespace
        max_attempts: Highest suffix tried before SlugExhaustedError
    """

    def __init__(
        self,
        session: AsyncSession,
        model: Type,
        max_attempts: Optional[int] = None,
    ) -> None:
        self.session = session
        self.model = model
        self.max_attempts = max_attempts or settings.SLUG_MAX_ATTEMPTS

    @staticmethod
    def candidate(fragment: str, attempt: int) -> str:
        """Slug text for the given attempt number (1 = bare fragment)."""
        return fragment if attempt <= 1 else f"{fragment}-{attempt}"

    async def slug_exists(self, slug: str, exclude_id: Optional[int] = None) -> bool:
        """
        Check whether another record in this namespace already uses ``slug``.

        SQL Generated:
            SELECT id FROM articles WHERE slug = 'immanuel-kant' AND id != 12 LIMIT 1
        """
        query = select(self.model.id).where(self.model.slug == slug)
        if exclude_id is not None:
            query = query.where(self.model.id != exclude_id)
        result = await self.session.execute(query.limit(1))
        return result.first() is not None

    async def next_available(
        self,
        fragment: str,
        exclude_id: Optional[int] = None,
        start: int = 1,
    ) -> SlugCandidate:
        """
        Walk attempts from ``start`` until a candidate is free.

        Raises:
            SlugExhaustedError: If every attempt up to max_attempts is taken
        """
        for attempt in range(max(1, start), self.max_attempts + 1):
            slug = self.candidate(fragment, attempt)
            if not await self.slug_exists(slug, exclude_id=exclude_id):
                return SlugCandidate(attempt, slug)

        log.error(
            "Slug attempts exhausted",
            namespace=self.model.namespace(),
            fragment=fragment,
            attempts=self.max_attempts,
        )
        raise SlugExhaustedError(fragment, self.model.namespace(), self.max_attempts)

    async def resolve(
        self,
        fragment: str,
        exclude_id: Optional[int] = None,
        start: int = 1,
    ) -> str:
        """
        Return a slug unique in this namespace.

        Args:
            fragment: Output of SlugNormalizer.normalize
            exclude_id: Record whose own slug must not count as a clash
            start: First attempt number to try

        Returns:
            The fragment itself, or the fragment with the lowest free suffix
        """
        found = await self.next_available(fragment, exclude_id=exclude_id, start=start)
        return found.slug
