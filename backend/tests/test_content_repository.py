"""
Tests for ContentRepository: slug resolution, SEO meta fallbacks,
partial-update semantics and the write-time retry on slug collisions.
"""

from unittest.mock import AsyncMock

import pytest

from athenaeum.shared.core.exceptions import (
    InvalidTitleError,
    NotFoundError,
    RelatedRecordsError,
    ValidationError,
)
from athenaeum.shared.repositories import (
    ArticleRepository,
    BiographyAnnexRepository,
    BiographyEntryRepository,
    GlossaryTermRepository,
)


@pytest.fixture
def glossary(session):
    return GlossaryTermRepository(session)


@pytest.fixture
def articles(session):
    return ArticleRepository(session)


@pytest.fixture
def biographies(session):
    return BiographyEntryRepository(session)


def _article(published_at, **overrides):
    values = {
        "admin_id": 1,
        "title": "Being",
        "content": "An essay on being and time.",
        "author": "M. H.",
        "date": published_at,
        "image_url": "https://img.example/being.png",
    }
    values.update(overrides)
    return values


class TestCreate:
    """Slug and meta on insert."""

    @pytest.mark.asyncio
    async def test_slug_and_meta_are_derived(self, articles, published_at):
        article = await articles.create(**_article(published_at, title="On Being & Time"))

        assert article.id is not None
        assert article.slug == "on-being-time"
        assert article.meta_title == "On Being & Time"
        assert article.meta_description == "An essay on being and time."
        assert article.is_published is False

    @pytest.mark.asyncio
    async def test_colliding_titles_get_numbered_suffixes(self, articles, published_at):
        first = await articles.create(**_article(published_at))
        second = await articles.create(**_article(published_at))
        third = await articles.create(**_article(published_at))

        assert [first.slug, second.slug, third.slug] == ["being", "being-2", "being-3"]

    @pytest.mark.asyncio
    async def test_namespaces_are_independent(self, articles, glossary, published_at):
        article = await articles.create(**_article(published_at))
        term = await glossary.create(admin_id=1, term="Being", definition="That which is.")

        assert article.slug == "being"
        assert term.slug == "being"

    @pytest.mark.asyncio
    async def test_explicit_slug_is_normalized(self, articles, published_at):
        article = await articles.create(**_article(published_at, slug="My Custom Slug!"))

        assert article.slug == "my-custom-slug"

    @pytest.mark.asyncio
    async def test_explicit_slug_still_gets_a_suffix_when_taken(self, articles, published_at):
        await articles.create(**_article(published_at, title="Other"))
        article = await articles.create(**_article(published_at, slug="other"))

        assert article.slug == "other-2"

    @pytest.mark.asyncio
    async def test_explicit_meta_wins_over_derivation(self, articles, published_at):
        article = await articles.create(
            **_article(published_at, meta_title="Custom", meta_description="Hand written.")
        )

        assert article.meta_title == "Custom"
        assert article.meta_description == "Hand written."

    @pytest.mark.asyncio
    async def test_empty_meta_falls_back_to_derivation(self, articles, published_at):
        article = await articles.create(**_article(published_at, meta_title="", meta_description=""))

        assert article.meta_title == "Being"
        assert article.meta_description == "An essay on being and time."

    @pytest.mark.asyncio
    async def test_meta_description_is_plain_and_bounded(self, articles, published_at):
        body = "<p>" + " ".join(["word"] * 100) + "</p>"
        article = await articles.create(**_article(published_at, content=body))

        assert "<" not in article.meta_description
        assert len(article.meta_description) <= 160
        assert not article.meta_description.endswith(" ")

    @pytest.mark.asyncio
    async def test_biography_description_joins_its_fields(self, biographies):
        entry = await biographies.create(
            admin_id=1,
            philosofer="Immanuel Kant",
            geoorigin="Prussia",
            detail_location="Königsberg",
            years="1724 - 1804",
        )

        assert entry.slug == "immanuel-kant"
        assert entry.meta_description == "Prussia, Königsberg, 1724 - 1804"

    @pytest.mark.asyncio
    async def test_unsluggable_title_is_rejected(self, glossary):
        with pytest.raises(InvalidTitleError):
            await glossary.create(admin_id=1, term="!!!", definition="Nothing to slug.")

    @pytest.mark.asyncio
    async def test_id_cannot_be_supplied(self, glossary):
        with pytest.raises(ValidationError):
            await glossary.create(id=99, admin_id=1, term="Being", definition="That which is.")

    @pytest.mark.asyncio
    async def test_unknown_field_is_rejected(self, glossary):
        with pytest.raises(ValidationError):
            await glossary.create(admin_id=1, term="Being", definition="x", colour="red")


class TestUpdate:
    """Partial updates: absent, present and null fields behave differently."""

    @pytest.mark.asyncio
    async def test_unrelated_change_keeps_slug_and_meta(self, articles, published_at):
        article = await articles.create(**_article(published_at))

        updated = await articles.update_by_id(article.id, author="Someone Else")

        assert updated.author == "Someone Else"
        assert updated.slug == "being"
        assert updated.meta_title == "Being"

    @pytest.mark.asyncio
    async def test_new_title_reslugs_and_rederives_meta_title(self, articles, published_at):
        article = await articles.create(**_article(published_at))

        updated = await articles.update_by_id(article.id, title="Time")

        assert updated.slug == "time"
        assert updated.meta_title == "Time"
        assert updated.meta_description == "An essay on being and time."

    @pytest.mark.asyncio
    async def test_same_title_keeps_own_slug(self, articles, published_at):
        article = await articles.create(**_article(published_at))

        updated = await articles.update_by_id(article.id, title="Being")

        assert updated.slug == "being"

    @pytest.mark.asyncio
    async def test_unchanged_title_keeps_suffix_after_gap_opens(self, glossary):
        await glossary.create(admin_id=1, term="Being", definition="First.")
        second = await glossary.create(admin_id=1, term="Being", definition="Second.")
        third = await glossary.create(
            admin_id=1, term="Being", definition="Third.", meta_title="Hand picked"
        )
        await glossary.delete_by_id(second.id)

        updated = await glossary.update_by_id(third.id, term="Being")

        assert updated.slug == "being-3"
        assert updated.meta_title == "Hand picked"

    @pytest.mark.asyncio
    async def test_unchanged_title_keeps_explicit_slug(self, glossary):
        term = await glossary.create(
            admin_id=1, term="Being", definition="That which is.", slug="custom-being"
        )

        updated = await glossary.update_by_id(term.id, term="Being")

        assert updated.slug == "custom-being"

    @pytest.mark.asyncio
    async def test_unchanged_body_keeps_custom_description(self, glossary):
        term = await glossary.create(
            admin_id=1, term="Being", definition="That which is.", meta_description="Custom."
        )

        updated = await glossary.update_by_id(term.id, definition="That which is.")

        assert updated.meta_description == "Custom."

    @pytest.mark.asyncio
    async def test_new_title_avoids_other_records(self, articles, published_at):
        await articles.create(**_article(published_at, title="Time"))
        article = await articles.create(**_article(published_at))

        updated = await articles.update_by_id(article.id, title="Time")

        assert updated.slug == "time-2"

    @pytest.mark.asyncio
    async def test_new_body_rederives_description_only(self, articles, published_at):
        article = await articles.create(**_article(published_at, meta_title="Custom"))

        updated = await articles.update_by_id(article.id, content="A new body.")

        assert updated.meta_description == "A new body."
        assert updated.meta_title == "Custom"
        assert updated.slug == "being"

    @pytest.mark.asyncio
    async def test_explicit_meta_wins_over_new_title(self, articles, published_at):
        article = await articles.create(**_article(published_at))

        updated = await articles.update_by_id(article.id, title="Time", meta_title="Kept")

        assert updated.meta_title == "Kept"
        assert updated.slug == "time"

    @pytest.mark.asyncio
    async def test_null_meta_is_rederived_from_current_values(self, articles, published_at):
        article = await articles.create(
            **_article(published_at, meta_title="Custom", meta_description="Custom.")
        )

        updated = await articles.update_by_id(article.id, meta_title=None, meta_description=None)

        assert updated.meta_title == "Being"
        assert updated.meta_description == "An essay on being and time."

    @pytest.mark.asyncio
    async def test_explicit_slug(self, articles, published_at):
        article = await articles.create(**_article(published_at))

        updated = await articles.update_by_id(article.id, slug="A Fresh Start")

        assert updated.slug == "a-fresh-start"
        assert updated.meta_title == "Being"

    @pytest.mark.asyncio
    async def test_null_slug_is_rederived_from_title(self, articles, published_at):
        article = await articles.create(**_article(published_at, slug="custom"))

        updated = await articles.update_by_id(article.id, slug=None)

        assert updated.slug == "being"

    @pytest.mark.asyncio
    async def test_missing_record(self, articles):
        with pytest.raises(NotFoundError):
            await articles.update_by_id(404, title="Anything")

    @pytest.mark.asyncio
    async def test_id_cannot_be_changed(self, articles, published_at):
        article = await articles.create(**_article(published_at))

        with pytest.raises(ValidationError):
            await articles.update_by_id(article.id, id=7)


class TestWriteTimeCollision:
    """The unique index catches what the existence check missed."""

    @pytest.mark.asyncio
    async def test_create_retries_with_next_suffix(self, glossary):
        await glossary.create(admin_id=1, term="Being", definition="That which is.")
        # Simulate a concurrent writer: the check sees nothing, the index does
        glossary.slugs.slug_exists = AsyncMock(return_value=False)

        term = await glossary.create(admin_id=1, term="Being", definition="Again.")

        assert term.slug == "being-2"

    @pytest.mark.asyncio
    async def test_update_retries_with_next_suffix(self, glossary):
        await glossary.create(admin_id=1, term="Being", definition="That which is.")
        other = await glossary.create(admin_id=1, term="Nothing", definition="That which is not.")
        glossary.slugs.slug_exists = AsyncMock(return_value=False)

        updated = await glossary.update_by_id(other.id, term="Being")

        assert updated.slug == "being-2"
        assert updated.term == "Being"
        assert updated.meta_title == "Being"

    @pytest.mark.asyncio
    async def test_session_stays_usable_after_a_retry(self, glossary):
        await glossary.create(admin_id=1, term="Being", definition="That which is.")
        glossary.slugs.slug_exists = AsyncMock(return_value=False)
        await glossary.create(admin_id=1, term="Being", definition="Again.")

        assert await glossary.count() == 2


class TestDelete:
    """Hard delete and referential integrity."""

    @pytest.mark.asyncio
    async def test_returns_deleted_record(self, glossary):
        term = await glossary.create(admin_id=1, term="Being", definition="That which is.")

        deleted = await glossary.delete_by_id(term.id)

        assert deleted.slug == "being"
        assert await glossary.get(term.id) is None

    @pytest.mark.asyncio
    async def test_slug_is_free_again_after_delete(self, glossary):
        term = await glossary.create(admin_id=1, term="Being", definition="That which is.")
        await glossary.delete_by_id(term.id)

        again = await glossary.create(admin_id=1, term="Being", definition="Back.")

        assert again.slug == "being"

    @pytest.mark.asyncio
    async def test_missing_record(self, glossary):
        with pytest.raises(NotFoundError):
            await glossary.delete_by_id(404)

    @pytest.mark.asyncio
    async def test_biography_with_annex_cannot_be_deleted(self, session, biographies):
        entry = await biographies.create(
            admin_id=1,
            philosofer="Immanuel Kant",
            geoorigin="Prussia",
            detail_location="Königsberg",
            years="1724 - 1804",
        )
        annexes = BiographyAnnexRepository(session)
        await annexes.create(
            admin_id=1,
            biography_id=entry.id,
            metafisika="Transcendental idealism.",
            epsimologi="Synthetic a priori.",
            aksiologi="Categorical imperative.",
            conclusion="Critical philosophy.",
        )

        with pytest.raises(RelatedRecordsError):
            await biographies.delete_by_id(entry.id)

        assert await biographies.exists(entry.id)

    @pytest.mark.asyncio
    async def test_annex_with_unknown_biography_is_rejected(self, session):
        annexes = BiographyAnnexRepository(session)

        with pytest.raises(ValidationError):
            await annexes.create(
                admin_id=1,
                biography_id=999,
                metafisika="a",
                epsimologi="b",
                aksiologi="c",
                conclusion="d",
            )
