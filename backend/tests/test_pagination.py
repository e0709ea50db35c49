"""
Tests for the paginated listing contract.
"""

import pytest

from athenaeum.config.settings import settings
from athenaeum.shared.core.exceptions import ValidationError
from athenaeum.shared.repositories import GlossaryTermRepository
from athenaeum.shared.schemas.common import PaginationMeta, PaginationParams


class TestPaginationParams:
    """Input normalization."""

    def test_defaults(self):
        params = PaginationParams()
        assert params.page == 1
        assert params.limit == 10
        assert params.sort_by == "id"
        assert params.sort_order == "desc"
        assert params.offset == 0

    def test_missing_values_fall_back_to_defaults(self):
        params = PaginationParams(page=None, limit=None, sort_by=None, sort_order=None)
        assert (params.page, params.limit, params.sort_by, params.sort_order) == (1, 10, "id", "desc")

    @pytest.mark.parametrize(
        "page, limit, expected",
        [
            (0, 10, (1, 10)),
            (-3, 10, (1, 10)),
            (2, 0, (2, 1)),
            (2, 500, (2, 100)),
        ],
    )
    def test_out_of_range_values_are_clamped(self, page, limit, expected):
        params = PaginationParams(page=page, limit=limit)
        assert (params.page, params.limit) == expected

    def test_huge_page_is_capped(self):
        params = PaginationParams(page=10**20, limit=100)

        assert params.page == settings.MAX_PAGE
        assert params.offset < 2**63

    def test_offset(self):
        assert PaginationParams(page=3, limit=10).offset == 20

    def test_sort_order_is_case_insensitive(self):
        assert PaginationParams(sort_order="ASC").sort_order == "asc"


class TestPaginationMeta:
    """Envelope arithmetic."""

    def test_middle_page(self):
        meta = PaginationMeta.create(page=2, limit=10, total=25)
        assert meta.total_pages == 3
        assert meta.has_next_page is True
        assert meta.has_previous_page is True

    def test_last_page(self):
        meta = PaginationMeta.create(page=3, limit=10, total=25)
        assert meta.has_next_page is False
        assert meta.has_previous_page is True

    def test_empty_result(self):
        meta = PaginationMeta.create(page=1, limit=10, total=0)
        assert meta.total_pages == 0
        assert meta.has_next_page is False
        assert meta.has_previous_page is False

    def test_serializes_camel_case(self):
        dumped = PaginationMeta.create(page=1, limit=10, total=25).model_dump(by_alias=True)
        assert dumped == {
            "total": 25,
            "page": 1,
            "limit": 10,
            "totalPages": 3,
            "hasNextPage": True,
            "hasPreviousPage": False,
        }


@pytest.fixture
def glossary(session):
    return GlossaryTermRepository(session)


async def _seed(repo, count, **extra):
    for number in range(1, count + 1):
        await repo.create(
            admin_id=1,
            term=f"Term {number}",
            definition=f"Definition number {number}",
            **extra,
        )


class TestRepositoryGetAll:
    """BaseRepository.get_all against a real table."""

    @pytest.mark.asyncio
    async def test_twenty_five_records_make_three_pages(self, glossary):
        await _seed(glossary, 25)

        page = await glossary.get_all(PaginationParams(page=3, limit=10))

        assert len(page.data) == 5
        assert page.pagination.total == 25
        assert page.pagination.total_pages == 3
        assert page.pagination.has_next_page is False
        assert page.pagination.has_previous_page is True

    @pytest.mark.asyncio
    async def test_page_past_the_end_is_empty_not_an_error(self, glossary):
        await _seed(glossary, 25)

        page = await glossary.get_all(PaginationParams(page=4, limit=10))

        assert page.data == []
        assert page.pagination.total_pages == 3
        assert page.pagination.has_next_page is False

    @pytest.mark.asyncio
    async def test_default_order_is_newest_id_first(self, glossary):
        await _seed(glossary, 3)

        page = await glossary.get_all()

        assert [term.term for term in page.data] == ["Term 3", "Term 2", "Term 1"]

    @pytest.mark.asyncio
    async def test_sort_by_column_ascending(self, glossary):
        await _seed(glossary, 3)

        page = await glossary.get_all(PaginationParams(sort_by="term", sort_order="asc"))

        assert [term.term for term in page.data] == ["Term 1", "Term 2", "Term 3"]

    @pytest.mark.asyncio
    async def test_pages_do_not_overlap(self, glossary):
        await _seed(glossary, 7)

        first = await glossary.get_all(PaginationParams(page=1, limit=4))
        second = await glossary.get_all(PaginationParams(page=2, limit=4))

        ids = [t.id for t in first.data] + [t.id for t in second.data]
        assert len(ids) == len(set(ids)) == 7

    @pytest.mark.asyncio
    async def test_filters_apply_to_count_and_data(self, glossary):
        await _seed(glossary, 4)
        await _seed(glossary, 2, is_published=True)

        page = await glossary.get_all(filters={"is_published": True})

        assert page.pagination.total == 2
        assert all(term.is_published for term in page.data)

    @pytest.mark.asyncio
    async def test_unknown_sort_column_is_rejected(self, glossary):
        with pytest.raises(ValidationError):
            await glossary.get_all(PaginationParams(sort_by="password"))
