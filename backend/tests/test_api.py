"""
HTTP-level tests: routing, auth, status codes and the error envelope.
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError


GLOSSARY = {"term": "Being", "definition": "<p>That which is.</p>"}


async def _create_term(client, headers, **overrides):
    body = {**GLOSSARY, **overrides}
    response = await client.post("/glossary", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestHealth:

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_ready(self, client):
        response = await client.get("/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready"}

    @pytest.mark.asyncio
    async def test_ready_reports_unavailable_database(self, client, session, monkeypatch):
        monkeypatch.setattr(
            session,
            "execute",
            AsyncMock(side_effect=OperationalError("SELECT 1", {}, Exception("connection refused"))),
        )

        response = await client.get("/ready")

        assert response.status_code == 503
        assert response.json() == {"status": "unavailable"}

    @pytest.mark.asyncio
    async def test_live(self, client):
        response = await client.get("/live")

        assert response.json() == {"status": "alive"}


class TestAuth:
    """Writes need an admin token; reads do not."""

    @pytest.mark.asyncio
    async def test_write_without_token(self, client):
        response = await client.post("/glossary", json=GLOSSARY)

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"

    @pytest.mark.asyncio
    async def test_write_with_bad_token(self, client):
        response = await client.post(
            "/glossary", json=GLOSSARY, headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_read_without_token(self, client):
        response = await client.get("/glossary")

        assert response.status_code == 200


class TestCreate:

    @pytest.mark.asyncio
    async def test_slug_and_meta_in_response(self, client, admin_headers):
        body = await _create_term(client, admin_headers)

        assert body["slug"] == "being"
        assert body["meta_title"] == "Being"
        assert body["meta_description"] == "That which is."
        assert body["admin_id"] == 1
        assert body["is_published"] is False

    @pytest.mark.asyncio
    async def test_duplicate_title_gets_suffix(self, client, admin_headers):
        await _create_term(client, admin_headers)
        body = await _create_term(client, admin_headers)

        assert body["slug"] == "being-2"

    @pytest.mark.asyncio
    async def test_client_supplied_id_is_rejected(self, client, admin_headers):
        response = await client.post("/glossary", json={**GLOSSARY, "id": 5}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_unsluggable_title(self, client, admin_headers):
        response = await client.post(
            "/glossary", json={**GLOSSARY, "term": "!!!"}, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_TITLE"

    @pytest.mark.asyncio
    async def test_missing_required_field(self, client, admin_headers):
        response = await client.post("/glossary", json={"term": "Being"}, headers=admin_headers)

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_article_without_image(self, client, admin_headers):
        response = await client.post(
            "/articles",
            json={
                "title": "Being",
                "content": "An essay.",
                "author": "M. H.",
                "date": "2024-05-01T00:00:00Z",
            },
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Image is required"


class TestReads:

    @pytest.mark.asyncio
    async def test_pagination_envelope_is_camel_case(self, client, admin_headers):
        for number in range(3):
            await _create_term(client, admin_headers, term=f"Term {number}")

        response = await client.get("/glossary", params={"page": 1, "limit": 2})

        assert response.status_code == 200
        body = response.json()
        assert len(body["data"]) == 2
        assert body["pagination"] == {
            "total": 3,
            "page": 1,
            "limit": 2,
            "totalPages": 2,
            "hasNextPage": True,
            "hasPreviousPage": False,
        }

    @pytest.mark.asyncio
    async def test_sort_query_names(self, client, admin_headers):
        await _create_term(client, admin_headers, term="Alpha")
        await _create_term(client, admin_headers, term="Beta")

        response = await client.get("/glossary", params={"sortBy": "term", "sortOrder": "asc"})

        assert [item["term"] for item in response.json()["data"]] == ["Alpha", "Beta"]

    @pytest.mark.asyncio
    async def test_unknown_sort_column(self, client):
        response = await client.get("/glossary", params={"sortBy": "nope"})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_huge_page_is_an_empty_page(self, client, admin_headers):
        await _create_term(client, admin_headers)

        response = await client.get("/glossary", params={"page": 10**20})

        assert response.status_code == 200
        body = response.json()
        assert body["data"] == []
        assert body["pagination"]["total"] == 1
        assert body["pagination"]["hasNextPage"] is False

    @pytest.mark.asyncio
    async def test_invalid_sort_order(self, client):
        response = await client.get("/glossary", params={"sortOrder": "sideways"})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_published_filter(self, client, admin_headers):
        await _create_term(client, admin_headers, term="Draft")
        await _create_term(client, admin_headers, term="Live", is_published=True)

        response = await client.get("/glossary", params={"is_published": "true"})

        assert [item["term"] for item in response.json()["data"]] == ["Live"]

    @pytest.mark.asyncio
    async def test_get_by_slug_and_id(self, client, admin_headers):
        created = await _create_term(client, admin_headers)

        by_slug = await client.get("/glossary/slug/being")
        by_id = await client.get(f"/glossary/id/{created['id']}")

        assert by_slug.json()["id"] == created["id"]
        assert by_id.json()["slug"] == "being"

    @pytest.mark.asyncio
    async def test_get_by_term(self, client, admin_headers):
        created = await _create_term(client, admin_headers)

        response = await client.get("/glossary/term/Being")

        assert response.json()["id"] == created["id"]

    @pytest.mark.asyncio
    async def test_not_found_envelope(self, client):
        response = await client.get("/glossary/slug/nowhere")

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "NOT_FOUND"
        assert "nowhere" in error["message"]


class TestUpdate:

    @pytest.mark.asyncio
    async def test_null_meta_title_is_rederived(self, client, admin_headers):
        created = await _create_term(client, admin_headers, meta_title="Custom")

        response = await client.patch(
            f"/glossary/{created['id']}", json={"meta_title": None}, headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json()["meta_title"] == "Being"

    @pytest.mark.asyncio
    async def test_absent_fields_are_kept(self, client, admin_headers):
        created = await _create_term(client, admin_headers, meta_title="Custom")

        response = await client.patch(
            f"/glossary/{created['id']}", json={"etymology": "Old English"}, headers=admin_headers
        )

        body = response.json()
        assert body["meta_title"] == "Custom"
        assert body["slug"] == "being"
        assert body["etymology"] == "Old English"

    @pytest.mark.asyncio
    async def test_new_term_reslugs(self, client, admin_headers):
        created = await _create_term(client, admin_headers)

        response = await client.patch(
            f"/glossary/{created['id']}", json={"term": "Nothing"}, headers=admin_headers
        )

        assert response.json()["slug"] == "nothing"

    @pytest.mark.asyncio
    async def test_resending_same_term_keeps_slug(self, client, admin_headers):
        created = await _create_term(client, admin_headers, slug="custom-being")

        response = await client.patch(
            f"/glossary/{created['id']}", json={"term": "Being"}, headers=admin_headers
        )

        assert response.json()["slug"] == "custom-being"

    @pytest.mark.asyncio
    async def test_missing_record(self, client, admin_headers):
        response = await client.patch("/glossary/404", json={"term": "x"}, headers=admin_headers)

        assert response.status_code == 404


class TestDelete:

    @pytest.mark.asyncio
    async def test_returns_deleted_record(self, client, admin_headers):
        created = await _create_term(client, admin_headers)

        response = await client.delete(f"/glossary/{created['id']}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["slug"] == "being"
        assert (await client.get(f"/glossary/id/{created['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_biography_with_annex(self, client, admin_headers):
        entry = await client.post(
            "/biographies",
            json={
                "philosofer": "Immanuel Kant",
                "geoorigin": "Prussia",
                "detail_location": "Königsberg",
                "years": "1724 - 1804",
            },
            headers=admin_headers,
        )
        entry_id = entry.json()["id"]
        annex = await client.post(
            "/biography-annexes",
            json={
                "biography_id": entry_id,
                "metafisika": "Transcendental idealism.",
                "epsimologi": "Synthetic a priori.",
                "aksiologi": "Categorical imperative.",
                "conclusion": "Critical philosophy.",
            },
            headers=admin_headers,
        )
        assert annex.status_code == 201, annex.text

        response = await client.delete(f"/biographies/{entry_id}", headers=admin_headers)

        assert response.status_code == 409
        assert response.json()["error"]["code"] == "HAS_RELATED_RECORDS"
        assert (await client.get(f"/biographies/id/{entry_id}")).status_code == 200
