"""End-to-end tests for the automation post routes (API-key gated)."""

from uuid import uuid4

import pytest

from tests.conftest import ADMIN_PASSWORD, API_KEY
from tests.harness import create_client_fixture

client = create_client_fixture()

HEADERS = {"x-api-key": API_KEY}

NEW_POST = {
    "title": "Automated digest",
    "category": "digest",
    "content": "Weekly roundup of everything that happened.",
}


def _create(client) -> str:
    response = client.post("/api/admin/blogs", json=NEW_POST, headers=HEADERS)
    assert response.status_code == 201
    return response.json()["blogId"]


class TestApiKeyGate:
    """Missing and wrong keys are rejected on every automation route."""

    @pytest.mark.parametrize(
        ("method", "path", "body"),
        [
            ("POST", "/api/admin/blogs", NEW_POST),
            ("PUT", f"/api/admin/blogs/{uuid4()}", {"title": "x"}),
            ("DELETE", f"/api/admin/blogs/{uuid4()}", None),
        ],
    )
    def test_missing_key(self, client, method, path, body):
        response = client.request(method, path, json=body)

        assert response.status_code == 401
        assert response.json() == {"detail": "API key missing"}

    @pytest.mark.parametrize(
        ("method", "path", "body"),
        [
            ("POST", "/api/admin/blogs", NEW_POST),
            ("PUT", f"/api/admin/blogs/{uuid4()}", {"title": "x"}),
            ("DELETE", f"/api/admin/blogs/{uuid4()}", None),
        ],
    )
    def test_wrong_key(self, client, method, path, body):
        response = client.request(
            method, path, json=body, headers={"x-api-key": "wrong"}
        )

        assert response.status_code == 403
        assert response.json() == {"detail": "Invalid API key"}

    def test_invalid_body_without_key_is_401(self, client):
        """The key check runs before the body is validated."""
        response = client.put(f"/api/admin/blogs/{uuid4()}", json={"featured": None})

        assert response.status_code == 401
        assert response.json() == {"detail": "API key missing"}

    def test_invalid_body_with_wrong_key_is_403(self, client):
        response = client.post(
            "/api/admin/blogs",
            json=["not", "an", "object"],
            headers={"x-api-key": "wrong"},
        )

        assert response.status_code == 403
        assert response.json() == {"detail": "Invalid API key"}

    def test_admin_session_is_not_an_api_key(self, client):
        """The session cookie does not open the automation routes."""
        client.post("/api/login", json={"password": ADMIN_PASSWORD})

        response = client.post("/api/admin/blogs", json=NEW_POST)

        assert response.status_code == 401

    def test_api_key_does_not_open_session_routes(self, client):
        response = client.post("/api/blogs", json=NEW_POST, headers=HEADERS)

        assert response.status_code == 401


class TestAdminCreateBlog:
    """Tests for POST /api/admin/blogs."""

    def test_create_returns_blog_id(self, client):
        # Act
        response = client.post("/api/admin/blogs", json=NEW_POST, headers=HEADERS)

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True

        posts = client.get("/api/blogs").json()
        assert [p["_id"] for p in posts] == [data["blogId"]]
        assert posts[0]["excerpt"] == NEW_POST["content"] + "..."
        assert posts[0]["readTime"] == "1 min read"
        assert posts[0]["tags"] == ["digest"]
        assert posts[0]["featured"] is False

    @pytest.mark.parametrize(
        "payload",
        [
            {"content": "No title"},
            {"title": "No content"},
            {"title": "", "content": "Empty title"},
            {"title": "Empty content", "content": ""},
            {},
        ],
    )
    def test_missing_title_or_content(self, client, payload):
        response = client.post("/api/admin/blogs", json=payload, headers=HEADERS)

        assert response.status_code == 400
        assert response.json() == {"detail": "Title and content required"}
        assert client.get("/api/blogs").json() == []

    def test_featured_takes_truthiness(self, client):
        response = client.post(
            "/api/admin/blogs", json={**NEW_POST, "featured": "yes"}, headers=HEADERS
        )

        assert response.status_code == 201
        assert client.get("/api/blogs").json()[0]["featured"] is True

    def test_scalar_text_fields_are_stringified(self, client):
        response = client.post(
            "/api/admin/blogs",
            json={"title": 123, "category": True, "content": 4.5},
            headers=HEADERS,
        )

        assert response.status_code == 201
        post = client.get("/api/blogs").json()[0]
        assert post["title"] == "123"
        assert post["content"] == "4.5"
        assert post["tags"] == ["true"]

    @pytest.mark.parametrize("title", [{"text": "nested"}, ["list"]])
    def test_structured_title_counts_as_missing(self, client, title):
        response = client.post(
            "/api/admin/blogs",
            json={"title": title, "content": "Body"},
            headers=HEADERS,
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Title and content required"}


class TestAdminUpdateBlog:
    """Tests for PUT /api/admin/blogs/{id}."""

    def test_update_existing_post(self, client):
        blog_id = _create(client)

        response = client.put(
            f"/api/admin/blogs/{blog_id}",
            json={"title": "Edited", "tags": ["digest", "weekly"]},
            headers=HEADERS,
        )

        assert response.status_code == 200
        assert response.json() == {"success": True}
        post = client.get("/api/blogs").json()[0]
        assert post["title"] == "Edited"
        assert post["tags"] == ["digest", "weekly"]

    @pytest.mark.parametrize("post_id", [str(uuid4()), "not-a-uuid"])
    def test_update_missing_post_is_404(self, client, post_id):
        response = client.put(
            f"/api/admin/blogs/{post_id}", json={"title": "Ghost"}, headers=HEADERS
        )

        assert response.status_code == 404
        assert response.json() == {"detail": "Blog not found"}


class TestAdminDeleteBlog:
    """Tests for DELETE /api/admin/blogs/{id}."""

    def test_delete_existing_post(self, client):
        blog_id = _create(client)

        response = client.delete(f"/api/admin/blogs/{blog_id}", headers=HEADERS)

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert client.get("/api/blogs").json() == []

    def test_delete_missing_post_succeeds(self, client):
        response = client.delete(f"/api/admin/blogs/{uuid4()}", headers=HEADERS)

        assert response.status_code == 200
        assert response.json() == {"success": True}
