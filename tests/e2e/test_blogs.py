"""End-to-end tests for the public listing and the admin UI post routes."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from tests.conftest import ADMIN_PASSWORD
from tests.harness import create_client_fixture

client = create_client_fixture()

NEW_POST = {
    "title": "Launch notes",
    "category": "releases",
    "content": "We shipped it. " * 30,
    "featured": True,
    "image": "https://example.com/launch.png",
}


@pytest.fixture
def admin(client):
    """Client holding a logged-in admin session."""
    response = client.post("/api/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client


class TestListBlogs:
    """Tests for GET /api/blogs."""

    def test_empty_list(self, client):
        response = client.get("/api/blogs")

        assert response.status_code == 200
        assert response.json() == []

    def test_listing_is_public_and_newest_first(self, admin):
        first = admin.post("/api/blogs", json={**NEW_POST, "title": "first"}).json()
        second = admin.post("/api/blogs", json={**NEW_POST, "title": "second"}).json()
        admin.post("/api/logout")

        response = admin.get("/api/blogs")

        assert response.status_code == 200
        posts = response.json()
        assert {p["_id"] for p in posts} == {first["_id"], second["_id"]}
        dates = [datetime.fromisoformat(p["date"]) for p in posts]
        assert dates == sorted(dates, reverse=True)


class TestCreateBlog:
    """Tests for POST /api/blogs."""

    def test_requires_session(self, client):
        response = client.post("/api/blogs", json=NEW_POST)

        assert response.status_code == 401
        assert response.json() == {"detail": "Unauthorized"}

    def test_invalid_body_without_session_is_401(self, client):
        """The session check runs before the body is validated."""
        response = client.post("/api/blogs", json={"title": "No content"})

        assert response.status_code == 401
        assert response.json() == {"detail": "Unauthorized"}
        assert client.get("/api/blogs").json() == []

    def test_create_returns_full_post(self, admin):
        # Act
        response = admin.post("/api/blogs", json=NEW_POST)

        # Assert
        assert response.status_code == 201
        post = response.json()
        assert post["_id"]
        assert post["title"] == "Launch notes"
        assert post["category"] == "releases"
        assert post["featured"] is True
        assert post["image"] == "https://example.com/launch.png"
        assert post["author"] == "Admin"
        assert post["tags"] == ["releases"]
        assert post["excerpt"] == NEW_POST["content"][:100] + "..."
        assert post["readTime"] == "1 min read"
        assert post["date"]

    def test_create_with_only_content(self, admin):
        response = admin.post("/api/blogs", json={"content": "Just words"})

        assert response.status_code == 201
        post = response.json()
        assert post["title"] is None
        assert post["featured"] is False
        assert post["tags"] == []

    def test_create_without_content_is_rejected(self, admin):
        response = admin.post("/api/blogs", json={"title": "No body"})

        assert response.status_code == 422


class TestUpdateBlog:
    """Tests for PUT /api/blogs/{id}."""

    def test_requires_session(self, admin):
        post = admin.post("/api/blogs", json=NEW_POST).json()
        admin.post("/api/logout")

        response = admin.put(f"/api/blogs/{post['_id']}", json={"title": "Hijack"})

        assert response.status_code == 401

    def test_invalid_body_without_session_is_401(self, client):
        response = client.put(f"/api/blogs/{uuid4()}", json={"featured": None})

        assert response.status_code == 401
        assert response.json() == {"detail": "Unauthorized"}

    def test_date_without_offset_is_stored_as_utc(self, admin):
        older = admin.post("/api/blogs", json={**NEW_POST, "title": "older"}).json()
        admin.post("/api/blogs", json={**NEW_POST, "title": "newer"})

        response = admin.put(
            f"/api/blogs/{older['_id']}", json={"date": "2024-01-01T00:00:00"}
        )
        assert response.status_code == 200

        listing = admin.get("/api/blogs")

        assert listing.status_code == 200
        posts = listing.json()
        assert [p["title"] for p in posts] == ["newer", "older"]
        assert datetime.fromisoformat(posts[1]["date"]) == datetime(
            2024, 1, 1, tzinfo=timezone.utc
        )

    def test_update_returns_updated_post(self, admin):
        post = admin.post("/api/blogs", json=NEW_POST).json()

        response = admin.put(
            f"/api/blogs/{post['_id']}",
            json={"_id": "ignored", "title": "Renamed", "content": "Short now"},
        )

        assert response.status_code == 200
        updated = response.json()
        assert updated["_id"] == post["_id"]
        assert updated["title"] == "Renamed"
        assert updated["content"] == "Short now"
        # Derived fields are left as they were
        assert updated["excerpt"] == post["excerpt"]
        assert updated["readTime"] == post["readTime"]

    def test_update_accepts_derived_fields(self, admin):
        post = admin.post("/api/blogs", json=NEW_POST).json()

        response = admin.put(
            f"/api/blogs/{post['_id']}",
            json={"readTime": "10 min read", "excerpt": "Hand written"},
        )

        assert response.json()["readTime"] == "10 min read"
        assert response.json()["excerpt"] == "Hand written"

    @pytest.mark.parametrize("post_id", [str(uuid4()), "not-a-uuid"])
    def test_update_missing_post_returns_null(self, admin, post_id):
        response = admin.put(f"/api/blogs/{post_id}", json={"title": "Ghost"})

        assert response.status_code == 200
        assert response.json() is None


class TestDeleteBlog:
    """Tests for DELETE /api/blogs/{id}."""

    def test_requires_session(self, client):
        response = client.delete(f"/api/blogs/{uuid4()}")

        assert response.status_code == 401

    def test_delete_removes_post(self, admin):
        post = admin.post("/api/blogs", json=NEW_POST).json()

        response = admin.delete(f"/api/blogs/{post['_id']}")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert admin.get("/api/blogs").json() == []

    def test_delete_missing_post_succeeds(self, admin):
        response = admin.delete(f"/api/blogs/{uuid4()}")

        assert response.status_code == 200
        assert response.json() == {"success": True}
