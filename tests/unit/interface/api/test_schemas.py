"""Unit tests for API request bodies."""

import pytest
from pydantic import ValidationError

from blog.interface.api.schemas import (
    AdminCreateBlogAPIRequest,
    CreateBlogAPIRequest,
    UpdateBlogAPIRequest,
)


class TestCreateBlogAPIRequest:
    """Tests for CreateBlogAPIRequest."""

    def test_content_is_required(self):
        with pytest.raises(ValidationError):
            CreateBlogAPIRequest(title="No body")

    def test_null_featured_defaults_to_false(self):
        body = CreateBlogAPIRequest(content="Body", featured=None)

        assert body.featured is False


class TestAdminCreateBlogAPIRequest:
    """Tests for AdminCreateBlogAPIRequest."""

    @pytest.mark.parametrize(
        ("payload", "missing"),
        [
            ({}, ["title", "content"]),
            ({"title": "Only title"}, ["content"]),
            ({"content": "Only content"}, ["title"]),
            ({"title": "", "content": "Body"}, ["title"]),
            ({"title": "Both", "content": "Body"}, []),
        ],
    )
    def test_missing_required(self, payload, missing):
        body = AdminCreateBlogAPIRequest(**payload)

        assert body.missing_required() == missing

    @pytest.mark.parametrize(
        ("sent", "expected"),
        [(None, False), (0, False), ("", False), (1, True), ("yes", True), (True, True)],
    )
    def test_featured_takes_truthiness(self, sent, expected):
        body = AdminCreateBlogAPIRequest(title="t", content="c", featured=sent)

        assert body.featured is expected

    @pytest.mark.parametrize(
        ("sent", "expected"),
        [
            (123, "123"),
            (4.5, "4.5"),
            (True, "true"),
            (False, "false"),
            ({}, None),
            ([1], None),
        ],
    )
    def test_text_fields_coerce_scalars(self, sent, expected):
        body = AdminCreateBlogAPIRequest(title=sent, category=sent, content="c")

        assert body.title == expected
        assert body.category == expected


class TestUpdateBlogAPIRequest:
    """Tests for UpdateBlogAPIRequest."""

    def test_to_changes_keeps_only_sent_keys(self):
        body = UpdateBlogAPIRequest.model_validate(
            {"title": "New", "readTime": "7 min read", "_id": "ignored", "bogus": 1}
        )

        assert body.to_changes().as_update() == {
            "title": "New",
            "read_time": "7 min read",
        }

    def test_image_can_be_cleared(self):
        body = UpdateBlogAPIRequest.model_validate({"image": None})

        assert body.to_changes().as_update() == {"image": None}

    @pytest.mark.parametrize("field", ["featured", "date", "author", "tags"])
    def test_required_fields_cannot_be_null(self, field):
        with pytest.raises(ValidationError):
            UpdateBlogAPIRequest.model_validate({field: None})
