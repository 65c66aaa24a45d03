"""Unit tests for derived post fields."""

import pytest

from blog.domain.service.derived_fields import (
    count_words,
    derive_fields,
    estimate_read_time,
    make_excerpt,
)


class TestMakeExcerpt:
    """Tests for make_excerpt."""

    def test_long_content_is_cut_at_100_characters(self):
        content = "a" * 150

        excerpt = make_excerpt(content)

        assert excerpt == "a" * 100 + "..."

    def test_cut_ignores_word_boundaries(self):
        content = "word " * 30

        excerpt = make_excerpt(content)

        assert excerpt == content[:100] + "..."
        assert excerpt.endswith(" ...")

    def test_short_content_still_gets_ellipsis(self):
        assert make_excerpt("Hello") == "Hello..."

    def test_empty_content(self):
        assert make_excerpt("") == "..."

    def test_counts_code_points_not_bytes(self):
        content = "é" * 120

        excerpt = make_excerpt(content)

        assert excerpt == "é" * 100 + "..."


class TestCountWords:
    """Tests for count_words."""

    def test_whitespace_runs_separate_words(self):
        assert count_words("one  two\tthree\n\nfour") == 4

    def test_empty_content_counts_as_one(self):
        assert count_words("") == 1

    def test_leading_whitespace_adds_a_piece(self):
        assert count_words("  one two") == 3


class TestEstimateReadTime:
    """Tests for estimate_read_time."""

    @pytest.mark.parametrize(
        ("words", "expected"),
        [
            (1, "1 min read"),
            (200, "1 min read"),
            (201, "2 min read"),
            (400, "2 min read"),
            (401, "3 min read"),
            (1000, "5 min read"),
        ],
    )
    def test_rounds_up_at_200_words_per_minute(self, words, expected):
        content = " ".join(["word"] * words)

        assert estimate_read_time(content) == expected

    def test_empty_content_reads_in_one_minute(self):
        assert estimate_read_time("") == "1 min read"


def test_derive_fields_combines_excerpt_and_read_time():
    content = " ".join(["lorem"] * 250)

    derived = derive_fields(content)

    assert derived.excerpt == content[:100] + "..."
    assert derived.read_time == "2 min read"
