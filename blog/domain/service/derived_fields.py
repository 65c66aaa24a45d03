"""Fields derived from post content.

Pure functions; called once when a post is created.
"""

import math
import re

from blog.domain.value import DerivedFields

EXCERPT_LENGTH = 100
EXCERPT_SUFFIX = "..."
WORDS_PER_MINUTE = 200

_WHITESPACE = re.compile(r"\s+")


def make_excerpt(content: str) -> str:
    """First 100 characters of ``content`` followed by an ellipsis.

    The cut ignores word boundaries, and the ellipsis is appended even when
    the content is shorter than the limit.
    """
    return content[:EXCERPT_LENGTH] + EXCERPT_SUFFIX


def count_words(content: str) -> int:
    """Number of pieces between whitespace runs.

    Empty content still counts as one word, and leading or trailing
    whitespace adds an empty piece to the count.
    """
    return len(_WHITESPACE.split(content))


def estimate_read_time(content: str) -> str:
    """Reading time at 200 words per minute, rounded up, e.g. ``"4 min read"``."""
    minutes = math.ceil(count_words(content) / WORDS_PER_MINUTE)
    return f"{minutes} min read"


def derive_fields(content: str) -> DerivedFields:
    """Compute the excerpt and reading time for new content."""
    return DerivedFields(
        excerpt=make_excerpt(content),
        read_time=estimate_read_time(content),
    )
