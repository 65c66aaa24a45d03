"""Strongly typed identifiers for blog domain entities."""

from typing import NewType
from uuid import UUID

PostId = NewType("PostId", UUID)
SessionId = NewType("SessionId", str)
