"""SQLAlchemy table definitions for the blog service.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Boolean, Column, Index, MetaData, String, Table, Text
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", Text, nullable=True),
    Column("category", Text, nullable=True),
    Column("content", Text, nullable=True),
    Column("featured", Boolean, nullable=False, server_default="false"),
    Column("image", Text, nullable=True),
    Column("date", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
    Column("author", String(255), nullable=False),
    Column("read_time", String(50), nullable=True),  # e.g. "4 min read"
    Column(
        "tags",
        postgresql.ARRAY(Text),
        nullable=False,
        server_default="{}",
    ),
    Column("excerpt", Text, nullable=True),
)

Index("idx_posts_date", posts_table.c.date.desc())

# ============================================================================
# ADMIN SESSIONS TABLE
# ============================================================================
admin_sessions_table = Table(
    "admin_sessions",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("is_authenticated", Boolean, nullable=False, server_default="false"),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
)

Index("idx_admin_sessions_expires_at", admin_sessions_table.c.expires_at)
