"""initial_schema

Create the schema for the blog service:
- Posts (flat records; tags stored as a text array)
- Admin sessions (server-side state behind the admin.sid cookie)

Revision ID: 3f1c9a2d7b40
Revises:
Create Date: 2026-10-18 10:12:41.204518

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a2d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "posts",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("category", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column(
            "featured", sa.Boolean(), nullable=False, server_default=sa.text("false")
        ),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column(
            "date",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("read_time", sa.String(50), nullable=True),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column("excerpt", sa.Text(), nullable=True),
    )
    op.create_index("idx_posts_date", "posts", [sa.text("date DESC")])

    op.create_table(
        "admin_sessions",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column(
            "is_authenticated",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("false"),
        ),
        sa.Column("created_at", postgresql.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("expires_at", postgresql.TIMESTAMP(timezone=True), nullable=False),
    )
    op.create_index(
        "idx_admin_sessions_expires_at", "admin_sessions", ["expires_at"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_admin_sessions_expires_at", table_name="admin_sessions")
    op.drop_table("admin_sessions")
    op.drop_index("idx_posts_date", table_name="posts")
    op.drop_table("posts")
