"""PostgreSQL implementation of Post repository."""

from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

import logfire
from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.config import Settings
from blog.domain.model import Post, PostChanges, PostDraft
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostId
from blog.persistence.mappers import post_to_dict, row_to_post
from blog.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession, settings: Settings) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            settings: Application settings
        """
        self.session = session
        self.settings = settings

    async def find_all(self) -> List[Post]:
        """Return every post, newest first."""
        with logfire.span("post_repository.find_all"):
            stmt = select(posts_table).order_by(desc(posts_table.c.date))
            result = await self.session.execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]

            logfire.info("Found posts", count=len(posts))
            return posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            return row_to_post(row._asdict())

    async def create(self, draft: PostDraft) -> Post:
        """Insert a new post; id, date and author are assigned here."""
        post = Post(
            id=PostId(uuid4()),
            date=datetime.now(timezone.utc),
            author=self.settings.content.default_author,
            **draft.model_dump(),
        )

        with logfire.span(
            "post_repository.create", post_id=str(post.id), title=post.title
        ):
            stmt = posts_table.insert().values(**post_to_dict(post))
            await self.session.execute(stmt)
            await self.session.flush()

            logfire.info("Post inserted", post_id=str(post.id))
            return post

    async def update(self, post_id: PostId, changes: PostChanges) -> Optional[Post]:
        """Overwrite the supplied columns and return the updated row."""
        values = changes.as_update()

        with logfire.span(
            "post_repository.update", post_id=str(post_id), fields=sorted(values)
        ):
            if not values:
                return await self.find_by_id(post_id)

            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post_id)
                .values(**values)
                .returning(posts_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if row is None:
                logfire.warn("Post not found", post_id=str(post_id))
                return None

            await self.session.flush()
            return row_to_post(row._asdict())

    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete)."""
        stmt = posts_table.delete().where(posts_table.c.id == post_id)
        await self.session.execute(stmt)
        await self.session.flush()
