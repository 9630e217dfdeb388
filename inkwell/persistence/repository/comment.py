"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional, Sequence

from sqlalchemy import literal, select, update
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.domain.model import Comment, Reply
from inkwell.domain.model.common import utc_now
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import CommentId, PostId
from inkwell.persistence.database import store_errors
from inkwell.persistence.mappers import (
    comment_to_dict,
    replies_to_json,
    reply_to_json,
    row_to_comment,
)
from inkwell.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Replies live in the ``replies`` JSONB column. Appends use the JSONB
    ``||`` operator in a single UPDATE; whole-array rewrites are guarded by
    the ``version`` column.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        async with store_errors(self.session, "comments.find_by_id"):
            stmt = select(comments_table).where(comments_table.c.id == comment_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post in creation order."""
        async with store_errors(self.session, "comments.find_by_post"):
            stmt = (
                select(comments_table)
                .where(comments_table.c.post_id == post_id)
                .order_by(comments_table.c.created_at, comments_table.c.id)
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment document."""
        async with store_errors(self.session, "comments.insert"):
            stmt = comments_table.insert().values(**comment_to_dict(comment))
            await self.session.execute(stmt)
            await self.session.flush()
            return comment

    async def update_text(self, comment_id: CommentId, text: str) -> Optional[Comment]:
        """Update the text content of a comment."""
        async with store_errors(self.session, "comments.update_text"):
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment_id)
                .values(text=text, updated_at=utc_now())
                .returning(comments_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if row is None:
                return None

            await self.session.flush()
            return row_to_comment(row._asdict())

    async def append_reply(self, comment_id: CommentId, reply: Reply) -> bool:
        """Atomically append a reply with a single JSONB concatenation."""
        async with store_errors(self.session, "comments.append_reply"):
            appended = literal([reply_to_json(reply)], type_=JSONB)
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment_id)
                .values(
                    replies=comments_table.c.replies.op("||", return_type=JSONB)(
                        appended
                    ),
                    version=comments_table.c.version + 1,
                )
                .returning(comments_table.c.id)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row is not None

    async def replace_replies(
        self,
        comment_id: CommentId,
        replies: Sequence[Reply],
        expected_version: int,
    ) -> bool:
        """Rewrite the replies array if the version is unchanged."""
        async with store_errors(self.session, "comments.replace_replies"):
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment_id)
                .where(comments_table.c.version == expected_version)
                .values(
                    replies=replies_to_json(replies),
                    version=comments_table.c.version + 1,
                )
                .returning(comments_table.c.id)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row is not None

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete, replies go with it)."""
        async with store_errors(self.session, "comments.delete"):
            stmt = (
                comments_table.delete()
                .where(comments_table.c.id == comment_id)
                .returning(comments_table.c.id)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row is not None
