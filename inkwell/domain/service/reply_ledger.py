"""Reply ledger domain service.

Replies are stored inside their parent comment. Adding a reply is a single
atomic append in the store. Updating or deleting one is a read-modify-write
of the whole replies sequence, guarded by the comment's version: if another
writer touched the replies between the read and the write, the write is
rejected with ConcurrentModificationError and nothing is retried.
"""

from uuid import uuid4

import logfire

from inkwell.domain.error import (
    ConcurrentModificationError,
    NotFoundError,
    ReplyNotFoundError,
)
from inkwell.domain.model.comment import Comment, Reply
from inkwell.domain.model.common import utc_now
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import Author, CommentId, ReplyId

from .base import Service


class ReplyLedger(Service):
    """Owns creation, update and removal of replies nested in a comment."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize reply ledger.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def add_reply(self, comment_id: CommentId, author: Author, text: str) -> Reply:
        """Append a new reply to the end of a comment's replies.

        Args:
            comment_id: Parent comment ID
            author: Author snapshot
            text: Reply text

        Returns:
            The created reply, carrying its generated id

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("reply_ledger.add_reply", comment_id=str(comment_id)):
            reply = Reply(id=ReplyId(uuid4()), author=author, text=text)

            appended = await self.comment_repository.append_reply(comment_id, reply)
            if not appended:
                logfire.warn("Comment not found for reply", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Reply added",
                comment_id=str(comment_id),
                reply_id=str(reply.id),
            )
            return reply

    async def update_reply(
        self, comment_id: CommentId, reply_id: ReplyId, text: str
    ) -> Reply:
        """Replace the text of one reply in place.

        Order and every sibling reply are preserved unchanged.

        Args:
            comment_id: Parent comment ID
            reply_id: Reply ID
            text: New text

        Returns:
            The updated reply

        Raises:
            NotFoundError: If the comment doesn't exist
            ReplyNotFoundError: If the comment holds no reply with that id
            ConcurrentModificationError: If the replies changed since they were read
        """
        with logfire.span(
            "reply_ledger.update_reply",
            comment_id=str(comment_id),
            reply_id=str(reply_id),
        ):
            comment = await self._load_comment(comment_id)
            target = self._require_reply(comment, reply_id)

            updated = target.model_copy(update={"text": text, "updated_at": utc_now()})
            replies = tuple(
                updated if reply.id == reply_id else reply for reply in comment.replies
            )

            await self._write_replies(comment, replies)
            logfire.info(
                "Reply updated",
                comment_id=str(comment_id),
                reply_id=str(reply_id),
            )
            return updated

    async def delete_reply(self, comment_id: CommentId, reply_id: ReplyId) -> None:
        """Remove exactly one reply from a comment.

        Args:
            comment_id: Parent comment ID
            reply_id: Reply ID

        Raises:
            NotFoundError: If the comment doesn't exist
            ReplyNotFoundError: If the comment holds no reply with that id
            ConcurrentModificationError: If the replies changed since they were read
        """
        with logfire.span(
            "reply_ledger.delete_reply",
            comment_id=str(comment_id),
            reply_id=str(reply_id),
        ):
            comment = await self._load_comment(comment_id)
            self._require_reply(comment, reply_id)

            replies = tuple(reply for reply in comment.replies if reply.id != reply_id)

            await self._write_replies(comment, replies)
            logfire.info(
                "Reply deleted",
                comment_id=str(comment_id),
                reply_id=str(reply_id),
                remaining=len(replies),
            )

    async def _load_comment(self, comment_id: CommentId) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    @staticmethod
    def _require_reply(comment: Comment, reply_id: ReplyId) -> Reply:
        reply = comment.find_reply(reply_id)
        if reply is None:
            logfire.warn(
                "Reply not found",
                comment_id=str(comment.id),
                reply_id=str(reply_id),
            )
            raise ReplyNotFoundError(str(comment.id), str(reply_id))
        return reply

    async def _write_replies(self, comment: Comment, replies: tuple[Reply, ...]) -> None:
        written = await self.comment_repository.replace_replies(
            comment.id, replies, expected_version=comment.version
        )
        if written:
            return

        # Either the comment was deleted or another writer bumped the version
        if await self.comment_repository.find_by_id(comment.id) is None:
            logfire.warn("Comment deleted during reply write", comment_id=str(comment.id))
            raise NotFoundError("Comment", str(comment.id))

        logfire.warn(
            "Concurrent reply modification rejected",
            comment_id=str(comment.id),
            expected_version=comment.version,
        )
        raise ConcurrentModificationError("Comment", str(comment.id))
