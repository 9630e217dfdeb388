"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from inkwell.domain.model.comment import Comment, Reply
from inkwell.domain.model.common import utc_now
from inkwell.domain.repository.comment import CommentRepository
from inkwell.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Mirrors the store semantics: appends and versioned rewrites bump the
    comment's version.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post in creation order."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def insert(self, comment: Comment) -> Comment:
        """Insert a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_text(self, comment_id: CommentId, text: str) -> Optional[Comment]:
        """Update the text content of a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        updated = comment.model_copy(update={"text": text, "updated_at": utc_now()})
        self._comments[comment_id] = updated
        return updated

    async def append_reply(self, comment_id: CommentId, reply: Reply) -> bool:
        """Append a reply and bump the version."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return False

        self._comments[comment_id] = comment.model_copy(
            update={
                "replies": comment.replies + (reply,),
                "version": comment.version + 1,
            }
        )
        return True

    async def replace_replies(
        self,
        comment_id: CommentId,
        replies: Sequence[Reply],
        expected_version: int,
    ) -> bool:
        """Rewrite replies if the version still matches."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.version != expected_version:
            return False

        self._comments[comment_id] = comment.model_copy(
            update={"replies": tuple(replies), "version": comment.version + 1}
        )
        return True

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None
