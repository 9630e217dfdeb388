"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from inkwell.domain.model.comment import Comment, Reply
from inkwell.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment documents.

    Defines the contract for comment persistence operations.
    Replies live inside the comment document, so every reply mutation goes
    through this repository. Implementations live in the infrastructure
    layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post in creation order.

        Args:
            post_id: The post ID

        Returns:
            List of comments, empty if the post has none
        """
        pass

    @abstractmethod
    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment document.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def update_text(self, comment_id: CommentId, text: str) -> Optional[Comment]:
        """Replace the text of a comment, leaving its replies untouched.

        Args:
            comment_id: Comment ID
            text: New text

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def append_reply(self, comment_id: CommentId, reply: Reply) -> bool:
        """Atomically append a reply to the end of a comment's replies.

        The append is a single store-side operation and bumps the comment's
        version, so it never overwrites a concurrent write.

        Args:
            comment_id: Parent comment ID
            reply: Reply to append

        Returns:
            True if appended, False if the comment does not exist
        """
        pass

    @abstractmethod
    async def replace_replies(
        self,
        comment_id: CommentId,
        replies: Sequence[Reply],
        expected_version: int,
    ) -> bool:
        """Write the whole replies sequence of a comment.

        The write only happens if the stored version still equals
        ``expected_version``; the version is then incremented.

        Args:
            comment_id: Parent comment ID
            replies: The complete new replies sequence
            expected_version: Version observed when the comment was read

        Returns:
            True if written, False if the comment is gone or was modified
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment together with its replies.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was deleted, False if none existed
        """
        pass
