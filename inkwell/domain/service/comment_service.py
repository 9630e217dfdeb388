"""Comment domain service."""

import logfire
from uuid import uuid4

from inkwell.domain.error import NotFoundError
from inkwell.domain.model.comment import Comment
from inkwell.domain.repository import CommentRepository
from inkwell.domain.value import Author, CommentId, PostId

from .base import Service


class CommentService(Service):
    """Domain service for top-level comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(self, post_id: PostId, author: Author, text: str) -> Comment:
        """Create a comment on a post.

        Args:
            post_id: Post ID
            author: Author snapshot
            text: Comment text

        Returns:
            Created comment, with no replies
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_email=author.email.root,
        ):
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author=author,
                text=text,
            )

            saved = await self.comment_repository.insert(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
            )
            return saved

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments for a post in creation order.

        Args:
            post_id: Post ID

        Returns:
            List of comments, possibly empty
        """
        with logfire.span(
            "comment_service.get_comments_for_post", post_id=str(post_id)
        ):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post",
                post_id=str(post_id),
                count=len(comments),
            )
            return comments

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            The comment

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def update_text(self, comment_id: CommentId, text: str) -> Comment:
        """Update the text content of a comment.

        Args:
            comment_id: Comment ID
            text: New text content

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span(
            "comment_service.update_text",
            comment_id=str(comment_id),
            text_length=len(text),
        ):
            updated = await self.comment_repository.update_text(comment_id, text)

            if not updated:
                logfire.warn(
                    "Comment not found for text update",
                    comment_id=str(comment_id),
                )
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment text updated",
                comment_id=str(comment_id),
                post_id=str(updated.post_id),
            )
            return updated

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment and every reply it holds.

        Args:
            comment_id: Comment ID

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            deleted = await self.comment_repository.delete(comment_id)
            if not deleted:
                logfire.warn("Comment not found for delete", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            logfire.info("Comment deleted", comment_id=str(comment_id))
