"""Create comment use case."""

from pydantic import BaseModel, Field

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.comment.view import (
    CommentItem,
    comment_item,
    make_author,
)
from inkwell.domain.service import CommentService
from inkwell.domain.value import PostId, parse_identifier


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    text: str = Field(min_length=1, max_length=10000)
    author_email: str  # Session subject
    author_name: str | None = None
    author_photo_ref: str | None = None


class CreateCommentUseCase(BaseUseCase):
    """Use case for creating a comment on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Raises:
            InvalidIdentifierError: If post_id is not a UUID
        """
        post_id = PostId(parse_identifier(request.post_id, "post"))

        comment = await self.comment_service.create_comment(
            post_id=post_id,
            author=make_author(
                request.author_email, request.author_name, request.author_photo_ref
            ),
            text=request.text,
        )
        return comment_item(comment)
