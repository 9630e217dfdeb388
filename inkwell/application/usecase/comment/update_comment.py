"""Update comment use case."""

from pydantic import BaseModel, Field

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.comment.view import CommentItem, comment_item
from inkwell.domain.service import CommentService
from inkwell.domain.value import CommentId, parse_identifier


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    text: str = Field(min_length=1, max_length=10000)


class UpdateCommentUseCase(BaseUseCase):
    """Use case for updating a comment's text content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Replies are left untouched.

        Raises:
            InvalidIdentifierError: If comment_id is not a UUID
            NotFoundError: If the comment doesn't exist
        """
        comment_id = CommentId(parse_identifier(request.comment_id, "comment"))
        updated = await self.comment_service.update_text(comment_id, request.text)
        return comment_item(updated)
