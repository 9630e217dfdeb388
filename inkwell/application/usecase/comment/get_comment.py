"""Get comment use case."""

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.comment.view import CommentItem, comment_item
from inkwell.domain.service import CommentService
from inkwell.domain.value import CommentId, parse_identifier


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str  # UUID string


class GetCommentUseCase(BaseUseCase):
    """Use case for reading one comment with its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        comment_id = CommentId(parse_identifier(request.comment_id, "comment"))
        comment = await self.comment_service.get_comment(comment_id)
        return comment_item(comment)
