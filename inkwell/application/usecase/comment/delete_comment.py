"""Delete comment use case."""

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import CommentService
from inkwell.domain.value import CommentId, parse_identifier


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment together with its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        comment_id = CommentId(parse_identifier(request.comment_id, "comment"))
        await self.comment_service.delete_comment(comment_id)
