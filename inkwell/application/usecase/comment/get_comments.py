"""Get comments use case."""

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.comment.view import CommentItem, comment_item
from inkwell.domain.service import CommentService
from inkwell.domain.value import PostId, parse_identifier


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for listing the comments of a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        A post without comments yields an empty list, not an error.
        """
        post_id = PostId(parse_identifier(request.post_id, "post"))

        comments = await self.comment_service.get_comments_for_post(post_id)
        items = [comment_item(comment) for comment in comments]

        return GetCommentsResponse(
            post_id=str(post_id),
            comments=items,
            total=len(items),
        )
