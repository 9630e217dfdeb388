"""Add reply use case."""

from pydantic import BaseModel, Field

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.comment.view import ReplyItem, make_author, reply_item
from inkwell.domain.service import ReplyLedger
from inkwell.domain.value import CommentId, parse_identifier


class AddReplyRequest(BaseModel):
    """Add reply request."""

    comment_id: str  # UUID string
    text: str = Field(min_length=1, max_length=10000)
    author_email: str  # Session subject
    author_name: str | None = None
    author_photo_ref: str | None = None


class AddReplyUseCase(BaseUseCase):
    """Use case for replying to a comment."""

    def __init__(self, reply_ledger: ReplyLedger) -> None:
        """Initialize add reply use case.

        Args:
            reply_ledger: Reply ledger domain service
        """
        self.reply_ledger = reply_ledger

    async def execute(self, request: AddReplyRequest) -> ReplyItem:
        """Execute add reply flow.

        Returns:
            The new reply, including the generated reply_id

        Raises:
            InvalidIdentifierError: If comment_id is not a UUID
            NotFoundError: If the comment doesn't exist
        """
        comment_id = CommentId(parse_identifier(request.comment_id, "comment"))

        reply = await self.reply_ledger.add_reply(
            comment_id,
            make_author(
                request.author_email, request.author_name, request.author_photo_ref
            ),
            request.text,
        )
        return reply_item(reply)
