"""Update reply use case."""

from pydantic import BaseModel, Field

from inkwell.application.usecase.base import BaseUseCase
from inkwell.application.usecase.comment.view import ReplyItem, reply_item
from inkwell.domain.service import ReplyLedger
from inkwell.domain.value import CommentId, ReplyId, parse_identifier


class UpdateReplyRequest(BaseModel):
    """Update reply request."""

    comment_id: str  # UUID string
    reply_id: str  # UUID string
    text: str = Field(min_length=1, max_length=10000)


class UpdateReplyUseCase(BaseUseCase):
    """Use case for editing the text of a reply."""

    def __init__(self, reply_ledger: ReplyLedger) -> None:
        """Initialize update reply use case.

        Args:
            reply_ledger: Reply ledger domain service
        """
        self.reply_ledger = reply_ledger

    async def execute(self, request: UpdateReplyRequest) -> ReplyItem:
        """Execute update reply flow.

        Raises:
            InvalidIdentifierError: If either id is not a UUID
            NotFoundError: If the comment doesn't exist
            ReplyNotFoundError: If the comment has no such reply
            ConcurrentModificationError: If the replies changed concurrently
        """
        comment_id = CommentId(parse_identifier(request.comment_id, "comment"))
        reply_id = ReplyId(parse_identifier(request.reply_id, "reply"))

        reply = await self.reply_ledger.update_reply(comment_id, reply_id, request.text)
        return reply_item(reply)
