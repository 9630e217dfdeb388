"""Delete reply use case."""

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import ReplyLedger
from inkwell.domain.value import CommentId, ReplyId, parse_identifier


class DeleteReplyRequest(BaseModel):
    """Delete reply request."""

    comment_id: str  # UUID string
    reply_id: str  # UUID string


class DeleteReplyUseCase(BaseUseCase):
    """Use case for removing a reply from a comment."""

    def __init__(self, reply_ledger: ReplyLedger) -> None:
        self.reply_ledger = reply_ledger

    async def execute(self, request: DeleteReplyRequest) -> None:
        comment_id = CommentId(parse_identifier(request.comment_id, "comment"))
        reply_id = ReplyId(parse_identifier(request.reply_id, "reply"))
        await self.reply_ledger.delete_reply(comment_id, reply_id)
