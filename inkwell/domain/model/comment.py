"""Comment entity.

Comments are top-level annotations on a post. Each comment owns an ordered
sequence of replies embedded in the same document; a reply has no storage
location or identity outside its parent.
"""

from datetime import datetime

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utc_now
from inkwell.domain.value import Author, CommentId, PostId, ReplyId


class Reply(DomainModel):
    """Reply nested inside a comment.

    The id is generated by the reply ledger, never by the caller, and is
    never reused within the parent comment after deletion.
    """

    id: ReplyId
    author: Author
    text: str = Field(min_length=1, max_length=10000)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post together with its replies.

    Concurrency of the replies sequence is tracked through:
    - version: bumped by the store on every write to ``replies``; a
      whole-sequence rewrite only lands if the version is unchanged since
      the comment was read
    """

    id: CommentId
    post_id: PostId
    author: Author
    text: str = Field(min_length=1, max_length=10000)
    replies: tuple[Reply, ...] = ()
    version: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    def find_reply(self, reply_id: ReplyId) -> Reply | None:
        """Return the reply whose id equals ``reply_id`` exactly."""
        for reply in self.replies:
            if reply.id == reply_id:
                return reply
        return None
