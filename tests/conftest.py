"""Test configuration and fixtures."""

from uuid import uuid4

import logfire

from inkwell.domain.model.comment import Comment, Reply
from inkwell.domain.value import Author, CommentId, Email, PostId, ReplyId

# Keep spans local; nothing is exported while tests run
logfire.configure(send_to_logfire=False, console=False)


def make_author(email: str = "alice@example.com", name: str = "Alice") -> Author:
    """Helper to build an author snapshot for test comments and replies."""
    return Author(name=name, email=Email(email))


def make_reply(text: str = "A reply", author: Author | None = None) -> Reply:
    """Helper to build a reply with a fresh id."""
    return Reply(id=ReplyId(uuid4()), author=author or make_author(), text=text)


def make_comment(
    post_id: PostId | None = None,
    text: str = "A comment",
    replies: tuple[Reply, ...] = (),
) -> Comment:
    """Helper to build a comment, optionally pre-populated with replies.

    Args:
        post_id: Post the comment belongs to, random when omitted
        text: Comment text
        replies: Replies already held by the comment

    Returns:
        Comment that has not been saved anywhere yet
    """
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id or PostId(uuid4()),
        author=make_author(),
        text=text,
        replies=replies,
    )
