"""Response shapes shared by comment and reply use cases."""

from datetime import datetime

from pydantic import BaseModel

from inkwell.domain.model.comment import Comment, Reply
from inkwell.domain.value import Author, Email


class AuthorItem(BaseModel):
    """Author in response."""

    name: str
    email: str
    photo_ref: str | None


class ReplyItem(BaseModel):
    """Reply in response."""

    reply_id: str
    author: AuthorItem
    text: str
    created_at: datetime
    updated_at: datetime


class CommentItem(BaseModel):
    """Comment in response, with its replies in order."""

    comment_id: str
    post_id: str
    author: AuthorItem
    text: str
    replies: list[ReplyItem]
    created_at: datetime
    updated_at: datetime


def make_author(email: str, name: str | None, photo_ref: str | None = None) -> Author:
    """Build the author snapshot of the signed-in user."""
    return Author(name=name or email, email=Email(email), photo_ref=photo_ref)


def author_item(author: Author) -> AuthorItem:
    return AuthorItem(
        name=author.name, email=author.email.root, photo_ref=author.photo_ref
    )


def reply_item(reply: Reply) -> ReplyItem:
    return ReplyItem(
        reply_id=str(reply.id),
        author=author_item(reply.author),
        text=reply.text,
        created_at=reply.created_at,
        updated_at=reply.updated_at,
    )


def comment_item(comment: Comment) -> CommentItem:
    return CommentItem(
        comment_id=str(comment.id),
        post_id=str(comment.post_id),
        author=author_item(comment.author),
        text=comment.text,
        replies=[reply_item(reply) for reply in comment.replies],
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )
