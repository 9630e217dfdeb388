"""Reply routes.

Replies are addressed through their parent comment only.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel, Field

from inkwell.application.usecase.comment import ReplyItem
from inkwell.application.usecase.reply import (
    AddReplyRequest,
    AddReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
    UpdateReplyRequest,
    UpdateReplyUseCase,
)
from inkwell.domain.service import SessionGuard

router = APIRouter(prefix="/comments", tags=["replies"], route_class=DishkaRoute)


class ReplyAPIRequest(BaseModel):
    """API request carrying reply text."""

    text: str = Field(min_length=1, max_length=10000)


class AddReplyAPIRequest(ReplyAPIRequest):
    """API request for adding a reply."""

    photo_ref: str | None = None


@router.post(
    "/{comment_id}/replies",
    response_model=ReplyItem,
    status_code=status.HTTP_201_CREATED,
)
async def add_reply(
    comment_id: str,
    request: AddReplyAPIRequest,
    add_reply_use_case: FromDishka[AddReplyUseCase],
    session_guard: FromDishka[SessionGuard],
    auth_token: str | None = Cookie(default=None),
) -> ReplyItem:
    """Append a reply to a comment.

    Requires authentication. The response carries the generated reply_id
    used to address the reply later.
    """
    claims = session_guard.authenticate(auth_token)

    return await add_reply_use_case.execute(
        AddReplyRequest(
            comment_id=comment_id,
            text=request.text,
            author_email=claims.subject,
            author_name=claims.name,
            author_photo_ref=request.photo_ref,
        )
    )


@router.patch("/{comment_id}/replies/{reply_id}", response_model=ReplyItem)
async def update_reply(
    comment_id: str,
    reply_id: str,
    request: ReplyAPIRequest,
    update_reply_use_case: FromDishka[UpdateReplyUseCase],
    session_guard: FromDishka[SessionGuard],
    auth_token: str | None = Cookie(default=None),
) -> ReplyItem:
    """Edit a reply's text. Requires authentication.

    Answers 409 when another write to the same comment's replies landed
    between read and write; the caller may reload and retry.
    """
    session_guard.authenticate(auth_token)

    return await update_reply_use_case.execute(
        UpdateReplyRequest(comment_id=comment_id, reply_id=reply_id, text=request.text)
    )


@router.delete(
    "/{comment_id}/replies/{reply_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def delete_reply(
    comment_id: str,
    reply_id: str,
    delete_reply_use_case: FromDishka[DeleteReplyUseCase],
    session_guard: FromDishka[SessionGuard],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Remove a reply. Requires authentication."""
    session_guard.authenticate(auth_token)

    await delete_reply_use_case.execute(
        DeleteReplyRequest(comment_id=comment_id, reply_id=reply_id)
    )
