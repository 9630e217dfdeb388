"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from inkwell.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from inkwell.domain.service import SessionGuard

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    post_id: str
    text: str = Field(min_length=1, max_length=10000)
    photo_ref: str | None = None


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    text: str = Field(min_length=1, max_length=10000)


@router.get("", response_model=GetCommentsResponse)
async def get_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    post_id: str = Query(...),
) -> GetCommentsResponse:
    """List the comments of a post in creation order, replies included."""
    return await get_comments_use_case.execute(GetCommentsRequest(post_id=post_id))


@router.get("/{comment_id}", response_model=CommentItem)
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> CommentItem:
    """Get one comment with its replies."""
    return await get_comment_use_case.execute(GetCommentRequest(comment_id=comment_id))


@router.post("", response_model=CommentItem, status_code=status.HTTP_201_CREATED)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    session_guard: FromDishka[SessionGuard],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Create a comment on a post.

    Requires authentication; the author is the signed-in user.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        session_guard: Session guard (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment
    """
    claims = session_guard.authenticate(auth_token)

    return await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=request.post_id,
            text=request.text,
            author_email=claims.subject,
            author_name=claims.name,
            author_photo_ref=request.photo_ref,
        )
    )


@router.patch("/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    session_guard: FromDishka[SessionGuard],
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Update a comment's text. Requires authentication."""
    session_guard.authenticate(auth_token)

    return await update_comment_use_case.execute(
        UpdateCommentRequest(comment_id=comment_id, text=request.text)
    )


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    session_guard: FromDishka[SessionGuard],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete a comment and its replies. Requires authentication."""
    session_guard.authenticate(auth_token)

    await delete_comment_use_case.execute(DeleteCommentRequest(comment_id=comment_id))
