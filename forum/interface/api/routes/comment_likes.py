"""Comment like routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from forum.application.usecase.comment_like import (
    ToggleCommentLikeRequest,
    ToggleCommentLikeUseCase,
)
from forum.domain.repository import UserRepository
from forum.domain.service import AuthenticationService
from forum.interface.api.auth import authenticate_caller

router = APIRouter(tags=["likes"], route_class=DishkaRoute)


@router.put("/threads/{thread_id}/comments/{comment_id}/likes")
async def toggle_comment_like(
    thread_id: str,
    comment_id: str,
    toggle_comment_like_use_case: FromDishka[ToggleCommentLikeUseCase],
    authentication: FromDishka[AuthenticationService],
    users: FromDishka[UserRepository],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> dict[str, Any]:
    """Like a comment, or remove the like if the caller already liked it.

    Requires authentication.
    """
    user_id = await authenticate_caller(
        authentication, users, authorization, auth_token
    )

    await toggle_comment_like_use_case.execute(
        ToggleCommentLikeRequest(
            thread_id=thread_id, comment_id=comment_id, user_id=user_id
        )
    )
    return {"status": "success"}
