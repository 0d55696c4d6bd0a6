"""Comment routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Cookie, Header, status

from forum.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from forum.domain.repository import UserRepository
from forum.domain.service import AuthenticationService
from forum.interface.api.auth import authenticate_caller

router = APIRouter(
    prefix="/threads/{thread_id}/comments",
    tags=["comments"],
    route_class=DishkaRoute,
)


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_comment(
    thread_id: str,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    authentication: FromDishka[AuthenticationService],
    users: FromDishka[UserRepository],
    payload: dict[str, Any] | None = Body(default=None),
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> dict[str, Any]:
    """Comment on a thread.

    Requires authentication.

    Args:
        thread_id: Thread ID
        add_comment_use_case: Add comment use case from DI
        authentication: Verifies the caller token (injected)
        users: Records the caller's username (injected)
        payload: Raw comment body ({"content"})
        authorization: Bearer token header
        auth_token: Access token from cookie

    Returns:
        Envelope with the added comment
    """
    user_id = await authenticate_caller(
        authentication, users, authorization, auth_token
    )

    added_comment = await add_comment_use_case.execute(
        AddCommentRequest(user_id=user_id, thread_id=thread_id, payload=payload or {})
    )
    return {"status": "success", "data": {"addedComment": added_comment.model_dump()}}


@router.delete("/{comment_id}")
async def delete_comment(
    thread_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    authentication: FromDishka[AuthenticationService],
    users: FromDishka[UserRepository],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> dict[str, Any]:
    """Soft-delete a comment.

    Only the comment owner can delete it.
    """
    user_id = await authenticate_caller(
        authentication, users, authorization, auth_token
    )

    await delete_comment_use_case.execute(
        DeleteCommentRequest(
            user_id=user_id, thread_id=thread_id, comment_id=comment_id
        )
    )
    return {"status": "success", "message": "comment deleted"}
