"""Reply routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Cookie, Header, status

from forum.application.usecase.reply import (
    AddReplyRequest,
    AddReplyUseCase,
    DeleteReplyRequest,
    DeleteReplyUseCase,
)
from forum.domain.repository import UserRepository
from forum.domain.service import AuthenticationService
from forum.interface.api.auth import authenticate_caller

router = APIRouter(
    prefix="/threads/{thread_id}/comments/{comment_id}/replies",
    tags=["replies"],
    route_class=DishkaRoute,
)


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_reply(
    thread_id: str,
    comment_id: str,
    add_reply_use_case: FromDishka[AddReplyUseCase],
    authentication: FromDishka[AuthenticationService],
    users: FromDishka[UserRepository],
    payload: dict[str, Any] | None = Body(default=None),
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> dict[str, Any]:
    """Reply to a comment.

    Requires authentication.

    Args:
        thread_id: Thread ID
        comment_id: Comment ID
        add_reply_use_case: Add reply use case from DI
        authentication: Verifies the caller token (injected)
        users: Records the caller's username (injected)
        payload: Raw reply body ({"content"})
        authorization: Bearer token header
        auth_token: Access token from cookie

    Returns:
        Envelope with the added reply
    """
    user_id = await authenticate_caller(
        authentication, users, authorization, auth_token
    )

    added_reply = await add_reply_use_case.execute(
        AddReplyRequest(
            user_id=user_id,
            thread_id=thread_id,
            comment_id=comment_id,
            payload=payload or {},
        )
    )
    return {"status": "success", "data": {"addedReply": added_reply.model_dump()}}


@router.delete("/{reply_id}")
async def delete_reply(
    thread_id: str,
    comment_id: str,
    reply_id: str,
    delete_reply_use_case: FromDishka[DeleteReplyUseCase],
    authentication: FromDishka[AuthenticationService],
    users: FromDishka[UserRepository],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> dict[str, Any]:
    """Soft-delete a reply.

    Only the reply owner can delete it.
    """
    user_id = await authenticate_caller(
        authentication, users, authorization, auth_token
    )

    await delete_reply_use_case.execute(
        DeleteReplyRequest(
            user_id=user_id,
            thread_id=thread_id,
            comment_id=comment_id,
            reply_id=reply_id,
        )
    )
    return {"status": "success", "message": "reply deleted"}
