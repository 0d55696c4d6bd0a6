"""Thread routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Cookie, Header, status

from forum.application.usecase.thread import (
    AddThreadRequest,
    AddThreadUseCase,
    GetThreadDetailRequest,
    GetThreadDetailUseCase,
)
from forum.domain.repository import UserRepository
from forum.domain.service import AuthenticationService
from forum.interface.api.auth import authenticate_caller

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_thread(
    add_thread_use_case: FromDishka[AddThreadUseCase],
    authentication: FromDishka[AuthenticationService],
    users: FromDishka[UserRepository],
    payload: dict[str, Any] | None = Body(default=None),
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> dict[str, Any]:
    """Start a new thread.

    Requires authentication.

    Args:
        add_thread_use_case: Add thread use case from DI
        authentication: Verifies the caller token (injected)
        users: Records the caller's username (injected)
        payload: Raw thread body ({"title", "body"})
        authorization: Bearer token header
        auth_token: Access token from cookie

    Returns:
        Envelope with the added thread
    """
    user_id = await authenticate_caller(
        authentication, users, authorization, auth_token
    )

    added_thread = await add_thread_use_case.execute(
        AddThreadRequest(user_id=user_id, payload=payload or {})
    )
    return {"status": "success", "data": {"addedThread": added_thread.model_dump()}}


@router.get("/{thread_id}")
async def get_thread_detail(
    thread_id: str,
    get_thread_detail_use_case: FromDishka[GetThreadDetailUseCase],
) -> dict[str, Any]:
    """Get a thread with its comments and replies.

    Public endpoint. Deleted comments and replies are shown with masked
    content.

    Args:
        thread_id: Thread ID
        get_thread_detail_use_case: Get thread detail use case from DI

    Returns:
        Envelope with the detailed thread
    """
    thread = await get_thread_detail_use_case.execute(
        GetThreadDetailRequest(thread_id=thread_id)
    )
    return {"status": "success", "data": {"thread": thread.model_dump(by_alias=True)}}
