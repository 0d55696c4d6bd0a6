"""Add thread use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import AddedThread, NewThread
from forum.domain.repository import ThreadRepository
from forum.domain.value import UserId


class AddThreadRequest(BaseModel):
    """Add thread request."""

    user_id: str  # User ID from authenticated user
    payload: dict[str, Any]  # Raw request body


class AddThreadUseCase(BaseUseCase[AddThreadRequest, AddedThread]):
    """Use case for starting a new thread."""

    def __init__(self, thread_repository: ThreadRepository) -> None:
        """Initialize add thread use case.

        Args:
            thread_repository: Thread repository
        """
        self.thread_repository = thread_repository

    async def execute(self, request: AddThreadRequest) -> AddedThread:
        """Validate the payload and store the thread.

        Raises:
            ContentValidationError: If the payload is not a valid thread
        """
        with logfire.span("add_thread.execute", user_id=request.user_id):
            new_thread = NewThread.create(request.payload)
            added = await self.thread_repository.add_thread(
                UserId(request.user_id), new_thread
            )
            logfire.info("Thread created", thread_id=added.id, owner=added.owner)
            return added
