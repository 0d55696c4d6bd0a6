"""Base use case."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One forum operation, run against the repositories it was built with.

    Requests are pydantic models carrying the caller's id and the raw
    payload. Domain errors raised by entities or repositories propagate.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT:
        pass
