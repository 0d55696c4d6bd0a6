"""Thread use cases."""

from .add_thread import AddThreadRequest, AddThreadUseCase
from .get_thread_detail import GetThreadDetailRequest, GetThreadDetailUseCase

__all__ = [
    "AddThreadRequest",
    "AddThreadUseCase",
    "GetThreadDetailRequest",
    "GetThreadDetailUseCase",
]
