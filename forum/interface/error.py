"""Interface layer errors.

Domain errors carry stable codes. ``DomainErrorTranslator`` turns a code into
the HTTP status and the message shown to API clients.
"""

from typing import Literal, NamedTuple

from fastapi import status

from forum.domain.error import (
    ContentValidationError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
)

GENERIC_SERVER_ERROR_MESSAGE = "An internal server error occurred"


class TranslatedError(NamedTuple):
    """HTTP rendering of an error."""

    status_code: int
    status: Literal["fail", "error"]
    message: str


def _fail(status_code: int, message: str) -> TranslatedError:
    return TranslatedError(status_code, "fail", message)


def _invalid(message: str) -> TranslatedError:
    return _fail(status.HTTP_400_BAD_REQUEST, message)


SERVER_ERROR = TranslatedError(
    status.HTTP_500_INTERNAL_SERVER_ERROR, "error", GENERIC_SERVER_ERROR_MESSAGE
)


class DomainErrorTranslator:
    """Fixed lookup from domain error codes to client-facing errors."""

    directory: dict[str, TranslatedError] = {
        # Threads
        "NEW_THREAD.NOT_CONTAIN_NEEDED_PROPERTY": _invalid(
            "cannot create thread because a required property is missing"
        ),
        "NEW_THREAD.NOT_MEET_DATA_TYPE_SPECIFICATION": _invalid(
            "cannot create thread because a property has the wrong data type"
        ),
        "ADDED_THREAD.NOT_CONTAIN_NEEDED_PROPERTY": _invalid(
            "cannot create thread because a required property is missing"
        ),
        "ADDED_THREAD.NOT_MEET_DATA_TYPE_SPECIFICATION": _invalid(
            "cannot create thread because a property has the wrong data type"
        ),
        "DETAILED_THREAD.NOT_CONTAIN_NEEDED_PROPERTY": _invalid(
            "cannot show thread because a required property is missing"
        ),
        "DETAILED_THREAD.NOT_MEET_DATA_TYPE_SPECIFICATION": _invalid(
            "cannot show thread because a property has the wrong data type"
        ),
        "THREAD.NOT_FOUND": _fail(status.HTTP_404_NOT_FOUND, "thread not found"),
        # Comments
        "NEW_COMMENT.NOT_CONTAIN_NEEDED_PROPERTY": _invalid(
            "cannot create comment because a required property is missing"
        ),
        "NEW_COMMENT.NOT_MEET_DATA_TYPE_SPECIFICATION": _invalid(
            "cannot create comment because a property has the wrong data type"
        ),
        "ADDED_COMMENT.NOT_CONTAIN_NEEDED_PROPERTY": _invalid(
            "cannot create comment because a required property is missing"
        ),
        "ADDED_COMMENT.NOT_MEET_DATA_TYPE_SPECIFICATION": _invalid(
            "cannot create comment because a property has the wrong data type"
        ),
        "DETAILED_COMMENT.NOT_CONTAIN_NEEDED_PROPERTY": _invalid(
            "cannot show comment because a required property is missing"
        ),
        "DETAILED_COMMENT.NOT_MEET_DATA_TYPE_SPECIFICATION": _invalid(
            "cannot show comment because a property has the wrong data type"
        ),
        "COMMENT.NOT_FOUND": _fail(status.HTTP_404_NOT_FOUND, "comment not found"),
        "COMMENT.NOT_OWNER": _fail(
            status.HTTP_403_FORBIDDEN, "you are not allowed to delete this comment"
        ),
        "COMMENT.DELETE_FAILED": SERVER_ERROR,
        # Replies
        "NEW_REPLY.NOT_CONTAIN_NEEDED_PROPERTY": _invalid(
            "cannot create reply because a required property is missing"
        ),
        "NEW_REPLY.NOT_MEET_DATA_TYPE_SPECIFICATION": _invalid(
            "cannot create reply because a property has the wrong data type"
        ),
        "ADDED_REPLY.NOT_CONTAIN_NEEDED_PROPERTY": _invalid(
            "cannot create reply because a required property is missing"
        ),
        "ADDED_REPLY.NOT_MEET_DATA_TYPE_SPECIFICATION": _invalid(
            "cannot create reply because a property has the wrong data type"
        ),
        "DETAILED_REPLY.NOT_CONTAIN_NEEDED_PROPERTY": _invalid(
            "cannot show reply because a required property is missing"
        ),
        "DETAILED_REPLY.NOT_MEET_DATA_TYPE_SPECIFICATION": _invalid(
            "cannot show reply because a property has the wrong data type"
        ),
        "REPLY.NOT_FOUND": _fail(status.HTTP_404_NOT_FOUND, "reply not found"),
        "REPLY.NOT_OWNER": _fail(
            status.HTTP_403_FORBIDDEN, "you are not allowed to delete this reply"
        ),
        "REPLY.DELETE_FAILED": SERVER_ERROR,
        # Users
        "USER.NOT_FOUND": _fail(status.HTTP_404_NOT_FOUND, "user not found"),
        # Likes
        "COMMENT_LIKE.ADD_FAILED": SERVER_ERROR,
        "COMMENT_LIKE.DELETE_FAILED": SERVER_ERROR,
        # Unimplemented repositories
        "THREAD_REPOSITORY.METHOD_NOT_IMPLEMENTED": SERVER_ERROR,
        "COMMENT_REPOSITORY.METHOD_NOT_IMPLEMENTED": SERVER_ERROR,
        "REPLY_REPOSITORY.METHOD_NOT_IMPLEMENTED": SERVER_ERROR,
        "COMMENT_LIKE_REPOSITORY.METHOD_NOT_IMPLEMENTED": SERVER_ERROR,
        "USER_REPOSITORY.METHOD_NOT_IMPLEMENTED": SERVER_ERROR,
    }

    @classmethod
    def translate(cls, error: Exception) -> TranslatedError:
        """Translate an error into its HTTP rendering.

        Codes missing from the directory fall back on the error type. Anything
        that is not a client error becomes an opaque server error.

        Args:
            error: The raised error

        Returns:
            Status code, envelope status and client-facing message
        """
        if not isinstance(error, DomainError):
            return SERVER_ERROR

        translated = cls.directory.get(error.code)
        if translated is not None:
            return translated

        if isinstance(error, ContentValidationError):
            return _invalid(str(error))
        if isinstance(error, NotFoundError):
            return _fail(
                status.HTTP_404_NOT_FOUND, f"{error.resource.lower()} not found"
            )
        if isinstance(error, NotAuthorizedError):
            return _fail(status.HTTP_403_FORBIDDEN, "you do not own this resource")
        return SERVER_ERROR
