"""Domain layer errors.

Every error carries a stable ``code``. The interface layer translates codes
into user-facing messages and HTTP statuses, so the codes must not change.
"""


class DomainError(Exception):
    """Base domain error."""

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str | None = None, code: str | None = None):
        if code is not None:
            self.code = code
        super().__init__(message or self.code)


class ContentValidationError(DomainError):
    """Raised when a payload cannot be turned into a domain entity.

    The code is ``<ENTITY>.NOT_CONTAIN_NEEDED_PROPERTY`` or
    ``<ENTITY>.NOT_MEET_DATA_TYPE_SPECIFICATION``.
    """

    def __init__(self, code: str):
        super().__init__(code, code=code)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f"{resource} not found: {identifier}",
            code=f"{resource.upper()}.NOT_FOUND",
        )


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}",
            code=f"{resource.upper()}.NOT_OWNER",
        )


class StorageInvariantError(DomainError):
    """Raised when a write that must touch exactly one row touched none."""

    def __init__(self, resource: str, operation: str, identifier: str):
        self.resource = resource
        self.operation = operation
        self.identifier = identifier
        super().__init__(
            f"Failed to {operation} {resource} {identifier}",
            code=f"{resource.upper()}.{operation.upper()}_FAILED",
        )


class UnimplementedError(DomainError):
    """Raised by repository contracts that have no concrete implementation."""

    def __init__(self, repository: str):
        code = f"{repository}.METHOD_NOT_IMPLEMENTED"
        super().__init__(code, code=code)
