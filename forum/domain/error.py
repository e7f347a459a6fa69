"""Domain layer errors.

Expected failures of forum operations surface as one of these. Storage
failures are wrapped in TransactionFailure by the transaction manager.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class ConflictError(DomainError):
    """Raised when a write collides with existing state (duplicate vote, taken username)."""

    pass


class AuthorizationError(DomainError):
    """Raised when a principal mutates content it is not allowed to touch."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class TransactionFailure(DomainError):
    """Raised when the storage write or commit of an operation failed.

    The whole logical operation has been rolled back; callers may retry it.
    """

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Transaction failed during {operation}: {reason}")
