"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PersistenceError(DomainError):
    """Raised when a write that should have touched rows affected none.

    Usually means the row was removed or changed concurrently between the
    precondition check and the write.
    """

    def __init__(self, operation: str, resource_id: str):
        self.operation = operation
        self.resource_id = resource_id
        super().__init__(f"{operation} affected no rows: {resource_id}")
