"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidArgumentError(DomainError):
    """Raised when a request breaks a business rule on its inputs.

    Examples: voting on your own content, an unknown vote direction.
    """

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts an action reserved for the content owner."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a write collides with a uniqueness constraint."""

    def __init__(self, resource: str, key: str):
        self.resource = resource
        self.key = key
        super().__init__(f"Duplicate {resource}: {key}")
