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
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class ContentDeletedException(DomainError):
    """Raised when attempting to change deleted content."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"Cannot modify deleted {resource} {resource_id}")


class DepthLimitExceededError(DomainError):
    """Raised when a reply would nest deeper than the thread allows."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Replies cannot be nested deeper than {max_depth} levels")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AlreadyVotedError(DomainError):
    """Raised when a user votes twice on the same poll."""

    def __init__(self, poll_id: str):
        self.poll_id = poll_id
        super().__init__(f"Already voted on poll {poll_id}")
