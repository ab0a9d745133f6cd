"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidVoteError(ValidationError):
    """Raised when a vote intent is missing a required identifier."""

    def __init__(self, message: str):
        super().__init__(message)


class InconsistentVoteStateError(InvalidVoteError):
    """Raised when a vote snapshot claims both an upvote and a downvote.

    The snapshot is supplied by the caller; receiving one like this means the
    caller's view of the votable is corrupt.
    """

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(
            f"Vote state for user {user_id} cannot be both upvoted and downvoted"
        )


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class ConflictError(DomainError):
    """Raised when a unique attribute is already taken."""

    def __init__(self, resource: str, field: str, value: str):
        self.resource = resource
        self.field = field
        self.value = value
        super().__init__(f"{resource} with {field} '{value}' already exists")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
