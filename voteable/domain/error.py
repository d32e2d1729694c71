"""Domain layer errors."""

from voteable.domain.value import Disposition


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidVoteableError(DomainError):
    """Raised when the vote target's type does not carry the Voteable marker.

    This is a programming error: callers must only pass voteable entities.
    """

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Entity kind '{kind}' is not voteable")


class AlreadyVotedError(DomainError):
    """Raised when a voter casts the disposition they already hold."""

    def __init__(self, disposition: Disposition):
        self.disposition = disposition
        super().__init__(f"Already voted {disposition.value}")


class NotVotedError(DomainError):
    """Raised when retracting a vote that was never cast."""

    def __init__(self, message: str = "No vote to retract"):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
