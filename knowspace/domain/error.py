"""Domain layer errors.

Every error a caller can act on is one of the classified kinds below;
the interface layer maps each kind to a status code.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidInputError(DomainError):
    """Raised when a request is malformed or violates a write-path rule.

    Covers missing fields, emojis outside the allowed set, replies past the
    depth cap and content targets that are not exactly one.
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConstraintConflictError(DomainError):
    """Raised when a write would break a uniqueness rule."""

    pass


class UnauthorizedError(DomainError):
    """Raised when a credential is missing, invalid or expired."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)
