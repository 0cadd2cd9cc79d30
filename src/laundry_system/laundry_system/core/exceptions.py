class DomainError(Exception):
    """Base exception for business rule violations.

    ``kind`` is a short machine-readable tag; ``message`` is display-ready.
    """

    kind = "domain"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    kind = "validation"


class UniquenessError(DomainError):
    """Raised when a username or email is already taken."""

    kind = "uniqueness"


class SelectionError(DomainError):
    """Raised when a required reference (transaction, staff, service) was not chosen."""

    kind = "selection"


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    kind = "not_found"


class StoreError(DomainError):
    """Raised when the persistence gateway fails."""

    kind = "store"


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

    kind = "authentication"


class AuthorizationError(DomainError):
    """Raised when a role lacks permission for an action."""

    kind = "authorization"
