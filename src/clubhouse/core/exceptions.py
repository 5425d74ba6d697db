class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class Unauthenticated(AuthenticationError):
    """Raised when a request carries no valid session or identity assertion."""


class NotAuthorizedOrNotFound(DomainError):
    """Raised when a resource is missing or owned by someone else.

    The two causes share one error and one response.
    """


class ConflictError(DomainError):
    """Raised on duplicates (registered email, attendance row)."""


class UpstreamIOError(DomainError):
    """Raised for disk or EXIF failures; callers degrade instead of failing."""
