class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTimeFormatError(ValidationError):
    """Raised when a manually entered time is not strict HH:mm."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when an employee or attendance record does not exist."""


class DuplicateIdentifierError(DomainError):
    """Raised when adding an employee whose id is already taken."""


class LastAdminViolationError(DomainError):
    """Raised when removing the only remaining HR account."""
