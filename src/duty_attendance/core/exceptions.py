class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidClassError(ValidationError):
    """Raised when a grade/section pair is not in the class catalogue."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class SessionNotFoundError(NotFoundError):
    pass


class StudentNotFoundError(NotFoundError):
    pass


class TeacherNotFoundError(NotFoundError):
    pass


class UserNotFoundError(NotFoundError):
    pass


class EntryNotFoundError(NotFoundError):
    pass
