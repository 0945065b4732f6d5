class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing, malformed or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced employee, entry or admin does not exist."""


class ConflictError(DomainError):
    """Raised when an operation clashes with the current stored state."""


class AlreadyOpenError(ConflictError):
    """Raised on clock-in while the employee already has an open entry."""


class NoOpenEntryError(ConflictError):
    """Raised on clock-out while the employee has no open entry."""


class DuplicatePinError(ConflictError):
    """Raised when a PIN is already assigned to another employee."""


class DuplicateAdminError(ConflictError):
    """Raised when the admin username or email is taken."""


class AuthenticationError(DomainError):
    """Raised when a credential, token or PIN is invalid."""


class AuthorizationError(DomainError):
    """Raised when the caller is not allowed to perform an action."""


class AdminSignupClosedError(AuthorizationError):
    """Raised on signup once an admin account exists."""


class AllocationExhaustedError(DomainError):
    """Raised when no free PIN was found within the attempt bound."""
