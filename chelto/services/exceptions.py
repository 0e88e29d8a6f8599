"""
Registration Service Domain Exceptions

All exceptions raised by the registration and retrieval services.
"""


class RegistrationServiceError(Exception):
    """Base exception for registration service errors"""
    pass


class ValidationError(RegistrationServiceError):
    """Raised when a required field is blank or the city is unknown"""

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f"{field} is required")


class DuplicateError(RegistrationServiceError):
    """Raised when the email or phone is already registered"""

    def __init__(self, field: str):
        self.field = field
        super().__init__(
            f'This {field} is already registered. '
            'Use "Get Promocode" to retrieve your code.'
        )


class NotFoundError(RegistrationServiceError):
    """Raised when no registration matches the email and phone pair"""

    def __init__(self):
        super().__init__("No registration found with these details. Please register first.")


# ====================================================================================
# Store failures
# ====================================================================================

class PersistenceError(RegistrationServiceError):
    """Raised when the record store is unreachable or a query/insert fails"""
    pass


class UniqueViolation(PersistenceError):
    """Raised when an insert violates a unique index"""
    pass
