"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           User related errors
# ============================================================================


class FieldValidationError(DomainError):
    """Raised when a user record fails validation on a single field."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid user field '{field}': {reason}")
        self.field = field
        self.reason = reason


class UserDecodeError(DomainError):
    """Raised when a serialized user cannot be decoded."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Could not decode user: {reason}")
        self.reason = reason
