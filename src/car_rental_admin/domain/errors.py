"""Domain error classes.

Protocol-agnostic errors raised by the rental core. Protocol adapters (the
HTTP layer today) translate them into their own error formats.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Carries a stable error code (usable as an i18n key), a human-readable
    message and arbitrary structured context.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for the error (field names, ids, ...)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - Contract submitted without a customer or car
        - Booking period whose end precedes its start
        - Paging outside the allowed window

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: Field-specific errors, each with 'field', 'message' and 'code'
                   Example: [{"field": "car_id", "message": "Select a car"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Resource not found.

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Car", "Contract")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """Business constraint conflict.

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "CONFLICT"


class BookingConflictError(ConflictError):
    """The requested period overlaps existing bookings of the same car.

    The conflicting windows travel in the ``conflicts`` context entry as
    ``{"start": "YYYY-MM-DD", "end": "YYYY-MM-DD"}`` dicts.
    """

    def __init__(self, car_id: str, conflicts: list[dict[str, str]]) -> None:
        windows = ", ".join(f"{c['start']} to {c['end']}" for c in conflicts)
        super().__init__(
            f"Car '{car_id}' is already booked for: {windows}",
            car_id=car_id,
            conflicts=conflicts,
        )


class PersistenceError(DomainError):
    """The backing data store rejected or failed an operation.

    The store's message is kept verbatim; callers decide whether to retry.

    Protocol mappings:
        - REST: 503 Service Unavailable
    """

    error_code: str = "PERSISTENCE_ERROR"

