"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "payment_mode",
                "message": "Select a payment mode",
                "code": "REQUIRED",
            }
        }
    )


class ConflictWindow(BaseModel):
    """An existing booking that blocks the requested period."""

    start: date
    end: date


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Simple errors (just detail and code)
    - Multi-field validation errors (detail + errors array)
    - Booking conflicts (detail + conflicts array)

    Examples:
        Simple error:
            {
                "detail": "Contract with identifier '...' not found",
                "code": "NOT_FOUND"
            }

        Booking conflict:
            {
                "detail": "Car '...' is already booked for: 2025-01-10 to 2025-01-15",
                "code": "CONFLICT",
                "conflicts": [{"start": "2025-01-10", "end": "2025-01-15"}]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None
    conflicts: list[ConflictWindow] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Contract not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "customer_id",
                            "message": "Select a customer",
                            "code": "REQUIRED",
                        },
                        {
                            "field": "car_id",
                            "message": "Select a car",
                            "code": "REQUIRED",
                        },
                    ],
                },
                {
                    "detail": "Car '550e8400-e29b-41d4-a716-446655440000' is already booked for: "
                    "2025-01-10 to 2025-01-15",
                    "code": "CONFLICT",
                    "conflicts": [{"start": "2025-01-10", "end": "2025-01-15"}],
                },
            ]
        }
    )
