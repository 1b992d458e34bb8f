from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from car_rental_admin.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


class CarStatus(str, Enum):
    AVAILABLE = "available"
    MAINTENANCE = "maintenance"
    UNAVAILABLE = "unavailable"


MIN_CAR_YEAR = 1900


@dataclass(frozen=True)
class Car:
    id: str | None  # None until the repository assigns one
    name: str
    brand: str
    model: str
    year: int
    plate_number: str
    price_per_day: Decimal
    status: CarStatus = CarStatus.AVAILABLE
    notes: str | None = None

    def validate(self, current_year: int) -> None:
        """
        Check a car before it is stored.

        Raises:
            ValidationError: With one entry per invalid field
        """
        errors: list[dict[str, str]] = [
            {"field": name, "message": "Must not be blank", "code": "REQUIRED"}
            for name in ("name", "brand", "model", "plate_number")
            if not getattr(self, name).strip()
        ]
        if not MIN_CAR_YEAR <= self.year <= current_year + 1:
            errors.append(
                {
                    "field": "year",
                    "message": f"Must be between {MIN_CAR_YEAR} and {current_year + 1}",
                    "code": "OUT_OF_RANGE",
                }
            )
        if self.price_per_day < 0:
            errors.append(
                {"field": "price_per_day", "message": "Must not be negative", "code": "OUT_OF_RANGE"}
            )
        if errors:
            raise ValidationError(errors=errors)


@dataclass(frozen=True, slots=True)
class CarFilters:
    query: str | None = None  # free text over name, brand, model and plate
    status: CarStatus | None = None

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        if self.query is not None and len(self.query) > 100:
            raise FilterValidationError("query must be at most 100 characters")
        if self.status is not None and not isinstance(self.status, CarStatus):
            raise FilterValidationError("status must be a CarStatus or None")


@dataclass(frozen=True, slots=True)
class Paging:
    offset: int = 0
    limit: int = 20

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.offset < 0:
            raise PagingValidationError("offset must be >= 0")
        if self.limit <= 0:
            raise PagingValidationError("limit must be > 0")
        if self.limit > 200:
            raise PagingValidationError("limit must be <= 200")
