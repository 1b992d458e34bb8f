from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from car_rental_admin.domain.errors import ValidationError

_REQUIRED_FIELDS = ("first_name", "last_name", "email", "phone", "nic_or_passport")


@dataclass(frozen=True)
class Customer:
    """A renter. Contracts reference customers by id."""

    id: str | None  # None until the repository assigns one
    first_name: str
    last_name: str
    email: str
    phone: str
    nic_or_passport: str  # national identity card or passport number
    address: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def validate(self) -> None:
        """
        Raises:
            ValidationError: With one REQUIRED entry per blank identity field
        """
        errors = [
            {"field": name, "message": "Must not be blank", "code": "REQUIRED"}
            for name in _REQUIRED_FIELDS
            if not getattr(self, name).strip()
        ]
        if errors:
            raise ValidationError(errors=errors)


@dataclass(frozen=True, slots=True)
class CustomerFilters:
    query: str | None = None  # free text over names, email, phone and id document

    def validate(self) -> None:
        if self.query is not None and len(self.query) > 100:
            raise ValidationError(
                errors=[
                    {
                        "field": "query",
                        "message": "Must be at most 100 characters",
                        "code": "INVALID_VALUE",
                    }
                ]
            )
