from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from car_rental_admin.domain.errors import ValidationError


@dataclass(frozen=True, slots=True)
class BookingPeriod:
    """Inclusive date range during which a car is reserved."""

    start: date
    end: date

    def validate(self) -> None:
        """
        Validate the period.

        Raises:
            ValidationError: If end precedes start
        """
        if self.end < self.start:
            raise ValidationError(
                errors=[
                    {
                        "field": "end_date",
                        "message": "Must be on or after start_date",
                        "code": "INVALID_RANGE",
                    }
                ]
            )

    def to_dict(self) -> dict[str, str]:
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}


def overlaps(a: BookingPeriod, b: BookingPeriod) -> bool:
    """
    Whether two inclusive periods share at least one day.

    Periods touching on a single day (one ends on day N, the other starts on
    day N) overlap.
    """
    return a.start <= b.end and b.start <= a.end


def inclusive_day_count(start: date | None, end: date | None) -> int:
    """Number of rental days between start and end, both counted; 0 if unknown or reversed."""
    if start is None or end is None or end < start:
        return 0
    return (end - start).days + 1
