from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from car_rental_admin.domain.booking import BookingPeriod, overlaps
from car_rental_admin.ports.contract_repository import ContractRepository


def find_conflicts(existing: Iterable[BookingPeriod], candidate: BookingPeriod) -> list[BookingPeriod]:
    """Existing periods that share at least one day with the candidate, in input order."""
    return [period for period in existing if overlaps(period, candidate)]


@dataclass(frozen=True, slots=True)
class CheckCarAvailabilityRequest:
    car_id: str
    period: BookingPeriod
    exclude_contract_id: str | None = None  # the contract being edited, if any


@dataclass(frozen=True, slots=True)
class CheckCarAvailabilityResponse:
    conflicts: list[BookingPeriod]

    @property
    def is_available(self) -> bool:
        return not self.conflicts


class CheckCarAvailability:
    """
    Decide whether a period can be booked for a car.

    Reads a point-in-time snapshot of the car's bookings; two sessions
    booking the same car concurrently can both pass this check.
    """

    def __init__(self, contract_repository: ContractRepository) -> None:
        self._repository = contract_repository

    def execute(self, request: CheckCarAvailabilityRequest) -> CheckCarAvailabilityResponse:
        """
        Args:
            request: Car, candidate period and optional contract to ignore

        Returns:
            Response listing every conflicting period

        Raises:
            ValidationError: If the candidate period is reversed
            PersistenceError: If the bookings cannot be read
        """
        request.period.validate()

        existing = self._repository.booked_periods_for_car(
            request.car_id, exclude_contract_id=request.exclude_contract_id
        )

        return CheckCarAvailabilityResponse(conflicts=find_conflicts(existing, request.period))
