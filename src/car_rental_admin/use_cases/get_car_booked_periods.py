from __future__ import annotations

from car_rental_admin.domain.booking import BookingPeriod
from car_rental_admin.domain.errors import NotFoundError
from car_rental_admin.ports.car_repository import CarRepository
from car_rental_admin.ports.contract_repository import ContractRepository


class GetCarBookedPeriods:
    """Booked periods of one car across all its contracts, sorted by start date."""

    def __init__(
        self, car_repository: CarRepository, contract_repository: ContractRepository
    ) -> None:
        self._cars = car_repository
        self._contracts = contract_repository

    def execute(self, car_id: str) -> list[BookingPeriod]:
        """
        Raises:
            NotFoundError: If the car doesn't exist
            PersistenceError: If the bookings cannot be read
        """
        if self._cars.get_by_id(car_id) is None:
            raise NotFoundError(resource="Car", identifier=car_id)

        periods = self._contracts.booked_periods_for_car(car_id)
        return sorted(periods, key=lambda period: (period.start, period.end))
