from __future__ import annotations

import logging

from car_rental_admin.domain.errors import PersistenceError
from car_rental_admin.ports.contract_repository import ContractRepository
from car_rental_admin.use_cases.contract_draft import BookingsFetch

logger = logging.getLogger(__name__)


class LoadBookedPeriods:
    """
    Load a car's booked periods for one fetch generation of a contract draft.

    A store failure does not propagate: it is logged and returned as a failed
    BookingsFetch, which the draft turns into a warning (fail-open).
    """

    def __init__(self, contract_repository: ContractRepository) -> None:
        self._repository = contract_repository

    def execute(
        self,
        car_id: str,
        generation: int,
        exclude_contract_id: str | None = None,
    ) -> BookingsFetch:
        """
        Args:
            car_id: Car whose bookings are needed
            generation: Fetch generation of the draft that asked
            exclude_contract_id: Contract to leave out of the snapshot

        Returns:
            BookingsFetch with the periods, or with the failure message
        """
        try:
            periods = self._repository.booked_periods_for_car(
                car_id, exclude_contract_id=exclude_contract_id
            )
        except PersistenceError as exc:
            logger.warning(
                "Booked periods lookup failed",
                extra={
                    "car_id": car_id,
                    "generation": generation,
                    "error": exc.message,
                },
            )
            return BookingsFetch(generation=generation, error=exc.message)

        return BookingsFetch(generation=generation, periods=tuple(periods))
