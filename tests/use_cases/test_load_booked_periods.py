from __future__ import annotations

from datetime import date
from unittest.mock import Mock

from car_rental_admin.domain.booking import BookingPeriod
from car_rental_admin.domain.errors import PersistenceError
from car_rental_admin.ports.contract_repository import ContractRepository
from car_rental_admin.use_cases.load_booked_periods import LoadBookedPeriods


def test_returns_periods_tagged_with_generation() -> None:
    repository = Mock(spec=ContractRepository)
    repository.booked_periods_for_car.return_value = [
        BookingPeriod(start=date(2025, 1, 10), end=date(2025, 1, 15))
    ]

    fetch = LoadBookedPeriods(repository).execute("car-1", generation=3, exclude_contract_id="c-1")

    assert fetch.ok
    assert fetch.generation == 3
    assert fetch.periods == (BookingPeriod(start=date(2025, 1, 10), end=date(2025, 1, 15)),)
    repository.booked_periods_for_car.assert_called_once_with("car-1", exclude_contract_id="c-1")


def test_store_failure_becomes_failed_fetch() -> None:
    """Fail-open: the error is reported, not raised."""
    repository = Mock(spec=ContractRepository)
    repository.booked_periods_for_car.side_effect = PersistenceError("timeout", operation="read")

    fetch = LoadBookedPeriods(repository).execute("car-1", generation=2)

    assert not fetch.ok
    assert fetch.error == "timeout"
    assert fetch.generation == 2
    assert fetch.periods == ()
