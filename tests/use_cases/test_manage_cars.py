"""Test suite for the fleet maintenance use cases."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from car_rental_admin.adapters.in_memory_car_repository import InMemoryCarRepository
from car_rental_admin.adapters.in_memory_contract_repository import InMemoryContractRepository
from car_rental_admin.domain.car import Car
from car_rental_admin.domain.contract import Contract
from car_rental_admin.domain.errors import ConflictError, NotFoundError, ValidationError
from car_rental_admin.domain.pricing import ContractTotals, RateInputs
from car_rental_admin.use_cases.manage_cars import CreateCar, DeleteCar, GetCarById, UpdateCar


def today() -> date:
    return date(2025, 6, 1)


@pytest.fixture()
def corolla() -> Car:
    return Car(
        id="car-1",
        name="Toyota Corolla 2024",
        brand="Toyota",
        model="Corolla",
        year=2024,
        plate_number="A 12345",
        price_per_day=Decimal("150.00"),
    )


@pytest.fixture()
def cars(corolla: Car) -> InMemoryCarRepository:
    return InMemoryCarRepository([corolla])


@pytest.fixture()
def contracts() -> InMemoryContractRepository:
    return InMemoryContractRepository()


def test_get_car_by_id(cars: InMemoryCarRepository, corolla: Car) -> None:
    assert GetCarById(cars).execute("car-1") == corolla


def test_get_missing_car_raises_not_found(cars: InMemoryCarRepository) -> None:
    with pytest.raises(NotFoundError, match="ghost"):
        GetCarById(cars).execute("ghost")


# ==============================================================================
# Create / Update
# ==============================================================================


def test_create_ignores_client_id(cars: InMemoryCarRepository, corolla: Car) -> None:
    created = CreateCar(cars, today=today).execute(
        replace(corolla, id="client-chosen", plate_number="B 99999")
    )

    assert created.id not in (None, "client-chosen")
    assert cars.get_by_id(created.id or "") == created


def test_create_validates_before_saving(cars: InMemoryCarRepository, corolla: Car) -> None:
    with pytest.raises(ValidationError):
        CreateCar(cars, today=today).execute(replace(corolla, id=None, year=2027))

    assert len(cars.list_all()) == 1


def test_create_duplicate_plate_conflicts(cars: InMemoryCarRepository, corolla: Car) -> None:
    with pytest.raises(ConflictError):
        CreateCar(cars, today=today).execute(replace(corolla, id=None))


def test_update_replaces_fields(cars: InMemoryCarRepository, corolla: Car) -> None:
    updated = UpdateCar(cars, today=today).execute(replace(corolla, notes="New tyres"))

    assert updated.notes == "New tyres"
    assert cars.get_by_id("car-1").notes == "New tyres"  # type: ignore[union-attr]


def test_update_missing_car_raises_not_found(cars: InMemoryCarRepository, corolla: Car) -> None:
    with pytest.raises(NotFoundError):
        UpdateCar(cars, today=today).execute(replace(corolla, id="ghost"))


# ==============================================================================
# Delete
# ==============================================================================


def test_delete_unreferenced_car(
    cars: InMemoryCarRepository, contracts: InMemoryContractRepository
) -> None:
    DeleteCar(cars, contracts).execute("car-1")

    assert cars.get_by_id("car-1") is None


def test_delete_missing_car_raises_not_found(
    cars: InMemoryCarRepository, contracts: InMemoryContractRepository
) -> None:
    with pytest.raises(NotFoundError):
        DeleteCar(cars, contracts).execute("ghost")


def test_delete_car_with_contracts_conflicts(
    cars: InMemoryCarRepository, contracts: InMemoryContractRepository
) -> None:
    contracts.create(
        Contract(
            id=None,
            contract_number="CTR-1",
            customer_id="cust-1",
            car_id="car-1",
            start_date=date(2025, 1, 10),
            end_date=date(2025, 1, 12),
            rate=RateInputs(daily_rate=Decimal("150"), days=3),
            totals=ContractTotals(total=Decimal("450.00")),
        )
    )

    with pytest.raises(ConflictError) as exc_info:
        DeleteCar(cars, contracts).execute("car-1")

    assert exc_info.value.context == {"car_id": "car-1"}
    assert cars.get_by_id("car-1") is not None
