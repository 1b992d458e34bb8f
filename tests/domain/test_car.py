"""Tests for Car validation before it is stored."""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

import pytest

from car_rental_admin.domain.car import MIN_CAR_YEAR, Car
from car_rental_admin.domain.errors import ValidationError


@pytest.fixture()
def car() -> Car:
    return Car(
        id=None,
        name="Dacia Logan 2024",
        brand="Dacia",
        model="Logan",
        year=2024,
        plate_number="D 44444",
        price_per_day=Decimal("80.00"),
    )


def test_valid_car_passes(car: Car) -> None:
    car.validate(current_year=2025)


@pytest.mark.parametrize("year", [MIN_CAR_YEAR, 2026])
def test_year_bounds_are_inclusive(car: Car, year: int) -> None:
    replace(car, year=year).validate(current_year=2025)


@pytest.mark.parametrize("year", [MIN_CAR_YEAR - 1, 2027])
def test_year_out_of_range(car: Car, year: int) -> None:
    with pytest.raises(ValidationError) as exc_info:
        replace(car, year=year).validate(current_year=2025)

    assert exc_info.value.errors == [
        {"field": "year", "message": "Must be between 1900 and 2026", "code": "OUT_OF_RANGE"}
    ]


def test_free_car_is_allowed(car: Car) -> None:
    replace(car, price_per_day=Decimal("0")).validate(current_year=2025)


def test_every_invalid_field_is_reported(car: Car) -> None:
    broken = replace(car, name="", plate_number=" ", price_per_day=Decimal("-1"))

    with pytest.raises(ValidationError) as exc_info:
        broken.validate(current_year=2025)

    assert [(e["field"], e["code"]) for e in exc_info.value.errors or []] == [
        ("name", "REQUIRED"),
        ("plate_number", "REQUIRED"),
        ("price_per_day", "OUT_OF_RANGE"),
    ]
