"""Fleet maintenance use cases: read one car, register, edit and retire cars."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Callable

from car_rental_admin.domain.car import Car
from car_rental_admin.domain.errors import ConflictError, NotFoundError
from car_rental_admin.ports.car_repository import CarRepository
from car_rental_admin.ports.contract_repository import ContractRepository

logger = logging.getLogger(__name__)


class GetCarById:
    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self, car_id: str) -> Car:
        """
        Raises:
            NotFoundError: If no car has the given ID
        """
        car = self._repository.get_by_id(car_id)
        if car is None:
            raise NotFoundError(resource="Car", identifier=car_id)
        return car


class CreateCar:
    """Register a car. Plate numbers are unique across the fleet."""

    def __init__(
        self, car_repository: CarRepository, today: Callable[[], date] = date.today
    ) -> None:
        self._repository = car_repository
        self._today = today

    def execute(self, car: Car) -> Car:
        """
        Raises:
            ValidationError: If a field is blank or out of range
            ConflictError: If the plate number is already registered
        """
        car.validate(current_year=self._today().year)
        saved = self._repository.create(replace(car, id=None))
        logger.info("Car created", extra={"car_id": saved.id, "plate_number": saved.plate_number})
        return saved


class UpdateCar:
    """Replace every field of an existing car."""

    def __init__(
        self, car_repository: CarRepository, today: Callable[[], date] = date.today
    ) -> None:
        self._repository = car_repository
        self._today = today

    def execute(self, car: Car) -> Car:
        """
        Raises:
            ValidationError: If a field is blank or out of range
            NotFoundError: If the car does not exist
            ConflictError: If the plate number belongs to another car
        """
        car.validate(current_year=self._today().year)
        saved = self._repository.update(car)
        logger.info("Car updated", extra={"car_id": saved.id})
        return saved


class DeleteCar:
    """
    Remove a car from the fleet.

    Cars referenced by any contract stay; contracts keep pointing at the car
    they were priced for.
    """

    def __init__(
        self, car_repository: CarRepository, contract_repository: ContractRepository
    ) -> None:
        self._cars = car_repository
        self._contracts = contract_repository

    def execute(self, car_id: str) -> None:
        """
        Raises:
            NotFoundError: If the car does not exist
            ConflictError: If contracts still reference the car
        """
        if self._cars.get_by_id(car_id) is None:
            raise NotFoundError(resource="Car", identifier=car_id)

        referencing = self._contracts.count_referencing(car_id=car_id)
        if referencing:
            raise ConflictError(
                f"Car '{car_id}' is used by {referencing} contract(s)",
                car_id=car_id,
            )

        if not self._cars.delete(car_id):
            raise NotFoundError(resource="Car", identifier=car_id)

        logger.info("Car deleted", extra={"car_id": car_id})
