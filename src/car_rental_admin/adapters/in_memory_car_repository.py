from __future__ import annotations

import uuid
from dataclasses import replace

from car_rental_admin.domain.car import Car, CarFilters, Paging
from car_rental_admin.domain.errors import ConflictError, NotFoundError
from car_rental_admin.ports.car_repository import CarRepository, CarSearchResult


class InMemoryCarRepository(CarRepository):
    """
    Canonical contract implementation for tests.

    - Stores cars in insertion order
    - Free-text query is a case-insensitive substring match on name, brand,
      model or plate number
    - Applies paging AFTER filtering
    - Returns total_count of matching cars before paging
    - Plate numbers are unique, as in the database
    """

    def __init__(self, cars: list[Car] | None = None) -> None:
        self._cars = list(cars or [])

    def search(self, filters: CarFilters, paging: Paging) -> CarSearchResult:
        # Trust that UseCase has validated inputs (contract programming)
        matches = [car for car in self._cars if self._matches(car, filters)]
        total_count = len(matches)  # Count BEFORE paging

        start = paging.offset
        end = paging.offset + paging.limit

        return CarSearchResult(cars=matches[start:end], total_count=total_count)

    def get_by_id(self, car_id: str) -> Car | None:
        return next((car for car in self._cars if car.id == car_id), None)

    def list_all(self) -> list[Car]:
        return list(self._cars)

    def create(self, car: Car) -> Car:
        self._check_plate(car)
        stored = replace(car, id=car.id or str(uuid.uuid4()))
        self._cars.append(stored)
        return stored

    def update(self, car: Car) -> Car:
        index = self._index_of(car.id or "")
        if index is None:
            raise NotFoundError(resource="Car", identifier=car.id)
        self._check_plate(car)
        self._cars[index] = car
        return car

    def delete(self, car_id: str) -> bool:
        index = self._index_of(car_id)
        if index is None:
            return False
        del self._cars[index]
        return True

    def _index_of(self, car_id: str) -> int | None:
        return next((i for i, car in enumerate(self._cars) if car.id == car_id), None)

    def _check_plate(self, car: Car) -> None:
        if any(c.plate_number == car.plate_number and c.id != car.id for c in self._cars):
            raise ConflictError(
                f"Plate number '{car.plate_number}' is already registered",
                operation="save_car",
            )

    def _matches(self, car: Car, filters: CarFilters) -> bool:
        if filters.status is not None and car.status != filters.status:
            return False
        if filters.query:
            needle = filters.query.strip().lower()
            haystack = (car.name, car.brand, car.model, car.plate_number)
            if not any(needle in value.lower() for value in haystack):
                return False
        return True
