from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from car_rental_admin.domain.car import Car, CarFilters, Paging


@dataclass(frozen=True)
class CarSearchResult:
    """Result from car search including pagination metadata."""

    cars: list[Car]
    total_count: int | None = None  # Total matching cars before paging (None if not calculated)


class CarRepository(ABC):
    """
    Port for car data access.

    Contract (Preconditions):
        - filters and paging parameters must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
    """

    @abstractmethod
    def search(self, filters: CarFilters, paging: Paging) -> CarSearchResult:
        """
        Search cars with filters and paging.

        Args:
            filters: Filter criteria (AND semantics) - pre-validated
            paging: Pagination parameters - pre-validated

        Returns:
            CarSearchResult containing matching cars and optional total count
        """
        ...

    @abstractmethod
    def get_by_id(self, car_id: str) -> Car | None: ...

    @abstractmethod
    def list_all(self) -> list[Car]: ...

    @abstractmethod
    def create(self, car: Car) -> Car:
        """
        Store a new car and return it with its assigned id.

        Raises:
            ConflictError: If the plate number is already registered
        """
        ...

    @abstractmethod
    def update(self, car: Car) -> Car:
        """
        Replace the stored car with the same id.

        Raises:
            NotFoundError: If no car has car.id
            ConflictError: If the new plate number belongs to another car
        """
        ...

    @abstractmethod
    def delete(self, car_id: str) -> bool:
        """Returns False when nothing was deleted."""
        ...
