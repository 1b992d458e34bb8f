from __future__ import annotations

from dataclasses import dataclass

from car_rental_admin.domain.car import Car, CarFilters, Paging
from car_rental_admin.ports.car_repository import CarRepository


@dataclass(frozen=True, slots=True)
class SearchCarCatalogRequest:
    filters: CarFilters
    paging: Paging


@dataclass(frozen=True, slots=True)
class SearchCarCatalogResponse:
    cars: list[Car]
    total_count: int | None = None  # Total matching cars before paging (None if not calculated)


class SearchCarCatalog:
    """
    Fleet search with a free-text query, status filter and pagination.

    This use case validates the request and delegates filtering to the
    repository adapter.
    """

    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self, request: SearchCarCatalogRequest) -> SearchCarCatalogResponse:
        """
        Execute fleet search.

        Args:
            request: Search parameters (filters and paging)

        Returns:
            Response containing matching cars and optional total count

        Raises:
            PagingValidationError: If paging parameters are invalid
            FilterValidationError: If filter parameters are invalid
        """
        request.filters.validate()
        request.paging.validate()

        result = self._repository.search(
            filters=request.filters,
            paging=request.paging,
        )

        return SearchCarCatalogResponse(
            cars=result.cars,
            total_count=result.total_count,
        )
