from __future__ import annotations

from decimal import Decimal

from car_rental_admin.domain.car import Car, CarFilters, Paging
from car_rental_admin.domain.pricing import CENTS
from car_rental_admin.entrypoints.http.dtos.cars import (
    CarResponseDTO,
    CarSearchResponseDTO,
    CarsSearchQueryDTO,
    CarWriteDTO,
)
from car_rental_admin.use_cases.search_car_catalog import (
    SearchCarCatalogRequest,
    SearchCarCatalogResponse,
)


class CarMapper:
    """Maps between REST DTOs and domain models for the fleet."""

    @staticmethod
    def to_domain_request(dto: CarsSearchQueryDTO) -> SearchCarCatalogRequest:
        return SearchCarCatalogRequest(
            filters=CarFilters(query=dto.q or None, status=dto.status),
            paging=Paging(offset=dto.offset, limit=dto.limit),
        )

    @staticmethod
    def to_domain(dto: CarWriteDTO, car_id: str | None = None) -> Car:
        """price_per_day is pattern-checked by the DTO, so Decimal() cannot fail."""
        return Car(
            id=car_id,
            name=dto.name.strip(),
            brand=dto.brand.strip(),
            model=dto.model.strip(),
            year=dto.year,
            plate_number=dto.plate_number.strip(),
            price_per_day=Decimal(dto.price_per_day).quantize(CENTS),
            status=dto.status,
            notes=dto.notes,
        )

    @staticmethod
    def to_car_response(car: Car) -> CarResponseDTO:
        """Decimal → str at the boundary."""
        return CarResponseDTO(
            id=car.id or "",
            name=car.name,
            brand=car.brand,
            model=car.model,
            year=car.year,
            plate_number=car.plate_number,
            price_per_day=str(car.price_per_day),
            status=car.status,
            notes=car.notes,
        )

    @staticmethod
    def to_response(
        result: SearchCarCatalogResponse,
        offset: int,
        limit: int,
    ) -> CarSearchResponseDTO:
        return CarSearchResponseDTO(
            cars=[CarMapper.to_car_response(car) for car in result.cars],
            total=result.total_count or 0,  # Handle None from repository
            offset=offset,
            limit=limit,
        )
