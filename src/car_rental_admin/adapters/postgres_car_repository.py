"""PostgreSQL implementation of CarRepository."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import delete, func, or_, select
from sqlalchemy.orm import Session

from car_rental_admin.adapters.sqlalchemy_support import store_errors, uuid_or_none
from car_rental_admin.domain.car import Car, CarFilters, CarStatus, Paging
from car_rental_admin.domain.errors import NotFoundError
from car_rental_admin.infra.db.models.car import CarRow
from car_rental_admin.ports.car_repository import CarRepository, CarSearchResult

if TYPE_CHECKING:
    from sqlalchemy.sql import Select


class PostgresCarRepository(CarRepository):
    """
    PostgreSQL implementation of CarRepository.

    - Uses SQLAlchemy ORM for database access
    - Free-text query uses ILIKE over name, brand, model and plate number
    - Returns total_count via COUNT(*) query
    - Converts CarRow (infrastructure) to Car (domain)
    - Writes flush only; the per-request session commits
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def search(self, filters: CarFilters, paging: Paging) -> CarSearchResult:
        """
        Search cars with filters and paging.

        Executes two queries:
        1. COUNT(*) to get total matching cars (before paging)
        2. SELECT with OFFSET/LIMIT to get the page, newest first

        Note:
            Assumes inputs are validated by UseCase (contract programming).
        """
        query = self._build_query(filters)

        count_query = select(func.count()).select_from(query.subquery())
        query = query.order_by(CarRow.created_at.desc()).offset(paging.offset).limit(paging.limit)

        with store_errors("search"):
            total_count = self._session.execute(count_query).scalar() or 0
            rows = self._session.execute(query).scalars().all()

        cars = [self._to_domain(row) for row in rows]

        return CarSearchResult(cars=cars, total_count=total_count)

    def get_by_id(self, car_id: str) -> Car | None:
        try:
            query = select(CarRow).where(CarRow.id == UUID(car_id))
        except ValueError:  # Invalid UUID format
            return None

        with store_errors("get_by_id"):
            row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def list_all(self) -> list[Car]:
        with store_errors("list_all"):
            rows = self._session.execute(select(CarRow).order_by(CarRow.name)).scalars().all()
        return [self._to_domain(row) for row in rows]

    def create(self, car: Car) -> Car:
        row = CarRow()
        self._apply(row, car)

        with store_errors("create"):
            self._session.add(row)
            self._session.flush()
            self._session.refresh(row)

        return self._to_domain(row)

    def update(self, car: Car) -> Car:
        key = uuid_or_none(car.id)
        with store_errors("update"):
            row = self._session.get(CarRow, key) if key else None
            if row is None:
                raise NotFoundError(resource="Car", identifier=car.id)

            self._apply(row, car)
            self._session.flush()
            self._session.refresh(row)

        return self._to_domain(row)

    def delete(self, car_id: str) -> bool:
        key = uuid_or_none(car_id)
        if key is None:
            return False

        with store_errors("delete"):
            result = self._session.execute(delete(CarRow).where(CarRow.id == key))
        return bool(result.rowcount)

    def _build_query(self, filters: CarFilters) -> Select[tuple[CarRow]]:
        query = select(CarRow)

        if filters.status is not None:
            query = query.where(CarRow.status == filters.status.value)

        if filters.query:
            pattern = f"%{filters.query.strip()}%"
            query = query.where(
                or_(
                    CarRow.name.ilike(pattern),
                    CarRow.brand.ilike(pattern),
                    CarRow.model.ilike(pattern),
                    CarRow.plate_number.ilike(pattern),
                )
            )

        return query

    def _apply(self, row: CarRow, car: Car) -> None:
        row.name = car.name
        row.brand = car.brand
        row.model = car.model
        row.year = car.year
        row.plate_number = car.plate_number
        row.price_per_day = car.price_per_day
        row.status = car.status.value
        row.notes = car.notes

    def _to_domain(self, row: CarRow) -> Car:
        return Car(
            id=str(row.id),
            name=row.name,
            brand=row.brand,
            model=row.model,
            year=row.year,
            plate_number=row.plate_number,
            price_per_day=row.price_per_day,  # Already Decimal from NUMERIC column
            status=CarStatus(row.status),
            notes=row.notes,
        )
