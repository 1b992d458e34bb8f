"""PostgreSQL implementation of CustomerRepository."""

from __future__ import annotations

from sqlalchemy import delete, func, or_, select
from sqlalchemy.orm import Session

from car_rental_admin.adapters.sqlalchemy_support import store_errors, uuid_or_none
from car_rental_admin.domain.car import Paging
from car_rental_admin.domain.customer import Customer, CustomerFilters
from car_rental_admin.domain.errors import NotFoundError
from car_rental_admin.infra.db.models.customer import CustomerRow
from car_rental_admin.ports.customer_repository import CustomerRepository, CustomerSearchResult


class PostgresCustomerRepository(CustomerRepository):
    """
    PostgreSQL implementation of CustomerRepository.

    - Free-text query uses ILIKE over names, email, phone and id document
    - Orders by last name, then first name
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def search(self, filters: CustomerFilters, paging: Paging) -> CustomerSearchResult:
        query = select(CustomerRow)
        if filters.query:
            pattern = f"%{filters.query.strip()}%"
            query = query.where(
                or_(
                    CustomerRow.first_name.ilike(pattern),
                    CustomerRow.last_name.ilike(pattern),
                    CustomerRow.email.ilike(pattern),
                    CustomerRow.phone.ilike(pattern),
                    CustomerRow.nic_or_passport.ilike(pattern),
                )
            )

        count_query = select(func.count()).select_from(query.subquery())
        query = (
            query.order_by(CustomerRow.last_name, CustomerRow.first_name)
            .offset(paging.offset)
            .limit(paging.limit)
        )

        with store_errors("search"):
            total_count = self._session.execute(count_query).scalar() or 0
            rows = self._session.execute(query).scalars().all()

        return CustomerSearchResult(
            customers=[self._to_domain(row) for row in rows], total_count=total_count
        )

    def get_by_id(self, customer_id: str) -> Customer | None:
        key = uuid_or_none(customer_id)
        if key is None:
            return None

        with store_errors("get_by_id"):
            row = self._session.get(CustomerRow, key)
        return self._to_domain(row) if row else None

    def list_all(self) -> list[Customer]:
        with store_errors("list_all"):
            rows = (
                self._session.execute(
                    select(CustomerRow).order_by(CustomerRow.last_name, CustomerRow.first_name)
                )
                .scalars()
                .all()
            )
        return [self._to_domain(row) for row in rows]

    def create(self, customer: Customer) -> Customer:
        row = CustomerRow()
        self._apply(row, customer)

        with store_errors("create"):
            self._session.add(row)
            self._session.flush()
            self._session.refresh(row)

        return self._to_domain(row)

    def update(self, customer: Customer) -> Customer:
        key = uuid_or_none(customer.id)
        with store_errors("update"):
            row = self._session.get(CustomerRow, key) if key else None
            if row is None:
                raise NotFoundError(resource="Customer", identifier=customer.id)

            self._apply(row, customer)
            self._session.flush()
            self._session.refresh(row)

        return self._to_domain(row)

    def delete(self, customer_id: str) -> bool:
        key = uuid_or_none(customer_id)
        if key is None:
            return False

        with store_errors("delete"):
            result = self._session.execute(delete(CustomerRow).where(CustomerRow.id == key))
        return bool(result.rowcount)

    def _apply(self, row: CustomerRow, customer: Customer) -> None:
        row.first_name = customer.first_name
        row.last_name = customer.last_name
        row.email = customer.email
        row.phone = customer.phone
        row.nic_or_passport = customer.nic_or_passport
        row.address = customer.address

    def _to_domain(self, row: CustomerRow) -> Customer:
        return Customer(
            id=str(row.id),
            first_name=row.first_name,
            last_name=row.last_name,
            email=row.email,
            phone=row.phone,
            nic_or_passport=row.nic_or_passport,
            address=row.address,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
