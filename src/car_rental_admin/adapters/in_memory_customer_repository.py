from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable

from car_rental_admin.domain.car import Paging
from car_rental_admin.domain.customer import Customer, CustomerFilters
from car_rental_admin.domain.errors import NotFoundError
from car_rental_admin.ports.customer_repository import CustomerRepository, CustomerSearchResult


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryCustomerRepository(CustomerRepository):
    """
    Canonical contract implementation for tests.

    - Keeps insertion order; search and list_all return customers by last
      name, then first name
    - Free-text query is a case-insensitive substring match on names, email,
      phone or id document
    """

    def __init__(
        self,
        customers: list[Customer] | None = None,
        now: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._now = now
        self._customers: dict[str, Customer] = {}
        for customer in customers or []:
            stored = customer if customer.id else replace(customer, id=str(uuid.uuid4()))
            self._customers[stored.id] = stored  # type: ignore[index]

    def search(self, filters: CustomerFilters, paging: Paging) -> CustomerSearchResult:
        matches = [c for c in self.list_all() if self._matches(c, filters)]
        return CustomerSearchResult(
            customers=matches[paging.offset : paging.offset + paging.limit],
            total_count=len(matches),
        )

    def get_by_id(self, customer_id: str) -> Customer | None:
        return self._customers.get(customer_id)

    def list_all(self) -> list[Customer]:
        return sorted(self._customers.values(), key=lambda c: (c.last_name, c.first_name))

    def create(self, customer: Customer) -> Customer:
        now = self._now()
        stored = replace(
            customer, id=customer.id or str(uuid.uuid4()), created_at=now, updated_at=now
        )
        self._customers[stored.id] = stored  # type: ignore[index]
        return stored

    def update(self, customer: Customer) -> Customer:
        existing = self._customers.get(customer.id or "")
        if existing is None:
            raise NotFoundError(resource="Customer", identifier=customer.id)

        stored = replace(customer, created_at=existing.created_at, updated_at=self._now())
        self._customers[existing.id] = stored  # type: ignore[index]
        return stored

    def delete(self, customer_id: str) -> bool:
        return self._customers.pop(customer_id, None) is not None

    def _matches(self, customer: Customer, filters: CustomerFilters) -> bool:
        if not filters.query:
            return True
        needle = filters.query.strip().lower()
        haystack = (
            customer.first_name,
            customer.last_name,
            customer.email,
            customer.phone,
            customer.nic_or_passport,
        )
        return any(needle in value.lower() for value in haystack)
