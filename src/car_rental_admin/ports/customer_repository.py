from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from car_rental_admin.domain.car import Paging
from car_rental_admin.domain.customer import Customer, CustomerFilters


@dataclass(frozen=True)
class CustomerSearchResult:
    customers: list[Customer]
    total_count: int | None = None


class CustomerRepository(ABC):
    """
    Port for customer data access.

    Contract (Preconditions):
        - filters and paging are pre-validated by the caller (UseCase)
        - create assigns id and timestamps; update keeps created_at
    """

    @abstractmethod
    def search(self, filters: CustomerFilters, paging: Paging) -> CustomerSearchResult: ...

    @abstractmethod
    def get_by_id(self, customer_id: str) -> Customer | None: ...

    @abstractmethod
    def list_all(self) -> list[Customer]: ...

    @abstractmethod
    def create(self, customer: Customer) -> Customer: ...

    @abstractmethod
    def update(self, customer: Customer) -> Customer:
        """
        Raises:
            NotFoundError: If no customer has customer.id
        """
        ...

    @abstractmethod
    def delete(self, customer_id: str) -> bool:
        """Returns False when nothing was deleted."""
        ...
