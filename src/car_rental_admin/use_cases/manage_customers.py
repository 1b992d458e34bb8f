"""Customer use cases: search, read, create, edit and delete renters."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from car_rental_admin.domain.car import Paging
from car_rental_admin.domain.customer import Customer, CustomerFilters
from car_rental_admin.domain.errors import ConflictError, NotFoundError
from car_rental_admin.ports.contract_repository import ContractRepository
from car_rental_admin.ports.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchCustomersRequest:
    filters: CustomerFilters
    paging: Paging


@dataclass(frozen=True, slots=True)
class SearchCustomersResponse:
    customers: list[Customer]
    total_count: int | None = None


class SearchCustomers:
    def __init__(self, customer_repository: CustomerRepository) -> None:
        self._repository = customer_repository

    def execute(self, request: SearchCustomersRequest) -> SearchCustomersResponse:
        """
        Raises:
            ValidationError: If the query or paging is invalid
        """
        request.filters.validate()
        request.paging.validate()

        result = self._repository.search(filters=request.filters, paging=request.paging)
        return SearchCustomersResponse(customers=result.customers, total_count=result.total_count)


class GetCustomerById:
    def __init__(self, customer_repository: CustomerRepository) -> None:
        self._repository = customer_repository

    def execute(self, customer_id: str) -> Customer:
        """
        Raises:
            NotFoundError: If no customer has the given ID
        """
        customer = self._repository.get_by_id(customer_id)
        if customer is None:
            raise NotFoundError(resource="Customer", identifier=customer_id)
        return customer


class CreateCustomer:
    def __init__(self, customer_repository: CustomerRepository) -> None:
        self._repository = customer_repository

    def execute(self, customer: Customer) -> Customer:
        """
        Raises:
            ValidationError: If an identity field is blank
        """
        customer.validate()
        saved = self._repository.create(replace(customer, id=None))
        logger.info("Customer created", extra={"customer_id": saved.id})
        return saved


class UpdateCustomer:
    def __init__(self, customer_repository: CustomerRepository) -> None:
        self._repository = customer_repository

    def execute(self, customer: Customer) -> Customer:
        """
        Raises:
            ValidationError: If an identity field is blank
            NotFoundError: If the customer does not exist
        """
        customer.validate()
        saved = self._repository.update(customer)
        logger.info("Customer updated", extra={"customer_id": saved.id})
        return saved


class DeleteCustomer:
    """Delete a customer who has no contracts."""

    def __init__(
        self,
        customer_repository: CustomerRepository,
        contract_repository: ContractRepository,
    ) -> None:
        self._customers = customer_repository
        self._contracts = contract_repository

    def execute(self, customer_id: str) -> None:
        """
        Raises:
            NotFoundError: If the customer does not exist
            ConflictError: If contracts still reference the customer
        """
        if self._customers.get_by_id(customer_id) is None:
            raise NotFoundError(resource="Customer", identifier=customer_id)

        referencing = self._contracts.count_referencing(customer_id=customer_id)
        if referencing:
            raise ConflictError(
                f"Customer '{customer_id}' has {referencing} contract(s)",
                customer_id=customer_id,
            )

        if not self._customers.delete(customer_id):
            raise NotFoundError(resource="Customer", identifier=customer_id)

        logger.info("Customer deleted", extra={"customer_id": customer_id})
