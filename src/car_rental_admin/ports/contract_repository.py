from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from car_rental_admin.domain.booking import BookingPeriod
from car_rental_admin.domain.car import Paging
from car_rental_admin.domain.contract import Contract


@dataclass(frozen=True)
class ContractListResult:
    contracts: list[Contract]
    total_count: int | None = None


class ContractRepository(ABC):
    """
    Port for contract persistence.

    Implementations raise PersistenceError when the backing store fails;
    they never retry.
    """

    @abstractmethod
    def get_by_id(self, contract_id: str) -> Contract | None: ...

    @abstractmethod
    def list(self, paging: Paging) -> ContractListResult:
        """Contracts ordered by creation time, newest first."""
        ...

    @abstractmethod
    def create(self, contract: Contract) -> Contract:
        """Insert a contract and return it with id and timestamps assigned."""
        ...

    @abstractmethod
    def update(self, contract: Contract) -> Contract:
        """
        Overwrite an existing contract.

        Raises:
            NotFoundError: If no contract has the given id
        """
        ...

    @abstractmethod
    def delete(self, contract_id: str) -> bool:
        """Delete a contract; returns False when it did not exist."""
        ...

    @abstractmethod
    def booked_periods_for_car(
        self, car_id: str, exclude_contract_id: str | None = None
    ) -> list[BookingPeriod]:
        """Every booked period of the car, whatever the contract status."""
        ...

    @abstractmethod
    def created_since(self, since: datetime) -> list[Contract]: ...

    @abstractmethod
    def list_all(self) -> list[Contract]:
        """Every contract, newest first. Used by the fleet and customer reports."""
        ...

    @abstractmethod
    def count_referencing(
        self, *, car_id: str | None = None, customer_id: str | None = None
    ) -> int:
        """Number of contracts matching every given reference."""
        ...
