from __future__ import annotations

from dataclasses import dataclass

from car_rental_admin.domain.car import Paging
from car_rental_admin.domain.contract import Contract
from car_rental_admin.ports.contract_repository import ContractRepository


@dataclass(frozen=True, slots=True)
class ListContractsResponse:
    contracts: list[Contract]
    total_count: int | None = None


class ListContracts:
    """Newest-first contract listing with pagination."""

    def __init__(self, contract_repository: ContractRepository) -> None:
        self._repository = contract_repository

    def execute(self, paging: Paging) -> ListContractsResponse:
        paging.validate()
        result = self._repository.list(paging)
        return ListContractsResponse(contracts=result.contracts, total_count=result.total_count)
