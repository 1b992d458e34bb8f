from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable

from car_rental_admin.domain.booking import BookingPeriod
from car_rental_admin.domain.car import Paging
from car_rental_admin.domain.contract import Contract
from car_rental_admin.domain.errors import NotFoundError
from car_rental_admin.ports.contract_repository import ContractListResult, ContractRepository


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryContractRepository(ContractRepository):
    """
    Canonical contract implementation for tests.

    - Assigns UUID ids and created_at/updated_at timestamps on create
    - Lists newest first (by created_at, then reverse insertion order)
    - Booked periods include contracts of every status
    """

    def __init__(
        self,
        contracts: list[Contract] | None = None,
        now: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._now = now
        self._contracts: dict[str, Contract] = {}
        for contract in contracts or []:
            stored = contract if contract.id else replace(contract, id=str(uuid.uuid4()))
            self._contracts[stored.id] = stored  # type: ignore[index]

    def get_by_id(self, contract_id: str) -> Contract | None:
        return self._contracts.get(contract_id)

    def list(self, paging: Paging) -> ContractListResult:
        ordered = self._newest_first()
        return ContractListResult(
            contracts=ordered[paging.offset : paging.offset + paging.limit],
            total_count=len(ordered),
        )

    def create(self, contract: Contract) -> Contract:
        now = self._now()
        stored = replace(
            contract,
            id=contract.id or str(uuid.uuid4()),
            created_at=now,
            updated_at=now,
        )
        self._contracts[stored.id] = stored  # type: ignore[index]
        return stored

    def update(self, contract: Contract) -> Contract:
        existing = self._contracts.get(contract.id or "")
        if existing is None:
            raise NotFoundError(resource="Contract", identifier=contract.id)

        stored = replace(contract, created_at=existing.created_at, updated_at=self._now())
        self._contracts[existing.id] = stored  # type: ignore[index]
        return stored

    def delete(self, contract_id: str) -> bool:
        return self._contracts.pop(contract_id, None) is not None

    def booked_periods_for_car(
        self, car_id: str, exclude_contract_id: str | None = None
    ) -> list[BookingPeriod]:
        return [
            contract.period
            for contract in self._contracts.values()
            if contract.car_id == car_id and contract.id != exclude_contract_id
        ]

    def created_since(self, since: datetime) -> list[Contract]:
        return [
            contract
            for contract in self._newest_first()
            if contract.created_at is not None and contract.created_at >= since
        ]

    def list_all(self) -> list[Contract]:
        return self._newest_first()

    def count_referencing(
        self, *, car_id: str | None = None, customer_id: str | None = None
    ) -> int:
        return sum(
            1
            for contract in self._contracts.values()
            if (car_id is None or contract.car_id == car_id)
            and (customer_id is None or contract.customer_id == customer_id)
        )

    def _newest_first(self) -> list[Contract]:
        fallback = datetime.min.replace(tzinfo=timezone.utc)
        # reversed() first so that equal timestamps keep newest-inserted first (sort is stable)
        return sorted(
            reversed(list(self._contracts.values())),
            key=lambda c: c.created_at or fallback,
            reverse=True,
        )
