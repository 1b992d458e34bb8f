from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from car_rental_admin.domain.contract import REVENUE_STATUSES, Contract
from car_rental_admin.domain.pricing import CENTS, ZERO
from car_rental_admin.ports.contract_repository import ContractRepository
from car_rental_admin.ports.customer_repository import CustomerRepository


@dataclass(frozen=True, slots=True)
class CustomerSpending:
    customer_id: str
    first_name: str
    last_name: str
    email: str
    contract_count: int  # every contract, whatever its status
    total_spent: Decimal
    average_spent: Decimal  # per active or completed contract


class GenerateCustomerReport:
    """
    Spending per customer, biggest spender first.

    Spending counts active and completed contracts; customers without any
    are listed with zeros.
    """

    def __init__(
        self,
        customer_repository: CustomerRepository,
        contract_repository: ContractRepository,
    ) -> None:
        self._customers = customer_repository
        self._contracts = contract_repository

    def execute(self) -> list[CustomerSpending]:
        by_customer: dict[str, list[Contract]] = defaultdict(list)
        for contract in self._contracts.list_all():
            by_customer[contract.customer_id].append(contract)

        rows = []
        for customer in self._customers.list_all():
            contracts = by_customer.get(customer.id or "", [])
            earning = [c for c in contracts if c.status in REVENUE_STATUSES]
            total_spent = sum((c.totals.total for c in earning), ZERO).quantize(CENTS)
            average = total_spent / len(earning) if earning else ZERO
            rows.append(
                CustomerSpending(
                    customer_id=customer.id or "",
                    first_name=customer.first_name,
                    last_name=customer.last_name,
                    email=customer.email,
                    contract_count=len(contracts),
                    total_spent=total_spent,
                    average_spent=average.quantize(CENTS, rounding=ROUND_HALF_UP),
                )
            )

        return sorted(rows, key=lambda row: (-row.total_spent, row.last_name, row.first_name))
