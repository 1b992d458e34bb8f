from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from car_rental_admin.domain.car import CarStatus
from car_rental_admin.domain.contract import REVENUE_STATUSES, Contract
from car_rental_admin.domain.pricing import CENTS, ZERO
from car_rental_admin.ports.car_repository import CarRepository
from car_rental_admin.ports.contract_repository import ContractRepository

DAYS_PER_YEAR = 365
_ONE_DECIMAL = Decimal("0.1")


@dataclass(frozen=True, slots=True)
class CarPerformance:
    car_id: str
    name: str
    plate_number: str
    status: CarStatus
    contract_count: int  # every contract, whatever its status
    rental_days: int
    revenue: Decimal
    utilization_percent: Decimal  # rental_days over one year, 1 decimal


def utilization_percent(rental_days: int) -> Decimal:
    return (Decimal(rental_days) * 100 / DAYS_PER_YEAR).quantize(
        _ONE_DECIMAL, rounding=ROUND_HALF_UP
    )


class GenerateCarPerformanceReport:
    """
    Revenue and utilization per car, highest revenue first.

    Revenue and rental days count active and completed contracts only; the
    contract count includes every status. Cars without contracts are listed
    with zeros.
    """

    def __init__(
        self, car_repository: CarRepository, contract_repository: ContractRepository
    ) -> None:
        self._cars = car_repository
        self._contracts = contract_repository

    def execute(self) -> list[CarPerformance]:
        by_car: dict[str, list[Contract]] = defaultdict(list)
        for contract in self._contracts.list_all():
            by_car[contract.car_id].append(contract)

        rows = []
        for car in self._cars.list_all():
            contracts = by_car.get(car.id or "", [])
            earning = [c for c in contracts if c.status in REVENUE_STATUSES]
            rental_days = sum(c.rate.days for c in earning)
            rows.append(
                CarPerformance(
                    car_id=car.id or "",
                    name=car.name,
                    plate_number=car.plate_number,
                    status=car.status,
                    contract_count=len(contracts),
                    rental_days=rental_days,
                    revenue=sum((c.totals.total for c in earning), ZERO).quantize(CENTS),
                    utilization_percent=utilization_percent(rental_days),
                )
            )

        return sorted(rows, key=lambda row: (-row.revenue, row.name))
