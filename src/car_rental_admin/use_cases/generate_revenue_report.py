from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Callable

from car_rental_admin.domain.contract import REVENUE_STATUSES
from car_rental_admin.domain.errors import ValidationError
from car_rental_admin.domain.pricing import ZERO
from car_rental_admin.ports.contract_repository import ContractRepository

MAX_REPORT_DAYS = 3650


@dataclass(frozen=True, slots=True)
class CarRevenue:
    car_id: str
    contract_count: int
    rental_days: int
    revenue: Decimal


@dataclass(frozen=True, slots=True)
class RevenueReport:
    since: datetime
    contract_count: int
    rental_days: int
    total_revenue: Decimal
    by_car: list[CarRevenue]  # highest revenue first


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GenerateRevenueReport:
    """
    Revenue earned over the last N days.

    Only active and completed contracts count; a contract belongs to the
    window when it was created inside it.
    """

    def __init__(
        self,
        contract_repository: ContractRepository,
        now: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._repository = contract_repository
        self._now = now

    def execute(self, days: int) -> RevenueReport:
        """
        Raises:
            ValidationError: If days is outside 1..MAX_REPORT_DAYS
        """
        if days <= 0 or days > MAX_REPORT_DAYS:
            raise ValidationError(
                errors=[
                    {
                        "field": "days",
                        "message": f"Must be between 1 and {MAX_REPORT_DAYS}",
                        "code": "INVALID_VALUE",
                    }
                ]
            )

        since = self._now() - timedelta(days=days)
        contracts = [
            c for c in self._repository.created_since(since) if c.status in REVENUE_STATUSES
        ]

        per_car: dict[str, CarRevenue] = {}
        for contract in contracts:
            row = per_car.get(contract.car_id) or CarRevenue(contract.car_id, 0, 0, ZERO)
            per_car[contract.car_id] = replace(
                row,
                contract_count=row.contract_count + 1,
                rental_days=row.rental_days + contract.rate.days,
                revenue=row.revenue + contract.totals.total,
            )

        by_car = sorted(per_car.values(), key=lambda row: (-row.revenue, row.car_id))

        return RevenueReport(
            since=since,
            contract_count=len(contracts),
            rental_days=sum(c.rate.days for c in contracts),
            total_revenue=sum((c.totals.total for c in contracts), ZERO),
            by_car=by_car,
        )
