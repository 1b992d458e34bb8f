from __future__ import annotations

import random
import string
from dataclasses import dataclass, field
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum

from car_rental_admin.domain.booking import BookingPeriod
from car_rental_admin.domain.pricing import ZERO, ContractTotals, RateInputs, Surcharges


class ContractStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    OVERDUE = "overdue"


# Statuses that count as earned revenue in reports
REVENUE_STATUSES = frozenset({ContractStatus.ACTIVE, ContractStatus.COMPLETED})


class PaymentMode(str, Enum):
    CASH = "cash"
    CARD = "card"
    BANK_TRANSFER = "bank_transfer"
    CHEQUE = "cheque"


@dataclass(frozen=True)
class Contract:
    """A persisted rental contract."""

    id: str | None  # None until the repository assigns one
    contract_number: str
    customer_id: str
    car_id: str
    start_date: date
    end_date: date
    rate: RateInputs
    totals: ContractTotals
    surcharges: Surcharges = field(default_factory=Surcharges)
    card_payment_percent: Decimal = ZERO
    status: ContractStatus = ContractStatus.DRAFT
    payment_mode: PaymentMode | None = None
    license_number: str | None = None
    fuel_amount: int | None = None  # fuel level at pickup, in eighths of a tank
    pre_authorization: str | None = None
    second_driver_name: str | None = None
    second_driver_license: str | None = None
    notes: str | None = None
    pickup_date: date | None = None
    pickup_time: time | None = None
    delivery_date: date | None = None
    delivery_time: time | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def period(self) -> BookingPeriod:
        return BookingPeriod(start=self.start_date, end=self.end_date)


_SUFFIX_ALPHABET = string.digits + string.ascii_uppercase


def generate_contract_number(today: date | None = None, rng: random.Random | None = None) -> str:
    """Build a contract number of the form CTR-YYYYMMDD-XXXX (random base-36 suffix)."""
    today = today or date.today()
    rng = rng or random.Random()
    suffix = "".join(rng.choice(_SUFFIX_ALPHABET) for _ in range(4))
    return f"CTR-{today:%Y%m%d}-{suffix}"
