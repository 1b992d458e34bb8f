from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

ZERO = Decimal("0")
CENTS = Decimal("0.01")
# Largest amount a stored money column (12 digits, 2 decimals) can hold
MAX_AMOUNT = Decimal("9999999999.99")


@dataclass(frozen=True, slots=True)
class RateInputs:
    daily_rate: Decimal = ZERO
    days: int = 0
    discount: Decimal = ZERO  # flat amount, not a percentage
    tax_rate: Decimal = ZERO  # percentage, e.g. Decimal("15") = 15%


@dataclass(frozen=True, slots=True)
class Surcharges:
    """Fixed add-ons charged after tax."""

    sim: Decimal = ZERO
    delivery: Decimal = ZERO
    child_seat: Decimal = ZERO
    booster_seat: Decimal = ZERO

    def amounts(self) -> dict[str, Decimal]:
        return {
            "sim": self.sim,
            "delivery": self.delivery,
            "child_seat": self.child_seat,
            "booster_seat": self.booster_seat,
        }

    def total(self) -> Decimal:
        return sum((max(ZERO, amount) for amount in self.amounts().values()), ZERO)


@dataclass(frozen=True, slots=True)
class ContractTotals:
    """Derived amounts; recomputed from rate inputs, never set directly."""

    subtotal: Decimal = ZERO
    card_payment_amount: Decimal = ZERO
    total: Decimal = ZERO
