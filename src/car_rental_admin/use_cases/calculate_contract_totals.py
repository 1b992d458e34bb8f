from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from car_rental_admin.domain.pricing import (
    CENTS,
    ZERO,
    ContractTotals,
    RateInputs,
    Surcharges,
)

HUNDRED = Decimal("100")


def _non_negative(value: Decimal | int) -> Decimal:
    amount = Decimal(value)
    return amount if amount > 0 else ZERO


@dataclass(frozen=True, slots=True)
class CalculateContractTotals:
    """
    Derive contract totals from rate inputs using exact decimal arithmetic.

    Order of operations:
    - gross = daily_rate * days
    - subtotal = max(0, gross - discount)
    - base total = subtotal + subtotal * tax_rate / 100
    - card payment amount = base total * card_payment_percent / 100
    - total = base total + surcharges + card payment amount

    Rounding policy:
    - Intermediate values keep full Decimal precision
    - Card payment amount is rounded to cents (ROUND_HALF_UP) before it is added
    - subtotal and total are rounded to cents (ROUND_HALF_UP)

    A daily rate or day count that is not positive means the contract is not
    yet computable; every amount is then zero. Negative discount, tax,
    surcharges and percentages are clamped to zero. The calculation never raises.
    """

    def execute(
        self,
        rate: RateInputs,
        surcharges: Surcharges | None = None,
        card_payment_percent: Decimal | int = ZERO,
    ) -> ContractTotals:
        daily_rate = Decimal(rate.daily_rate)
        if daily_rate <= 0 or rate.days <= 0:
            return ContractTotals()

        surcharges = surcharges or Surcharges()

        gross = daily_rate * Decimal(rate.days)
        discounted = max(ZERO, gross - _non_negative(rate.discount))
        tax_amount = discounted * _non_negative(rate.tax_rate) / HUNDRED
        base_total = discounted + tax_amount

        card_payment_amount = (
            base_total * _non_negative(card_payment_percent) / HUNDRED
        ).quantize(CENTS, rounding=ROUND_HALF_UP)

        total = base_total + surcharges.total() + card_payment_amount

        return ContractTotals(
            subtotal=discounted.quantize(CENTS, rounding=ROUND_HALF_UP),
            card_payment_amount=card_payment_amount,
            total=total.quantize(CENTS, rounding=ROUND_HALF_UP),
        )
