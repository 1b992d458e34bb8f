"""Contract draft state and its transitions.

A ContractDraft is the immutable state of a contract form. Every edit goes
through one of the transition functions below, each returning a new draft.
Transitions that touch a priced field end with ``recalculate`` so the totals
on a draft are always derived from its current inputs.

Booked periods for the selected car arrive asynchronously relative to user
edits. Each car selection bumps ``bookings_generation``; fetch results carry
the generation they were requested for and are dropped when a later
selection has superseded them.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, time
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable

from car_rental_admin.domain.booking import BookingPeriod, inclusive_day_count
from car_rental_admin.domain.contract import Contract, ContractStatus, PaymentMode
from car_rental_admin.domain.errors import ValidationError
from car_rental_admin.domain.pricing import MAX_AMOUNT, ZERO, ContractTotals, RateInputs, Surcharges
from car_rental_admin.use_cases.calculate_contract_totals import CalculateContractTotals

BOOKINGS_UNKNOWN_WARNING = (
    "Existing bookings for this car could not be loaded ({reason}); "
    "availability was not verified"
)


class DraftMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


@dataclass(frozen=True, slots=True)
class ContractDraft:
    mode: DraftMode = DraftMode.CREATE
    contract_id: str | None = None
    contract_number: str | None = None

    customer_id: str | None = None
    car_id: str | None = None
    start_date: date | None = None
    end_date: date | None = None

    rate: RateInputs = field(default_factory=RateInputs)
    surcharges: Surcharges = field(default_factory=Surcharges)
    card_payment_percent: Decimal = ZERO
    totals: ContractTotals = field(default_factory=ContractTotals)

    status: ContractStatus = ContractStatus.DRAFT
    payment_mode: PaymentMode | None = None
    license_number: str | None = None
    fuel_amount: int | None = None
    pre_authorization: str | None = None
    second_driver_name: str | None = None
    second_driver_license: str | None = None
    notes: str | None = None
    pickup_date: date | None = None
    pickup_time: time | None = None
    delivery_date: date | None = None
    delivery_time: time | None = None

    booked_periods: tuple[BookingPeriod, ...] = ()
    bookings_generation: int = 0
    bookings_known: bool = False
    warnings: tuple[str, ...] = ()

    @classmethod
    def from_contract(cls, contract: Contract) -> ContractDraft:
        """Open an existing contract for editing."""
        return cls(
            mode=DraftMode.EDIT,
            contract_id=contract.id,
            contract_number=contract.contract_number,
            customer_id=contract.customer_id,
            car_id=contract.car_id,
            start_date=contract.start_date,
            end_date=contract.end_date,
            rate=contract.rate,
            surcharges=contract.surcharges,
            card_payment_percent=contract.card_payment_percent,
            totals=contract.totals,
            status=contract.status,
            payment_mode=contract.payment_mode,
            license_number=contract.license_number,
            fuel_amount=contract.fuel_amount,
            pre_authorization=contract.pre_authorization,
            second_driver_name=contract.second_driver_name,
            second_driver_license=contract.second_driver_license,
            notes=contract.notes,
            pickup_date=contract.pickup_date,
            pickup_time=contract.pickup_time,
            delivery_date=contract.delivery_date,
            delivery_time=contract.delivery_time,
        )

    @property
    def period(self) -> BookingPeriod | None:
        if self.start_date is None or self.end_date is None:
            return None
        return BookingPeriod(start=self.start_date, end=self.end_date)


@dataclass(frozen=True, slots=True)
class BookingsFetch:
    """Outcome of loading a car's booked periods for one fetch generation."""

    generation: int
    periods: tuple[BookingPeriod, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ==============================================================================
# Transitions
# ==============================================================================

_DETAIL_FIELDS = frozenset(
    {
        "customer_id",
        "status",
        "payment_mode",
        "license_number",
        "fuel_amount",
        "pre_authorization",
        "second_driver_name",
        "second_driver_license",
        "notes",
        "pickup_date",
        "pickup_time",
        "delivery_date",
        "delivery_time",
    }
)

_calculator = CalculateContractTotals()


def recalculate(draft: ContractDraft) -> ContractDraft:
    totals = _calculator.execute(draft.rate, draft.surcharges, draft.card_payment_percent)
    return replace(draft, totals=totals)


def change_dates(draft: ContractDraft, start: date | None, end: date | None) -> ContractDraft:
    days = inclusive_day_count(start, end)
    draft = replace(draft, start_date=start, end_date=end, rate=replace(draft.rate, days=days))
    return recalculate(draft)


def change_rate(
    draft: ContractDraft,
    *,
    daily_rate: Decimal | None = None,
    discount: Decimal | None = None,
    tax_rate: Decimal | None = None,
    card_payment_percent: Decimal | None = None,
) -> ContractDraft:
    """Change any of the priced inputs; omitted (None) inputs keep their value."""
    rate = draft.rate
    if daily_rate is not None:
        rate = replace(rate, daily_rate=daily_rate)
    if discount is not None:
        rate = replace(rate, discount=discount)
    if tax_rate is not None:
        rate = replace(rate, tax_rate=tax_rate)

    draft = replace(draft, rate=rate)
    if card_payment_percent is not None:
        draft = replace(draft, card_payment_percent=card_payment_percent)

    return recalculate(draft)


def change_surcharges(draft: ContractDraft, surcharges: Surcharges) -> ContractDraft:
    return recalculate(replace(draft, surcharges=surcharges))


def update_details(draft: ContractDraft, **changes: Any) -> ContractDraft:
    """
    Change fields that do not affect pricing or availability.

    Raises:
        ValueError: If a change targets a priced, derived or unknown field
    """
    unknown = set(changes) - _DETAIL_FIELDS
    if unknown:
        raise ValueError(f"Not a contract detail field: {', '.join(sorted(unknown))}")
    return replace(draft, **changes)


def select_car(draft: ContractDraft, car_id: str, daily_rate: Decimal) -> ContractDraft:
    """
    Select a car and take over its daily rate.

    In create mode the booking snapshot of the previous car is discarded and
    a new fetch generation starts; results of earlier fetches are ignored
    from then on. Edit mode keeps no snapshot.
    """
    draft = replace(draft, car_id=car_id, rate=replace(draft.rate, daily_rate=daily_rate))

    if draft.mode is DraftMode.CREATE:
        draft = replace(
            draft,
            booked_periods=(),
            bookings_known=False,
            bookings_generation=draft.bookings_generation + 1,
            warnings=(),
        )

    return recalculate(draft)


def clear_car(draft: ContractDraft) -> ContractDraft:
    """
    Deselect the car. The daily rate stays, the booking snapshot goes.

    Create mode starts a new fetch generation so a fetch still in flight for
    the old car cannot repopulate the snapshot.
    """
    if draft.car_id is None:
        return draft

    draft = replace(draft, car_id=None, booked_periods=(), bookings_known=False, warnings=())
    if draft.mode is DraftMode.CREATE:
        draft = replace(draft, bookings_generation=draft.bookings_generation + 1)
    return draft


def apply_bookings(
    draft: ContractDraft, generation: int, periods: Iterable[BookingPeriod]
) -> ContractDraft:
    """Store a successful fetch; it supersedes any earlier failure warning."""
    if generation != draft.bookings_generation:
        return draft
    return replace(draft, booked_periods=tuple(periods), bookings_known=True, warnings=())


def apply_bookings_failure(draft: ContractDraft, generation: int, reason: str) -> ContractDraft:
    """Record a failed fetch; availability falls back to unrestricted (fail-open)."""
    if generation != draft.bookings_generation:
        return draft
    return replace(
        draft,
        booked_periods=(),
        bookings_known=False,
        warnings=(BOOKINGS_UNKNOWN_WARNING.format(reason=reason),),
    )


def apply_bookings_fetch(draft: ContractDraft, fetch: BookingsFetch) -> ContractDraft:
    if fetch.ok:
        return apply_bookings(draft, fetch.generation, fetch.periods)
    return apply_bookings_failure(draft, fetch.generation, fetch.error or "unknown error")


# ==============================================================================
# Assembly
# ==============================================================================


def validate_draft(draft: ContractDraft) -> None:
    """
    Check the draft is complete enough to persist.

    Raises:
        ValidationError: With one entry per missing or inconsistent field
    """
    errors: list[dict[str, str]] = []

    def missing(field_name: str, message: str) -> None:
        errors.append({"field": field_name, "message": message, "code": "REQUIRED"})

    if not draft.customer_id:
        missing("customer_id", "Select a customer")
    if not draft.car_id:
        missing("car_id", "Select a car")
    if draft.start_date is None:
        missing("start_date", "Start date is required")
    if draft.end_date is None:
        missing("end_date", "End date is required")
    if draft.payment_mode is None:
        missing("payment_mode", "Select a payment mode")
    if draft.mode is DraftMode.EDIT and not draft.contract_id:
        missing("contract_id", "Edited contract has no id")

    if (
        draft.start_date is not None
        and draft.end_date is not None
        and draft.end_date < draft.start_date
    ):
        errors.append(
            {
                "field": "end_date",
                "message": "Must be on or after start_date",
                "code": "INVALID_RANGE",
            }
        )

    amounts = {"subtotal": draft.totals.subtotal, "total": draft.totals.total}
    for field_name, amount in amounts.items():
        if amount > MAX_AMOUNT:
            errors.append(
                {
                    "field": field_name,
                    "message": f"Must not exceed {MAX_AMOUNT}",
                    "code": "OUT_OF_RANGE",
                }
            )

    if errors:
        raise ValidationError(errors=errors)


def assemble_contract(draft: ContractDraft, contract_number: str) -> Contract:
    """
    Build the persistable record from a draft.

    Totals are recomputed here so a record can never carry stale amounts.

    Raises:
        ValidationError: If the draft is incomplete
    """
    draft = recalculate(draft)
    validate_draft(draft)

    return Contract(
        id=draft.contract_id,
        contract_number=contract_number,
        customer_id=draft.customer_id,  # type: ignore[arg-type]
        car_id=draft.car_id,  # type: ignore[arg-type]
        start_date=draft.start_date,  # type: ignore[arg-type]
        end_date=draft.end_date,  # type: ignore[arg-type]
        rate=draft.rate,
        totals=draft.totals,
        surcharges=draft.surcharges,
        card_payment_percent=draft.card_payment_percent,
        status=draft.status,
        payment_mode=draft.payment_mode,
        license_number=draft.license_number,
        fuel_amount=draft.fuel_amount,
        pre_authorization=draft.pre_authorization,
        second_driver_name=draft.second_driver_name,
        second_driver_license=draft.second_driver_license,
        notes=draft.notes,
        pickup_date=draft.pickup_date,
        pickup_time=draft.pickup_time,
        delivery_date=draft.delivery_date,
        delivery_time=draft.delivery_time,
    )
