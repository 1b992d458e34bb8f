"""Submit contract use case."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import date
from typing import Callable

from car_rental_admin.domain.contract import Contract, generate_contract_number
from car_rental_admin.domain.errors import BookingConflictError, ValidationError
from car_rental_admin.ports.car_repository import CarRepository
from car_rental_admin.ports.contract_repository import ContractRepository
from car_rental_admin.ports.customer_repository import CustomerRepository
from car_rental_admin.use_cases.check_car_availability import find_conflicts
from car_rental_admin.use_cases.contract_draft import (
    ContractDraft,
    DraftMode,
    apply_bookings_fetch,
    assemble_contract,
    recalculate,
    validate_draft,
)
from car_rental_admin.use_cases.load_booked_periods import LoadBookedPeriods

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SubmitContractRequest:
    draft: ContractDraft


@dataclass(frozen=True, slots=True)
class SubmitContractResponse:
    contract: Contract
    warnings: tuple[str, ...] = ()


class SubmitContract:
    """
    Validate a contract draft and hand it to persistence.

    Responsibilities:
    - Reject incomplete drafts (customer, car, dates, payment mode)
    - Reject drafts naming a customer or car that does not exist
    - Recompute totals so the stored amounts are derived, never client supplied
    - In create mode, reload the car's bookings and reject overlapping periods
    - In edit mode, trust the already-booked period and skip the availability check
    - Create or update the record; store failures propagate unchanged
    """

    def __init__(
        self,
        contract_repository: ContractRepository,
        car_repository: CarRepository,
        customer_repository: CustomerRepository,
        today: Callable[[], date] = date.today,
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            contract_repository: Repository for contract persistence
            car_repository: Repository used to confirm the selected car exists
            customer_repository: Repository used to confirm the customer exists
            today: Clock used for contract numbers
            rng: Random source for contract number suffixes
        """
        self._contracts = contract_repository
        self._cars = car_repository
        self._customers = customer_repository
        self._load_booked_periods = LoadBookedPeriods(contract_repository)
        self._today = today
        self._rng = rng

    def execute(self, request: SubmitContractRequest) -> SubmitContractResponse:
        """
        Execute the submission.

        Args:
            request: Request carrying the contract draft

        Returns:
            SubmitContractResponse with the stored contract and any warnings

        Raises:
            ValidationError: If the draft is incomplete or names an unknown car or customer
            BookingConflictError: If a new contract overlaps existing bookings
            NotFoundError: If an edited contract no longer exists
            PersistenceError: If the store fails
        """
        draft = recalculate(request.draft)
        validate_draft(draft)

        self._ensure_references_exist(draft)

        if draft.mode is DraftMode.CREATE:
            draft = self._ensure_available(draft)
            contract_number = draft.contract_number or generate_contract_number(
                self._today(), self._rng
            )
            saved = self._contracts.create(assemble_contract(draft, contract_number))
        else:
            saved = self._contracts.update(
                assemble_contract(draft, draft.contract_number or "")
            )

        logger.info(
            "Contract saved",
            extra={
                "contract_id": saved.id,
                "contract_number": saved.contract_number,
                "mode": draft.mode.value,
                "warnings": len(draft.warnings),
            },
        )

        return SubmitContractResponse(contract=saved, warnings=draft.warnings)

    def _ensure_references_exist(self, draft: ContractDraft) -> None:
        errors: list[dict[str, str]] = []
        if self._customers.get_by_id(draft.customer_id) is None:  # type: ignore[arg-type]
            errors.append(
                {
                    "field": "customer_id",
                    "message": f"Unknown customer: {draft.customer_id}",
                    "code": "UNKNOWN_CUSTOMER",
                }
            )
        if self._cars.get_by_id(draft.car_id) is None:  # type: ignore[arg-type]
            errors.append(
                {
                    "field": "car_id",
                    "message": f"Unknown car: {draft.car_id}",
                    "code": "UNKNOWN_CAR",
                }
            )
        if errors:
            raise ValidationError(errors=errors)

    def _ensure_available(self, draft: ContractDraft) -> ContractDraft:
        # Always re-read bookings at submit time; the draft's snapshot may be stale
        fetch = self._load_booked_periods.execute(
            draft.car_id, generation=draft.bookings_generation  # type: ignore[arg-type]
        )
        draft = apply_bookings_fetch(draft, fetch)

        candidate = draft.period
        if candidate is None:
            return draft

        conflicts = find_conflicts(draft.booked_periods, candidate)
        if conflicts:
            raise BookingConflictError(
                car_id=draft.car_id,  # type: ignore[arg-type]
                conflicts=[period.to_dict() for period in conflicts],
            )

        return draft
