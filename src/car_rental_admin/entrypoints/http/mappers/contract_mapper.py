from __future__ import annotations

from decimal import Decimal, InvalidOperation

from car_rental_admin.domain.booking import BookingPeriod, inclusive_day_count
from car_rental_admin.domain.contract import Contract
from car_rental_admin.domain.errors import ValidationError
from car_rental_admin.domain.pricing import ContractTotals, RateInputs, Surcharges
from car_rental_admin.entrypoints.http.dtos.contracts import (
    AvailabilityRequestDTO,
    AvailabilityResponseDTO,
    BookingPeriodDTO,
    CarBookingsResponseDTO,
    ContractListResponseDTO,
    ContractPricingDTO,
    ContractQuoteRequestDTO,
    ContractQuoteResponseDTO,
    ContractResponseDTO,
    ContractSubmitResponseDTO,
    ContractWriteDTO,
    SurchargesDTO,
)
from car_rental_admin.use_cases.check_car_availability import (
    CheckCarAvailabilityRequest,
    CheckCarAvailabilityResponse,
)
from car_rental_admin.use_cases.contract_draft import (
    ContractDraft,
    change_dates,
    change_rate,
    change_surcharges,
    clear_car,
    select_car,
    update_details,
)
from car_rental_admin.use_cases.list_contracts import ListContractsResponse
from car_rental_admin.use_cases.submit_contract import SubmitContractResponse


class ContractMapper:
    """Maps between REST DTOs and domain models for contracts."""

    @staticmethod
    def to_pricing(dto: ContractPricingDTO) -> tuple[Decimal, Decimal, Decimal, Decimal, Surcharges]:
        """
        Converts the priced inputs of a payload to Decimals.

        Returns:
            (daily_rate, discount, tax_rate, card_payment_percent, surcharges)

        Raises:
            ValidationError: If any value cannot be converted to a valid Decimal
        """
        errors: list[dict[str, str]] = []

        def decimal_of(field: str, raw: str) -> Decimal:
            try:
                return Decimal(raw)
            except (InvalidOperation, ValueError):
                errors.append(
                    {
                        "field": field,
                        "message": f"Must be a valid decimal: {raw}",
                        "code": "INVALID_DECIMAL",
                    }
                )
                return Decimal("0")  # Placeholder to continue validation

        daily_rate = decimal_of("daily_rate", dto.daily_rate)
        discount = decimal_of("discount", dto.discount)
        tax_rate = decimal_of("tax_rate", dto.tax_rate)
        card_payment_percent = decimal_of("card_payment_percent", dto.card_payment_percent)
        surcharges = Surcharges(
            sim=decimal_of("surcharges.sim", dto.surcharges.sim),
            delivery=decimal_of("surcharges.delivery", dto.surcharges.delivery),
            child_seat=decimal_of("surcharges.child_seat", dto.surcharges.child_seat),
            booster_seat=decimal_of("surcharges.booster_seat", dto.surcharges.booster_seat),
        )

        if errors:
            raise ValidationError(errors=errors)

        return daily_rate, discount, tax_rate, card_payment_percent, surcharges

    @staticmethod
    def to_quote_inputs(dto: ContractQuoteRequestDTO) -> tuple[RateInputs, Surcharges, Decimal]:
        """Dates win over an explicit day count when both are given."""
        daily_rate, discount, tax_rate, card_payment_percent, surcharges = (
            ContractMapper.to_pricing(dto)
        )

        if dto.start_date is not None and dto.end_date is not None:
            days = inclusive_day_count(dto.start_date, dto.end_date)
        else:
            days = dto.days or 0

        rate = RateInputs(daily_rate=daily_rate, days=days, discount=discount, tax_rate=tax_rate)
        return rate, surcharges, card_payment_percent

    @staticmethod
    def to_quote_response(days: int, totals: ContractTotals) -> ContractQuoteResponseDTO:
        return ContractQuoteResponseDTO(
            days=days,
            subtotal=str(totals.subtotal),
            card_payment_amount=str(totals.card_payment_amount),
            total=str(totals.total),
        )

    @staticmethod
    def to_create_draft(dto: ContractWriteDTO) -> ContractDraft:
        return ContractMapper._apply_write(ContractDraft(), dto)

    @staticmethod
    def to_edit_draft(existing: Contract, dto: ContractWriteDTO) -> ContractDraft:
        return ContractMapper._apply_write(ContractDraft.from_contract(existing), dto)

    @staticmethod
    def _apply_write(draft: ContractDraft, dto: ContractWriteDTO) -> ContractDraft:
        """
        Replay the payload onto a draft through the same transitions the form uses.

        Every field is replaced, so an omitted car_id deselects the car.
        """
        daily_rate, discount, tax_rate, card_payment_percent, surcharges = (
            ContractMapper.to_pricing(dto)
        )

        draft = update_details(
            draft,
            customer_id=dto.customer_id,
            status=dto.status,
            payment_mode=dto.payment_mode,
            license_number=dto.license_number,
            fuel_amount=dto.fuel_amount,
            pre_authorization=dto.pre_authorization,
            second_driver_name=dto.second_driver_name,
            second_driver_license=dto.second_driver_license,
            notes=dto.notes,
            pickup_date=dto.pickup_date,
            pickup_time=dto.pickup_time,
            delivery_date=dto.delivery_date,
            delivery_time=dto.delivery_time,
        )
        if dto.car_id:
            draft = select_car(draft, dto.car_id, daily_rate)
        else:
            draft = clear_car(draft)
        draft = change_dates(draft, dto.start_date, dto.end_date)
        draft = change_rate(
            draft,
            daily_rate=daily_rate,
            discount=discount,
            tax_rate=tax_rate,
            card_payment_percent=card_payment_percent,
        )
        return change_surcharges(draft, surcharges)

    @staticmethod
    def to_contract_response(contract: Contract) -> ContractResponseDTO:
        """Decimal → str at the boundary."""
        return ContractResponseDTO(
            id=contract.id or "",
            contract_number=contract.contract_number,
            customer_id=contract.customer_id,
            car_id=contract.car_id,
            start_date=contract.start_date,
            end_date=contract.end_date,
            daily_rate=str(contract.rate.daily_rate),
            days=contract.rate.days,
            discount=str(contract.rate.discount),
            tax_rate=str(contract.rate.tax_rate),
            surcharges=SurchargesDTO(
                **{name: str(amount) for name, amount in contract.surcharges.amounts().items()}
            ),
            card_payment_percent=str(contract.card_payment_percent),
            subtotal=str(contract.totals.subtotal),
            card_payment_amount=str(contract.totals.card_payment_amount),
            total=str(contract.totals.total),
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
            created_at=contract.created_at,
            updated_at=contract.updated_at,
        )

    @staticmethod
    def to_submit_response(result: SubmitContractResponse) -> ContractSubmitResponseDTO:
        return ContractSubmitResponseDTO(
            contract=ContractMapper.to_contract_response(result.contract),
            warnings=list(result.warnings),
        )

    @staticmethod
    def to_list_response(
        result: ListContractsResponse, offset: int, limit: int
    ) -> ContractListResponseDTO:
        return ContractListResponseDTO(
            contracts=[ContractMapper.to_contract_response(c) for c in result.contracts],
            total=result.total_count or 0,
            offset=offset,
            limit=limit,
        )

    @staticmethod
    def to_availability_request(dto: AvailabilityRequestDTO) -> CheckCarAvailabilityRequest:
        return CheckCarAvailabilityRequest(
            car_id=dto.car_id,
            period=BookingPeriod(start=dto.start_date, end=dto.end_date),
            exclude_contract_id=dto.exclude_contract_id,
        )

    @staticmethod
    def to_period_dto(period: BookingPeriod) -> BookingPeriodDTO:
        return BookingPeriodDTO(start=period.start, end=period.end)

    @staticmethod
    def to_availability_response(result: CheckCarAvailabilityResponse) -> AvailabilityResponseDTO:
        return AvailabilityResponseDTO(
            available=result.is_available,
            conflicts=[ContractMapper.to_period_dto(p) for p in result.conflicts],
        )

    @staticmethod
    def to_bookings_response(car_id: str, periods: list[BookingPeriod]) -> CarBookingsResponseDTO:
        return CarBookingsResponseDTO(
            car_id=car_id,
            bookings=[ContractMapper.to_period_dto(p) for p in periods],
        )
