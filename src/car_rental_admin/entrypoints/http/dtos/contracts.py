from datetime import date, datetime, time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from car_rental_admin.domain.contract import ContractStatus, PaymentMode

# Stored as NUMERIC(12, 2) and NUMERIC(5, 2): 10 and 3 integer digits
MONEY_PATTERN = r"^\d{1,10}(\.\d{1,2})?$"
PERCENT_PATTERN = r"^\d{1,3}(\.\d{1,2})?$"


def money_field(description: str, example: str = "0.00", pattern: str = MONEY_PATTERN) -> Any:
    return Field(
        default="0",
        description=description,
        examples=[example],
        pattern=pattern,
    )


class SurchargesDTO(BaseModel):
    """Fixed add-ons, each a decimal string."""

    sim: str = money_field("SIM / mobile internet add-on", "200.00")
    delivery: str = money_field("Delivery or pickup away from the agency", "300.00")
    child_seat: str = money_field("Child seat add-on")
    booster_seat: str = money_field("Booster seat add-on")


class ContractPricingDTO(BaseModel):
    """Priced inputs shared by quotes and contract writes."""

    daily_rate: str = Field(
        description="Daily rate as decimal string",
        examples=["1000.00"],
        pattern=MONEY_PATTERN,
    )
    discount: str = money_field("Flat discount taken off rate x days", "500.00")
    tax_rate: str = money_field("Tax percentage, e.g. '15' for 15%", "15", PERCENT_PATTERN)
    card_payment_percent: str = money_field(
        "Card fee percentage applied to the taxed amount", "2", PERCENT_PATTERN
    )
    surcharges: SurchargesDTO = Field(default_factory=SurchargesDTO)


class ContractQuoteRequestDTO(ContractPricingDTO):
    """
    Request for a price quote.

    Give either start_date and end_date (days are the inclusive count) or days.
    """

    start_date: date | None = None
    end_date: date | None = None
    days: int | None = Field(default=None, ge=0, description="Used when no dates are given")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "daily_rate": "1000.00",
                "start_date": "2025-01-10",
                "end_date": "2025-01-12",
                "discount": "500.00",
                "tax_rate": "15",
                "card_payment_percent": "2",
                "surcharges": {"sim": "200.00", "delivery": "300.00"},
            }
        }
    )


class ContractQuoteResponseDTO(BaseModel):
    days: int
    subtotal: str
    card_payment_amount: str
    total: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "days": 3,
                "subtotal": "2500.00",
                "card_payment_amount": "57.50",
                "total": "3432.50",
            }
        }
    )


class BookingPeriodDTO(BaseModel):
    start: date
    end: date


class AvailabilityRequestDTO(BaseModel):
    car_id: str
    start_date: date
    end_date: date
    exclude_contract_id: str | None = Field(
        default=None, description="Contract being edited, left out of the check"
    )


class AvailabilityResponseDTO(BaseModel):
    available: bool
    conflicts: list[BookingPeriodDTO]


class CarBookingsResponseDTO(BaseModel):
    car_id: str
    bookings: list[BookingPeriodDTO]


class ContractWriteDTO(ContractPricingDTO):
    """
    Payload for creating or replacing a contract.

    Totals and day count are not accepted: they are derived server side.
    """

    customer_id: str | None = None
    car_id: str | None = None
    start_date: date | None = None
    end_date: date | None = None

    status: ContractStatus = ContractStatus.DRAFT
    payment_mode: PaymentMode | None = None
    license_number: str | None = Field(default=None, max_length=50)
    fuel_amount: int | None = Field(default=None, ge=0, le=8, description="Fuel level in eighths")
    pre_authorization: str | None = Field(default=None, max_length=100)
    second_driver_name: str | None = Field(default=None, max_length=120)
    second_driver_license: str | None = Field(default=None, max_length=50)
    notes: str | None = None

    pickup_date: date | None = None
    pickup_time: time | None = None
    delivery_date: date | None = None
    delivery_time: time | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "customer_id": "c0a80121-7ac0-4e1c-8d2f-6f1f0e7a9b11",
                "car_id": "550e8400-e29b-41d4-a716-446655440000",
                "start_date": "2025-01-10",
                "end_date": "2025-01-12",
                "daily_rate": "1000.00",
                "discount": "500.00",
                "tax_rate": "15",
                "card_payment_percent": "2",
                "surcharges": {"sim": "200.00", "delivery": "300.00"},
                "status": "active",
                "payment_mode": "card",
                "pickup_date": "2025-01-10",
                "pickup_time": "09:30",
            }
        }
    )


class ContractResponseDTO(BaseModel):
    id: str
    contract_number: str
    customer_id: str
    car_id: str
    start_date: date
    end_date: date

    daily_rate: str
    days: int
    discount: str
    tax_rate: str
    surcharges: SurchargesDTO
    card_payment_percent: str

    subtotal: str
    card_payment_amount: str
    total: str

    status: ContractStatus
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

    created_at: datetime | None = None
    updated_at: datetime | None = None


class ContractSubmitResponseDTO(BaseModel):
    contract: ContractResponseDTO
    warnings: list[str] = Field(default_factory=list)


class ContractListQueryDTO(BaseModel):
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=20, ge=1, le=200)


class ContractListResponseDTO(BaseModel):
    contracts: list[ContractResponseDTO]
    total: int
    offset: int
    limit: int
