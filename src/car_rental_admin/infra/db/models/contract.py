from __future__ import annotations

import uuid
from datetime import date, datetime, time
from decimal import Decimal

from sqlalchemy import (
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    Time,
    func,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from car_rental_admin.infra.db.models.base import Base

Money = Numeric(precision=12, scale=2)


class ContractRow(Base):
    __tablename__ = "contracts"
    __table_args__ = (Index("ix_contracts_car_id_dates", "car_id", "start_date", "end_date"),)

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    contract_number: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)

    customer_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("customers.id"), nullable=False
    )
    car_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("cars.id"), nullable=False
    )

    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)

    daily_rate: Mapped[Decimal] = mapped_column(Money, nullable=False)
    days: Mapped[int] = mapped_column(Integer, nullable=False)
    discount: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0"))
    tax_rate: Mapped[Decimal] = mapped_column(
        Numeric(precision=5, scale=2), nullable=False, default=Decimal("0")
    )

    sim_amount: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0"))
    delivery_amount: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0"))
    child_seat_amount: Mapped[Decimal] = mapped_column(Money, nullable=False, default=Decimal("0"))
    booster_seat_amount: Mapped[Decimal] = mapped_column(
        Money, nullable=False, default=Decimal("0")
    )
    card_payment_percent: Mapped[Decimal] = mapped_column(
        Numeric(precision=5, scale=2), nullable=False, default=Decimal("0")
    )

    subtotal: Mapped[Decimal] = mapped_column(Money, nullable=False)
    card_payment_amount: Mapped[Decimal] = mapped_column(Money, nullable=False)
    total: Mapped[Decimal] = mapped_column(Money, nullable=False)

    status: Mapped[str] = mapped_column(String(20), nullable=False, default="draft")
    payment_mode: Mapped[str | None] = mapped_column(String(20), nullable=True)

    license_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    fuel_amount: Mapped[int | None] = mapped_column(Integer, nullable=True)
    pre_authorization: Mapped[str | None] = mapped_column(String(100), nullable=True)
    second_driver_name: Mapped[str | None] = mapped_column(String(120), nullable=True)
    second_driver_license: Mapped[str | None] = mapped_column(String(50), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    pickup_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    pickup_time: Mapped[time | None] = mapped_column(Time, nullable=True)
    delivery_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    delivery_time: Mapped[time | None] = mapped_column(Time, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
