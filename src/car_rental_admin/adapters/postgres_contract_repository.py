"""PostgreSQL implementation of ContractRepository."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from car_rental_admin.adapters.sqlalchemy_support import store_errors, uuid_or_none
from car_rental_admin.domain.booking import BookingPeriod
from car_rental_admin.domain.car import Paging
from car_rental_admin.domain.contract import Contract, ContractStatus, PaymentMode
from car_rental_admin.domain.errors import NotFoundError
from car_rental_admin.domain.pricing import ContractTotals, RateInputs, Surcharges
from car_rental_admin.infra.db.models.contract import ContractRow
from car_rental_admin.ports.contract_repository import ContractListResult, ContractRepository


class PostgresContractRepository(ContractRepository):
    """
    PostgreSQL implementation of ContractRepository.

    - Flushes writes so generated ids/timestamps are available; the
      per-request session commits
    - Booked periods come straight from the start/end DATE columns
    - Converts ContractRow (infrastructure) to Contract (domain)
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, contract_id: str) -> Contract | None:
        key = uuid_or_none(contract_id)
        if key is None:
            return None

        with store_errors("get_by_id"):
            row = self._session.get(ContractRow, key)
        return self._to_domain(row) if row else None

    def list(self, paging: Paging) -> ContractListResult:
        with store_errors("list"):
            total_count = self._session.execute(select(func.count(ContractRow.id))).scalar() or 0
            rows = (
                self._session.execute(
                    select(ContractRow)
                    .order_by(ContractRow.created_at.desc())
                    .offset(paging.offset)
                    .limit(paging.limit)
                )
                .scalars()
                .all()
            )

        return ContractListResult(
            contracts=[self._to_domain(row) for row in rows], total_count=total_count
        )

    def create(self, contract: Contract) -> Contract:
        row = ContractRow()
        self._apply(row, contract)
        if contract.id:
            row.id = UUID(contract.id)

        with store_errors("create"):
            self._session.add(row)
            self._session.flush()
            self._session.refresh(row)

        return self._to_domain(row)

    def update(self, contract: Contract) -> Contract:
        key = uuid_or_none(contract.id)
        with store_errors("update"):
            row = self._session.get(ContractRow, key) if key else None
            if row is None:
                raise NotFoundError(resource="Contract", identifier=contract.id)

            self._apply(row, contract)
            self._session.flush()
            self._session.refresh(row)

        return self._to_domain(row)

    def delete(self, contract_id: str) -> bool:
        key = uuid_or_none(contract_id)
        if key is None:
            return False

        with store_errors("delete"):
            result = self._session.execute(delete(ContractRow).where(ContractRow.id == key))
        return bool(result.rowcount)

    def booked_periods_for_car(
        self, car_id: str, exclude_contract_id: str | None = None
    ) -> list[BookingPeriod]:
        car_key = uuid_or_none(car_id)
        if car_key is None:
            return []

        query = select(ContractRow.start_date, ContractRow.end_date).where(
            ContractRow.car_id == car_key
        )
        exclude_key = uuid_or_none(exclude_contract_id)
        if exclude_key is not None:
            query = query.where(ContractRow.id != exclude_key)

        with store_errors("booked_periods_for_car"):
            rows = self._session.execute(query).all()

        return [BookingPeriod(start=start, end=end) for start, end in rows]

    def created_since(self, since: datetime) -> list[Contract]:
        with store_errors("created_since"):
            rows = (
                self._session.execute(
                    select(ContractRow)
                    .where(ContractRow.created_at >= since)
                    .order_by(ContractRow.created_at.desc())
                )
                .scalars()
                .all()
            )
        return [self._to_domain(row) for row in rows]

    def list_all(self) -> list[Contract]:
        with store_errors("list_all"):
            rows = (
                self._session.execute(select(ContractRow).order_by(ContractRow.created_at.desc()))
                .scalars()
                .all()
            )
        return [self._to_domain(row) for row in rows]

    def count_referencing(
        self, *, car_id: str | None = None, customer_id: str | None = None
    ) -> int:
        query = select(func.count(ContractRow.id))
        for column, value in ((ContractRow.car_id, car_id), (ContractRow.customer_id, customer_id)):
            if value is None:
                continue
            key = uuid_or_none(value)
            if key is None:
                return 0
            query = query.where(column == key)

        with store_errors("count_referencing"):
            return self._session.execute(query).scalar() or 0

    def _apply(self, row: ContractRow, contract: Contract) -> None:
        """Copy domain values onto a row (everything except id and timestamps)."""
        row.contract_number = contract.contract_number
        row.customer_id = UUID(contract.customer_id)
        row.car_id = UUID(contract.car_id)
        row.start_date = contract.start_date
        row.end_date = contract.end_date

        row.daily_rate = contract.rate.daily_rate
        row.days = contract.rate.days
        row.discount = contract.rate.discount
        row.tax_rate = contract.rate.tax_rate

        row.sim_amount = contract.surcharges.sim
        row.delivery_amount = contract.surcharges.delivery
        row.child_seat_amount = contract.surcharges.child_seat
        row.booster_seat_amount = contract.surcharges.booster_seat
        row.card_payment_percent = contract.card_payment_percent

        row.subtotal = contract.totals.subtotal
        row.card_payment_amount = contract.totals.card_payment_amount
        row.total = contract.totals.total

        row.status = contract.status.value
        row.payment_mode = contract.payment_mode.value if contract.payment_mode else None
        row.license_number = contract.license_number
        row.fuel_amount = contract.fuel_amount
        row.pre_authorization = contract.pre_authorization
        row.second_driver_name = contract.second_driver_name
        row.second_driver_license = contract.second_driver_license
        row.notes = contract.notes
        row.pickup_date = contract.pickup_date
        row.pickup_time = contract.pickup_time
        row.delivery_date = contract.delivery_date
        row.delivery_time = contract.delivery_time

    def _to_domain(self, row: ContractRow) -> Contract:
        return Contract(
            id=str(row.id),
            contract_number=row.contract_number,
            customer_id=str(row.customer_id),
            car_id=str(row.car_id),
            start_date=row.start_date,
            end_date=row.end_date,
            rate=RateInputs(
                daily_rate=row.daily_rate,
                days=row.days,
                discount=row.discount,
                tax_rate=row.tax_rate,
            ),
            totals=ContractTotals(
                subtotal=row.subtotal,
                card_payment_amount=row.card_payment_amount,
                total=row.total,
            ),
            surcharges=Surcharges(
                sim=row.sim_amount,
                delivery=row.delivery_amount,
                child_seat=row.child_seat_amount,
                booster_seat=row.booster_seat_amount,
            ),
            card_payment_percent=row.card_payment_percent,
            status=ContractStatus(row.status),
            payment_mode=PaymentMode(row.payment_mode) if row.payment_mode else None,
            license_number=row.license_number,
            fuel_amount=row.fuel_amount,
            pre_authorization=row.pre_authorization,
            second_driver_name=row.second_driver_name,
            second_driver_license=row.second_driver_license,
            notes=row.notes,
            pickup_date=row.pickup_date,
            pickup_time=row.pickup_time,
            delivery_date=row.delivery_date,
            delivery_time=row.delivery_time,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
