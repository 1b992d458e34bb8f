"""Create cars and contracts tables

Revision ID: 3c1e9b7d4a20
Revises:
Create Date: 2026-10-17 09:12:40.118203

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1e9b7d4a20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _money(name: str, **kwargs) -> sa.Column:
    return sa.Column(name, sa.Numeric(precision=12, scale=2), nullable=False, **kwargs)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "cars",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("brand", sa.String(length=50), nullable=False),
        sa.Column("model", sa.String(length=50), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("plate_number", sa.String(length=20), nullable=False),
        sa.Column("price_per_day", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("plate_number"),
    )

    op.create_table(
        "contracts",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("contract_number", sa.String(length=32), nullable=False),
        sa.Column("customer_id", sa.String(length=64), nullable=False),
        sa.Column("car_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        _money("daily_rate"),
        sa.Column("days", sa.Integer(), nullable=False),
        _money("discount"),
        sa.Column("tax_rate", sa.Numeric(precision=5, scale=2), nullable=False),
        _money("sim_amount"),
        _money("delivery_amount"),
        _money("child_seat_amount"),
        _money("booster_seat_amount"),
        sa.Column("card_payment_percent", sa.Numeric(precision=5, scale=2), nullable=False),
        _money("subtotal"),
        _money("card_payment_amount"),
        _money("total"),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("payment_mode", sa.String(length=20), nullable=True),
        sa.Column("license_number", sa.String(length=50), nullable=True),
        sa.Column("fuel_amount", sa.Integer(), nullable=True),
        sa.Column("pre_authorization", sa.String(length=100), nullable=True),
        sa.Column("second_driver_name", sa.String(length=120), nullable=True),
        sa.Column("second_driver_license", sa.String(length=50), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["car_id"], ["cars.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("contract_number"),
    )
    op.create_index(
        "ix_contracts_car_id_dates",
        "contracts",
        ["car_id", "start_date", "end_date"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_contracts_car_id_dates", table_name="contracts")
    op.drop_table("contracts")
    op.drop_table("cars")
