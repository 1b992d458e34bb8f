"""Add customers table, link contracts to it, add pickup and delivery slots

Revision ID: 8d52f0a6c1b3
Revises: 3c1e9b7d4a20
Create Date: 2026-10-17 15:40:02.551930

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "8d52f0a6c1b3"
down_revision: Union[str, Sequence[str], None] = "3c1e9b7d4a20"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_SLOT_COLUMNS = (
    ("pickup_date", sa.Date),
    ("pickup_time", sa.Time),
    ("delivery_date", sa.Date),
    ("delivery_time", sa.Time),
)


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "customers",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=30), nullable=False),
        sa.Column("nic_or_passport", sa.String(length=50), nullable=False),
        sa.Column("address", sa.Text(), nullable=True),
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
        sa.PrimaryKeyConstraint("id"),
    )

    # Free-text customer ids cannot be linked; fails loudly if any exist
    op.alter_column(
        "contracts",
        "customer_id",
        existing_type=sa.String(length=64),
        type_=postgresql.UUID(as_uuid=True),
        postgresql_using="customer_id::uuid",
    )
    op.create_foreign_key(
        "fk_contracts_customer_id_customers",
        "contracts",
        "customers",
        ["customer_id"],
        ["id"],
    )

    for name, type_ in _SLOT_COLUMNS:
        op.add_column("contracts", sa.Column(name, type_(), nullable=True))


def downgrade() -> None:
    """Downgrade schema."""
    for name, _ in reversed(_SLOT_COLUMNS):
        op.drop_column("contracts", name)

    op.drop_constraint("fk_contracts_customer_id_customers", "contracts", type_="foreignkey")
    op.alter_column(
        "contracts",
        "customer_id",
        existing_type=postgresql.UUID(as_uuid=True),
        type_=sa.String(length=64),
        postgresql_using="customer_id::text",
    )
    op.drop_table("customers")
