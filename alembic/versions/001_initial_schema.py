"""Initial schema — people, addresses, phone_numbers.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "people",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("full_name", sa.String(70), nullable=False),
        sa.Column("created", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_by", sa.String(100), nullable=True),
        sa.Column("last_modified", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_modified_by", sa.String(100), nullable=True),
        sa.Column("is_deleted", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("deleted", sa.DateTime(timezone=True), nullable=True),
        sa.Column("deleted_by", sa.String(100), nullable=True),
    )
    op.create_index("ix_people_is_deleted", "people", ["is_deleted"])

    op.create_table(
        "addresses",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "person_id", sa.Integer,
            sa.ForeignKey("people.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("address_line", sa.String(256), nullable=False),
        sa.Column("address_type", sa.String(20), nullable=False),
    )
    op.create_index("ix_addresses_person_id", "addresses", ["person_id"])

    op.create_table(
        "phone_numbers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "address_id", sa.Integer,
            sa.ForeignKey("addresses.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("number", sa.String(20), nullable=False),
    )
    op.create_index("ix_phone_numbers_address_id", "phone_numbers", ["address_id"])


def downgrade() -> None:
    op.drop_index("ix_phone_numbers_address_id", table_name="phone_numbers")
    op.drop_table("phone_numbers")
    op.drop_index("ix_addresses_person_id", table_name="addresses")
    op.drop_table("addresses")
    op.drop_index("ix_people_is_deleted", table_name="people")
    op.drop_table("people")
