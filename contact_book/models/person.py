"""Person ORM — persists the Person aggregate with its owned addresses and phone numbers.

Invariants:
    - id is an autoincrement integer primary key
    - A person row owns its address rows; an address row owns its phone number rows
    - Soft delete: is_deleted/deleted/deleted_by are stamped, rows are never removed by the app
    - Column lengths mirror core/domain_constants.py

Design Decisions:
    - Separate rows for addresses and phone numbers (owned collections), cascade delete-orphan
      so replacing an address replaces its phone numbers too
    - selectin loading: the aggregate is always rebuilt with both addresses
    - address_type stored as its string value ("Home" / "Business")
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, false
from sqlalchemy.orm import Mapped, mapped_column, relationship

from contact_book.core.domain_constants import (
    MAX_ADDRESS_LENGTH, MAX_FULL_NAME_LENGTH, MAX_PHONE_NUMBER_LENGTH,
)
from contact_book.db.base import Base

AUDIT_ACTOR_LENGTH = 100


class PersonRecord(Base):
    """People table — aggregate root row."""
    __tablename__ = "people"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(
        String(MAX_FULL_NAME_LENGTH), nullable=False,
    )
    created: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    created_by: Mapped[str | None] = mapped_column(
        String(AUDIT_ACTOR_LENGTH), nullable=True,
    )
    last_modified: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    last_modified_by: Mapped[str | None] = mapped_column(
        String(AUDIT_ACTOR_LENGTH), nullable=True,
    )
    is_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false(), index=True,
    )
    deleted: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    deleted_by: Mapped[str | None] = mapped_column(
        String(AUDIT_ACTOR_LENGTH), nullable=True,
    )

    addresses: Mapped[list["AddressRecord"]] = relationship(
        "AddressRecord", back_populates="person",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="AddressRecord.id",
    )


class AddressRecord(Base):
    """Addresses table — one Home and one Business row per person."""
    __tablename__ = "addresses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    person_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("people.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    address_line: Mapped[str] = mapped_column(
        String(MAX_ADDRESS_LENGTH), nullable=False,
    )
    address_type: Mapped[str] = mapped_column(String(20), nullable=False)

    person: Mapped["PersonRecord"] = relationship(
        "PersonRecord", back_populates="addresses",
    )
    phone_numbers: Mapped[list["PhoneNumberRecord"]] = relationship(
        "PhoneNumberRecord", back_populates="address",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="PhoneNumberRecord.id",
    )


class PhoneNumberRecord(Base):
    """Phone numbers table — owned by one address row."""
    __tablename__ = "phone_numbers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    address_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("addresses.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    number: Mapped[str] = mapped_column(
        String(MAX_PHONE_NUMBER_LENGTH), nullable=False,
    )

    address: Mapped["AddressRecord"] = relationship(
        "AddressRecord", back_populates="phone_numbers",
    )
